"""Frame types: text, comment, picture, popularimeter, UFID, lyrics and unknown frames."""

from __future__ import annotations

import abc
import uuid
from dataclasses import dataclass, field
from enum import IntEnum

from .encoding import ENCODING_ISO, ENCODING_UTF8, Encoding, decode_text, encode_text, encoded_size, get_encoding
from .errors import InvalidLanguageLengthError


class PictureType(IntEnum):
    """Picture types of an attached picture frame."""

    OTHER = 0
    FILE_ICON = 1
    OTHER_FILE_ICON = 2
    FRONT_COVER = 3
    BACK_COVER = 4
    LEAFLET_PAGE = 5
    MEDIA = 6
    LEAD_ARTIST_SOLOIST = 7
    ARTIST_PERFORMER = 8
    CONDUCTOR = 9
    BAND_ORCHESTRA = 10
    COMPOSER = 11
    LYRICIST_TEXT_WRITER = 12
    RECORDING_LOCATION = 13
    DURING_RECORDING = 14
    DURING_PERFORMANCE = 15
    MOVIE_SCREEN_CAPTURE = 16
    BRIGHT_COLOURED_FISH = 17
    ILLUSTRATION = 18
    BAND_ARTIST_LOGOTYPE = 19
    PUBLISHER_STUDIO_LOGOTYPE = 20


def _raw(text):
    return text.encode("utf-8")


def _unraw(data):
    return bytes(data).decode("utf-8", errors="replace")


def _check_language(language):
    if len(_raw(language)) != 3:
        raise InvalidLanguageLengthError()


class Frame(abc.ABC):
    """Common interface of all frames."""

    @abc.abstractmethod
    def size(self):
        """Return the size of the frame body in bytes."""

    @abc.abstractmethod
    def unique_identifier(self):
        """Return the string that tells this frame apart from others with the same id."""

    @abc.abstractmethod
    def to_bytes(self):
        """Return the encoded frame body."""

    def write_to(self, stream):
        """Write the frame body to stream and return the number of bytes written."""
        body = self.to_bytes()
        stream.write(body)
        return len(body)


@dataclass(frozen=True)
class TextFrame(Frame):
    """A text frame (any T*** frame except TXXX)."""

    encoding: Encoding = ENCODING_UTF8
    text: str = ""

    def size(self):
        return 1 + encoded_size(self.text, self.encoding) + len(self.encoding.termination_bytes)

    def unique_identifier(self):
        return "ID"

    def to_bytes(self):
        return (
            bytes([self.encoding.key])
            + encode_text(self.text, self.encoding)
            + self.encoding.termination_bytes
        )

    @classmethod
    def parse(cls, reader):
        encoding = get_encoding(reader.read_byte())
        return cls(encoding=encoding, text=decode_text(reader.read_all(), encoding))


@dataclass(frozen=True)
class CommentFrame(Frame):
    """A comment frame (COMM)."""

    encoding: Encoding = ENCODING_UTF8
    language: str = ""
    description: str = ""
    text: str = ""

    def size(self):
        return (
            1
            + len(_raw(self.language))
            + encoded_size(self.description, self.encoding)
            + len(self.encoding.termination_bytes)
            + encoded_size(self.text, self.encoding)
        )

    def unique_identifier(self):
        return self.language + self.description

    def to_bytes(self):
        _check_language(self.language)
        return (
            bytes([self.encoding.key])
            + _raw(self.language)
            + encode_text(self.description, self.encoding)
            + self.encoding.termination_bytes
            + encode_text(self.text, self.encoding)
        )

    @classmethod
    def parse(cls, reader):
        encoding = get_encoding(reader.read_byte())
        language = reader.next(3)
        description = reader.read_text(encoding)
        text = reader.read_all()
        return cls(
            encoding=encoding,
            language=_unraw(language),
            description=decode_text(description, encoding),
            text=decode_text(text, encoding),
        )


@dataclass(frozen=True)
class PictureFrame(Frame):
    """An attached picture frame (APIC)."""

    encoding: Encoding = ENCODING_UTF8
    mime_type: str = ""
    picture_type: int = PictureType.OTHER
    description: str = ""
    picture: bytes = b""

    def size(self):
        return (
            1
            + len(_raw(self.mime_type))
            + 1
            + 1
            + encoded_size(self.description, self.encoding)
            + len(self.encoding.termination_bytes)
            + len(self.picture)
        )

    def unique_identifier(self):
        return self.description

    def to_bytes(self):
        return (
            bytes([self.encoding.key])
            + _raw(self.mime_type)
            + b"\x00"
            + bytes([int(self.picture_type)])
            + encode_text(self.description, self.encoding)
            + self.encoding.termination_bytes
            + bytes(self.picture)
        )

    @classmethod
    def parse(cls, reader):
        encoding = get_encoding(reader.read_byte())
        mime_type = reader.read_text(ENCODING_ISO)
        picture_type = reader.read_byte()
        description = reader.read_text(encoding)
        picture = reader.read_all()
        return cls(
            encoding=encoding,
            mime_type=_unraw(mime_type),
            picture_type=picture_type,
            description=decode_text(description, encoding),
            picture=picture,
        )


@dataclass(frozen=True)
class PopularimeterFrame(Frame):
    """A popularimeter frame (POPM).

    The rating runs from 1 (worst) to 255 (best); 0 means unknown.
    The counter is the number of times the file was played.
    """

    email: str = ""
    rating: int = 0
    counter: int = 0

    def _counter_bytes(self):
        value = abs(self.counter)
        data = value.to_bytes((value.bit_length() + 7) // 8, "big")
        # The counter takes at least four bytes.
        return data.rjust(4, b"\x00")

    def size(self):
        return len(_raw(self.email)) + 1 + 1 + len(self._counter_bytes())

    def unique_identifier(self):
        return self.email

    def to_bytes(self):
        return _raw(self.email) + b"\x00" + bytes([self.rating]) + self._counter_bytes()

    @classmethod
    def parse(cls, reader):
        data = reader.read_all()
        email, found, tail = data.partition(b"\x00")
        if not found or not tail:
            return cls(email=_unraw(email), rating=0, counter=0)
        return cls(
            email=_unraw(email),
            rating=tail[0],
            counter=int.from_bytes(tail[1:], "big"),
        )


@dataclass(frozen=True)
class UFIDFrame(Frame):
    """A unique file identifier frame (UFID)."""

    owner_identifier: str = ""
    identifier: bytes = b""

    def size(self):
        return (
            encoded_size(self.owner_identifier, ENCODING_ISO)
            + len(ENCODING_ISO.termination_bytes)
            + len(self.identifier)
        )

    def unique_identifier(self):
        return self.owner_identifier

    def to_bytes(self):
        return (
            encode_text(self.owner_identifier, ENCODING_ISO)
            + ENCODING_ISO.termination_bytes
            + bytes(self.identifier)
        )

    @classmethod
    def parse(cls, reader):
        owner = reader.read_text(ENCODING_ISO)
        identifier = reader.read_all()
        return cls(owner_identifier=decode_text(owner, ENCODING_ISO), identifier=identifier)


@dataclass(frozen=True)
class UnknownFrame(Frame):
    """A frame kept as its raw, unparsed body."""

    body: bytes = b""

    def size(self):
        return len(self.body)

    def unique_identifier(self):
        # The real identifier is unknown, so every call yields a fresh one.
        return uuid.uuid4().hex

    def to_bytes(self):
        return bytes(self.body)

    @classmethod
    def parse(cls, reader):
        return cls(body=reader.read_all())


@dataclass(frozen=True)
class UnsynchronisedLyricsFrame(Frame):
    """An unsynchronised lyrics/text transcription frame (USLT)."""

    encoding: Encoding = ENCODING_UTF8
    language: str = ""
    content_descriptor: str = ""
    lyrics: str = ""

    def size(self):
        return (
            1
            + len(_raw(self.language))
            + encoded_size(self.content_descriptor, self.encoding)
            + len(self.encoding.termination_bytes)
            + encoded_size(self.lyrics, self.encoding)
        )

    def unique_identifier(self):
        return self.language + self.content_descriptor

    def to_bytes(self):
        _check_language(self.language)
        return (
            bytes([self.encoding.key])
            + _raw(self.language)
            + encode_text(self.content_descriptor, self.encoding)
            + self.encoding.termination_bytes
            + encode_text(self.lyrics, self.encoding)
        )

    @classmethod
    def parse(cls, reader):
        encoding = get_encoding(reader.read_byte())
        language = reader.next(3)
        content_descriptor = reader.read_text(encoding)
        lyrics = reader.read_all()
        return cls(
            encoding=encoding,
            language=_unraw(language),
            content_descriptor=decode_text(content_descriptor, encoding),
            lyrics=decode_text(lyrics, encoding),
        )


@dataclass(frozen=True)
class UserDefinedTextFrame(Frame):
    """A user defined text frame (TXXX); descriptions must be unique."""

    encoding: Encoding = ENCODING_UTF8
    description: str = ""
    value: str = field(default="")

    def size(self):
        return (
            1
            + encoded_size(self.description, self.encoding)
            + len(self.encoding.termination_bytes)
            + encoded_size(self.value, self.encoding)
        )

    def unique_identifier(self):
        return self.description

    def to_bytes(self):
        return (
            bytes([self.encoding.key])
            + encode_text(self.description, self.encoding)
            + self.encoding.termination_bytes
            + encode_text(self.value, self.encoding)
        )

    @classmethod
    def parse(cls, reader):
        encoding = get_encoding(reader.read_byte())
        description = reader.read_text(encoding)
        value = reader.read_all()
        return cls(
            encoding=encoding,
            description=decode_text(description, encoding),
            value=decode_text(value, encoding),
        )