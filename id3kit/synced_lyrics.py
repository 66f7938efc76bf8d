"""Synchronised lyrics/text frames (SYLT)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .encoding import ENCODING_UTF8, Encoding, decode_text, encode_text, encoded_size, get_encoding
from .errors import InvalidLanguageLengthError

CONTENT_TYPES = {
    0: "Other",
    1: "Lyrics",
    2: "Transcription",
    3: "Movement",
    4: "Events",
    5: "Chord",
    6: "Trivia",
    7: "WebpageUrls",
    8: "ImageUrls",
}

_TIMESTAMP_SIZE = 4


class TimestampFormat(IntEnum):
    """Unit of the timestamps in a synchronised lyrics frame."""

    ABSOLUTE_MPEG_FRAMES = 1
    ABSOLUTE_MILLISECONDS = 2


def _timestamp_format(value):
    try:
        return TimestampFormat(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class SyncedText:
    """One piece of text together with the moment it applies from."""

    text: str = ""
    timestamp: int = 0


@dataclass(frozen=True)
class SynchronisedLyricsFrame:
    """A synchronised lyrics/text frame (SYLT).

    The language must be a three-letter ISO 639-2 code.
    """

    encoding: Encoding = ENCODING_UTF8
    language: str = ""
    timestamp_format: int = TimestampFormat.ABSOLUTE_MILLISECONDS
    content_type: int = 0
    content_descriptor: str = ""
    synchronized_texts: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "synchronized_texts", tuple(self.synchronized_texts))

    def size(self):
        term = len(self.encoding.termination_bytes)
        texts = sum(
            encoded_size(item.text, self.encoding) + term + _TIMESTAMP_SIZE
            for item in self.synchronized_texts
        )
        return (
            1
            + len(self.language.encode("utf-8"))
            + 1
            + 1
            + encoded_size(self.content_descriptor, self.encoding)
            + term
            + texts
        )

    def unique_identifier(self):
        return self.language + self.content_descriptor

    def to_bytes(self):
        language = self.language.encode("utf-8")
        if len(language) != 3:
            raise InvalidLanguageLengthError()
        term = self.encoding.termination_bytes
        parts = [
            bytes([self.encoding.key]),
            language,
            bytes([int(self.timestamp_format), self.content_type]),
            encode_text(self.content_descriptor, self.encoding),
            term,
        ]
        for item in self.synchronized_texts:
            parts.append(encode_text(item.text, self.encoding))
            parts.append(term)
            parts.append(item.timestamp.to_bytes(_TIMESTAMP_SIZE, "big"))
        return b"".join(parts)

    def write_to(self, stream):
        """Write the frame body to stream and return the number of bytes written."""
        body = self.to_bytes()
        stream.write(body)
        return len(body)

    @classmethod
    def parse(cls, reader):
        """Parse a frame body from a FrameReader; EOFError if it is truncated."""
        encoding = get_encoding(reader.read_byte())
        language = reader.next(3)
        timestamp_format = reader.read_byte()
        content_type = reader.read_byte()
        content_descriptor = reader.read_text(encoding)

        term = encoding.termination_bytes
        texts = []
        while True:
            try:
                raw = reader.read_till_delims(term)
            except EOFError:
                break
            reader.next(len(term))
            timestamp = int.from_bytes(reader.next(_TIMESTAMP_SIZE), "big")
            texts.append(SyncedText(text=decode_text(raw, encoding), timestamp=timestamp))

        return cls(
            encoding=encoding,
            language=bytes(language).decode("utf-8", errors="replace"),
            timestamp_format=_timestamp_format(timestamp_format),
            content_type=content_type,
            content_descriptor=decode_text(content_descriptor, encoding),
            synchronized_texts=tuple(texts),
        )