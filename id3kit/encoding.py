"""Text encodings used by ID3v2 frames."""

from __future__ import annotations

from dataclasses import dataclass, field

BOM = b"\xff\xfe"
_BOM_BE = b"\xfe\xff"


@dataclass(frozen=True)
class Encoding:
    """A text encoding as identified by the encoding byte of a frame.

    Two encodings compare equal when their keys are equal.
    """

    name: str = field(compare=False)
    key: int
    termination_bytes: bytes = field(compare=False)

    def __str__(self):
        return self.name


ENCODING_ISO = Encoding("ISO-8859-1", 0, b"\x00")
ENCODING_UTF16 = Encoding("UTF-16 encoded Unicode with BOM", 1, b"\x00\x00")
ENCODING_UTF16BE = Encoding("UTF-16BE encoded Unicode without BOM", 2, b"\x00\x00")
ENCODING_UTF8 = Encoding("UTF-8 encoded Unicode", 3, b"\x00")

_ENCODINGS = {e.key: e for e in (ENCODING_ISO, ENCODING_UTF16, ENCODING_UTF16BE, ENCODING_UTF8)}


def get_encoding(key):
    """Return the encoding for an encoding byte; unknown keys mean UTF-8."""
    return _ENCODINGS.get(key, ENCODING_UTF8)


def _decode_utf16(data, codec):
    if len(data) % 2:
        data = data[:-1]
    return data.decode(codec, errors="replace")


def decode_text(data, encoding):
    """Decode bytes in the given encoding, ignoring one trailing terminator."""
    data = bytes(data)
    term = encoding.termination_bytes
    if term and data.endswith(term):
        data = data[: -len(term)]

    if encoding == ENCODING_UTF8:
        return data.decode("utf-8", errors="replace")
    if encoding == ENCODING_ISO:
        return data.decode("latin-1")
    if encoding == ENCODING_UTF16:
        if data in (BOM, _BOM_BE):
            return ""
        if data.startswith(BOM):
            return _decode_utf16(data[2:], "utf-16-le")
        if data.startswith(_BOM_BE):
            return _decode_utf16(data[2:], "utf-16-be")
        return _decode_utf16(data, "utf-16-be")
    return _decode_utf16(data, "utf-16-be")


def encode_text(text, encoding):
    """Encode text for a frame, without the termination bytes."""
    if encoding == ENCODING_UTF8:
        return text.encode("utf-8")
    if encoding == ENCODING_ISO:
        return text.encode("latin-1")
    if encoding == ENCODING_UTF16:
        encoded = _BOM_BE + text.encode("utf-16-be")
        if not encoded.endswith(b"\x00"):
            encoded += b"\x00"
        return encoded
    return text.encode("utf-16-be")


def encoded_size(text, encoding):
    """Return the number of bytes encode_text produces for text."""
    return len(encode_text(text, encoding))