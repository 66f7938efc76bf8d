"""Encoding and decoding of ID3v2 size fields."""

from .errors import InvalidSizeFormatError, SizeOverflowError

SIZE_LENGTH = 4
SYNCH_SAFE_MAX_SIZE = 0x0FFFFFFF
SYNCH_UNSAFE_MAX_SIZE = 0xFFFFFFFF


def parse_size(data, synch_safe):
    """Decode a size field of at most four bytes."""
    if len(data) > SIZE_LENGTH:
        raise InvalidSizeFormatError()
    base = 7 if synch_safe else 8
    size = 0
    for b in data:
        if synch_safe and b & 0x80:
            raise InvalidSizeFormatError()
        size = (size << base) | b
    return size


def encode_size(size, synch_safe):
    """Encode size as a four-byte field, synchsafe or plain big-endian."""
    limit = SYNCH_SAFE_MAX_SIZE if synch_safe else SYNCH_UNSAFE_MAX_SIZE
    if size < 0 or size > limit:
        raise SizeOverflowError()
    if synch_safe:
        return bytes((size >> shift) & 0x7F for shift in (21, 14, 7, 0))
    return size.to_bytes(SIZE_LENGTH, "big")