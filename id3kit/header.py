"""Tag and frame headers."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import BlankFrameError, NoTagError, SmallHeaderSizeError
from .size import encode_size, parse_size

TAG_HEADER_SIZE = 10
FRAME_HEADER_SIZE = 10
ID3_IDENTIFIER = b"ID3"


@dataclass(frozen=True)
class TagHeader:
    """The size of all frames in a tag and the tag's major version."""

    frames_size: int
    version: int


@dataclass(frozen=True)
class FrameHeader:
    """The id and body size of a frame."""

    id: str
    body_size: int


def parse_header(stream):
    """Read a tag header from stream.

    Raises EOFError on an empty stream, SmallHeaderSizeError on a short one
    and NoTagError when the stream does not start with an ID3v2 tag.
    """
    data = stream.read(TAG_HEADER_SIZE)
    if not data:
        raise EOFError("stream is empty")
    if len(data) < TAG_HEADER_SIZE:
        raise SmallHeaderSizeError()
    if data[:3] != ID3_IDENTIFIER:
        raise NoTagError()
    # The tag header size is always synchsafe.
    return TagHeader(frames_size=parse_size(data[6:10], True), version=data[3])


def encode_tag_header(frames_size, version):
    """Return the ten bytes of a tag header with no flags set."""
    return ID3_IDENTIFIER + bytes([version, 0, 0]) + encode_size(frames_size, True)


def parse_frame_header(stream, synch_safe):
    """Read a frame header from stream.

    Raises EOFError when the stream ends, BlankFrameError for padding and
    InvalidSizeFormatError for a malformed size.
    """
    data = stream.read(FRAME_HEADER_SIZE)
    if len(data) < FRAME_HEADER_SIZE:
        raise EOFError("stream ended inside a frame header")
    frame_id = data[:4].decode("latin-1")
    body_size = parse_size(data[4:8], synch_safe)
    if not frame_id or body_size == 0:
        raise BlankFrameError()
    return FrameHeader(id=frame_id, body_size=body_size)


def encode_frame_header(frame_id, size, synch_safe):
    """Return the ten bytes of a frame header with no flags set."""
    return frame_id.encode("utf-8") + encode_size(size, synch_safe) + b"\x00\x00"


def encode_frame(frame_id, frame, synch_safe):
    """Return a whole frame: header followed by the frame's body."""
    body = frame.to_bytes()
    return encode_frame_header(frame_id, frame.size(), synch_safe) + body