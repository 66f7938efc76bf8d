import io

import pytest

from id3kit.errors import (
    BlankFrameError,
    InvalidSizeFormatError,
    NoTagError,
    SmallHeaderSizeError,
)
from id3kit.header import (
    FrameHeader,
    TagHeader,
    encode_frame,
    encode_frame_header,
    encode_tag_header,
    parse_frame_header,
    parse_header,
)

TH = TagHeader(frames_size=15351, version=4)
THB = bytes([73, 68, 51, 4, 0, 0, 0, 0, 0x77, 0x77])


class _BodyFrame:
    def __init__(self, body):
        self.body = body

    def size(self):
        return len(self.body)

    def to_bytes(self):
        return self.body


def test_parse_header():
    assert parse_header(io.BytesIO(THB)) == TH


def test_write_tag_header():
    assert encode_tag_header(15351, 4) == THB


def test_small_tag_header():
    with pytest.raises(SmallHeaderSizeError):
        parse_header(io.BytesIO(bytes([0, 0, 0])))


def test_is_not_id3():
    with pytest.raises(NoTagError):
        parse_header(io.BytesIO(bytes(10)))


def test_empty_stream():
    with pytest.raises(EOFError):
        parse_header(io.BytesIO(b""))


def test_parse_frame_header():
    stream = io.BytesIO(b"TIT2\x00\x00\x00\x06\x00\x00rest")
    assert parse_frame_header(stream, True) == FrameHeader("TIT2", 6)
    assert stream.read() == b"rest"


def test_parse_frame_header_padding_is_blank():
    with pytest.raises(BlankFrameError):
        parse_frame_header(io.BytesIO(bytes(10)), True)


def test_parse_frame_header_invalid_synch_safe_size():
    with pytest.raises(InvalidSizeFormatError):
        parse_frame_header(io.BytesIO(b"TIT2\xff\xff\xff\xff\x00\x00"), True)


def test_parse_frame_header_eof():
    with pytest.raises(EOFError):
        parse_frame_header(io.BytesIO(b"TIT"), True)


def test_encode_frame_header_unsafe_size():
    assert encode_frame_header("TIT2", 256, False) == b"TIT2\x00\x00\x01\x00\x00\x00"
    assert encode_frame_header("TIT2", 256, True) == b"TIT2\x00\x00\x02\x00\x00\x00"


def test_encode_frame_round_trip():
    body = b"\x03Title"
    data = encode_frame("TIT2", _BodyFrame(body), True)
    stream = io.BytesIO(data)
    header = parse_frame_header(stream, True)
    assert header == FrameHeader("TIT2", len(body))
    assert stream.read(header.body_size) == body