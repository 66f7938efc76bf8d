import pytest

from id3kit.encoding import BOM, ENCODING_ISO, ENCODING_UTF16, decode_text
from id3kit.reader import FrameReader

BS = bytes([0, 11, 22, 33, 44, 55, 77, 88, 55, 55, 66, 77, 88])


def test_read_till_delim():
    reader = FrameReader(BS)
    expected = BS[: BS.index(55)]
    assert reader.read_till_delim(55) == expected
    assert reader.remaining() == len(BS) - len(expected)


def test_read_till_zero():
    reader = FrameReader(BS)
    assert reader.read_till_delim(0) == b""
    assert reader.remaining() == len(BS)


def test_read_text_utf16_with_leading_empty_string():
    sample1 = BOM + ENCODING_UTF16.termination_bytes
    sample2 = BOM + bytes([0x43, 0x00]) + ENCODING_UTF16.termination_bytes
    reader = FrameReader(sample1 + sample2)

    assert decode_text(reader.read_text(ENCODING_UTF16), ENCODING_UTF16) == ""
    assert reader.remaining() == len(sample2)

    assert decode_text(reader.read_text(ENCODING_UTF16), ENCODING_UTF16) == "C"
    assert reader.remaining() == 0


def test_next():
    reader = FrameReader(BS)
    read = reader.next(5)
    assert read == BS[:5]
    assert reader.remaining() == len(BS) - 5


def test_next_zero_and_too_many():
    reader = FrameReader(BS)
    assert reader.next(0) == b""
    with pytest.raises(EOFError):
        reader.next(len(BS) + 1)
    assert reader.remaining() == len(BS)


def test_read_till_delim_eof():
    reader = FrameReader(BS)
    with pytest.raises(EOFError):
        reader.read_till_delim(234)


def test_read_till_delims():
    reader = FrameReader(BS)
    read = reader.read_till_delims(bytes([55, 66]))
    assert len(read) == 9
    assert read == BS[:9]
    assert reader.remaining() == len(BS) - len(read)


def test_read_till_delims_empty():
    reader = FrameReader(BS)
    assert reader.read_till_delims(b"") == b""
    assert reader.remaining() == len(BS)


def test_read_byte_and_read_all():
    reader = FrameReader(b"\x07abc")
    assert reader.read_byte() == 7
    assert reader.read_all() == b"abc"
    assert reader.remaining() == 0
    with pytest.raises(EOFError):
        reader.read_byte()


def test_discard():
    reader = FrameReader(b"abcdef")
    reader.discard(4)
    assert reader.read_all() == b"ef"
    with pytest.raises(EOFError):
        reader.discard(1)


def test_read_text_iso():
    reader = FrameReader(b"image/jpeg\x00\x03rest")
    assert reader.read_text(ENCODING_ISO) == b"image/jpeg"
    assert reader.read_byte() == 3
    assert reader.read_all() == b"rest"


def test_read_text_without_terminator():
    reader = FrameReader(b"no terminator")
    with pytest.raises(EOFError):
        reader.read_text(ENCODING_ISO)