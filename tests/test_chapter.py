from datetime import timedelta

import pytest

from id3kit.chapter import IGNORED_OFFSET, ChapterFrame
from id3kit.encoding import ENCODING_UTF8
from id3kit.frames import TextFrame, UnknownFrame
from id3kit.header import encode_frame
from id3kit.reader import FrameReader

SECOND = timedelta(milliseconds=1000)

CASES = {
    "element id only": dict(
        element_id="chap0", start_time=timedelta(0), end_time=SECOND, start_offset=0, end_offset=0
    ),
    "with title": dict(
        element_id="chap0",
        start_time=timedelta(0),
        end_time=SECOND,
        start_offset=0,
        end_offset=0,
        title=TextFrame(encoding=ENCODING_UTF8, text="chapter 0"),
    ),
    "with description": dict(
        element_id="chap0",
        start_time=timedelta(0),
        end_time=SECOND,
        start_offset=0,
        end_offset=0,
        description=TextFrame(encoding=ENCODING_UTF8, text="chapter 0"),
    ),
    "with title and description": dict(
        element_id="chap0",
        start_time=timedelta(0),
        end_time=SECOND,
        start_offset=0,
        end_offset=0,
        title=TextFrame(encoding=ENCODING_UTF8, text="chapter 0 title"),
        description=TextFrame(encoding=ENCODING_UTF8, text="chapter 0 description"),
    ),
    "non-zero time and offset": dict(
        element_id="chap0", start_time=SECOND, end_time=SECOND, start_offset=10, end_offset=10
    ),
}


@pytest.mark.parametrize("fields", list(CASES.values()), ids=list(CASES))
@pytest.mark.parametrize("version", [3, 4])
def test_round_trip(fields, version):
    frame = ChapterFrame(**fields)
    parsed = ChapterFrame.parse(FrameReader(frame.to_bytes()), version)
    assert parsed.element_id == fields["element_id"]
    if "title" in fields:
        assert parsed.title.text == fields["title"].text
    else:
        assert parsed.title is None
    if "description" in fields:
        assert parsed.description.text == fields["description"].text
    else:
        assert parsed.description is None
    assert parsed.start_time == fields["start_time"]
    assert parsed.end_time == fields["end_time"]
    assert parsed.start_offset == fields["start_offset"]
    assert parsed.end_offset == fields["end_offset"]


@pytest.mark.parametrize("fields", list(CASES.values()), ids=list(CASES))
def test_size_matches_body_length(fields):
    frame = ChapterFrame(**fields)
    assert frame.size() == len(frame.to_bytes())


def test_wire_bytes_element_only():
    frame = ChapterFrame(**CASES["element id only"])
    assert frame.to_bytes() == (
        b"chap0\x00" + b"\x00\x00\x00\x00" + b"\x00\x00\x03\xe8" + b"\x00" * 8
    )


def test_unique_identifier_is_element_id():
    assert ChapterFrame(element_id="chap7").unique_identifier() == "chap7"


def test_ignored_offset_round_trip():
    frame = ChapterFrame(element_id="c", start_offset=IGNORED_OFFSET, end_offset=IGNORED_OFFSET)
    parsed = ChapterFrame.parse(FrameReader(frame.to_bytes()), 4)
    assert parsed.start_offset == 0xFFFFFFFF
    assert parsed.end_offset == 0xFFFFFFFF


def test_other_subframes_are_skipped():
    base = ChapterFrame(element_id="chap1", end_time=SECOND)
    title = TextFrame(encoding=ENCODING_UTF8, text="Intro")
    data = (
        base.to_bytes()
        + encode_frame("WXXX", UnknownFrame(body=b"TIT2 not a frame"), True)
        + encode_frame("TIT2", title, True)
    )
    parsed = ChapterFrame.parse(FrameReader(data), 4)
    assert parsed.title == title
    assert parsed.description is None


def test_parse_truncated_raises():
    with pytest.raises(EOFError):
        ChapterFrame.parse(FrameReader(b"chap0\x00\x00\x00"), 4)