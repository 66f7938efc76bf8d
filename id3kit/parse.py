"""Parsing of frame bodies and of the frame area of a tag."""

from __future__ import annotations

from dataclasses import dataclass, field

from .chapter import ChapterFrame
from .errors import BlankFrameError, BodyOverflowError, InvalidSizeFormatError
from .frames import (
    CommentFrame,
    PictureFrame,
    PopularimeterFrame,
    TextFrame,
    UFIDFrame,
    UnknownFrame,
    UnsynchronisedLyricsFrame,
    UserDefinedTextFrame,
)
from .header import FRAME_HEADER_SIZE, parse_frame_header
from .ids import must_frame_be_in_sequence
from .reader import FrameReader
from .synced_lyrics import SynchronisedLyricsFrame


@dataclass(frozen=True)
class Options:
    """How a tag is processed when it is read.

    parse: whether frames are parsed at all.
    parse_frames: ids or descriptions ("TPE1", "Artist", ...) of the only
    frames to parse; empty means all frames.
    """

    parse: bool = False
    parse_frames: tuple = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "parse_frames", tuple(self.parse_frames or ()))


_PARSERS = {
    "APIC": PictureFrame.parse,
    "COMM": CommentFrame.parse,
    "POPM": PopularimeterFrame.parse,
    "SYLT": SynchronisedLyricsFrame.parse,
    "TXXX": UserDefinedTextFrame.parse,
    "UFID": UFIDFrame.parse,
    "USLT": UnsynchronisedLyricsFrame.parse,
}


def _parse_body(frame_id, data, version):
    reader = FrameReader(data)
    if frame_id.startswith("T") and frame_id != "TXXX":
        return TextFrame.parse(reader)
    if frame_id == "CHAP":
        return ChapterFrame.parse(reader, version)
    parser = _PARSERS.get(frame_id)
    if parser is not None:
        return parser(reader)
    return UnknownFrame.parse(reader)


def parse_frame_body(frame_id, data):
    """Parse the body of a frame with the given id.

    Unknown ids give an UnknownFrame. Chapter sub-frames are read as ID3v2.4.
    Raises EOFError when the body is truncated.
    """
    return _parse_body(frame_id, data, 4)


def parse_frames(stream, frames_size, version, wanted_ids=None):
    """Yield (frame_id, frame) pairs read from the frame area of a tag.

    frames_size is the size of the frame area. When wanted_ids is given and
    not empty, only frames with those ids are parsed and reading stops once
    every wanted frame that occurs only once has been found. Reading stops
    quietly at padding, at a malformed frame size, at the end of the stream
    and at a truncated frame body; BodyOverflowError is raised when a frame
    reaches past the frame area.
    """
    wanted = set(wanted_ids or ())
    filtering = bool(wanted)
    synch_safe = version == 4
    remaining = frames_size

    while remaining > 0:
        try:
            header = parse_frame_header(stream, synch_safe)
        except (EOFError, BlankFrameError, InvalidSizeFormatError):
            return

        remaining -= FRAME_HEADER_SIZE + header.body_size
        if remaining < 0:
            raise BodyOverflowError()

        body = stream.read(header.body_size)
        if filtering and header.id not in wanted:
            continue

        try:
            frame = _parse_body(header.id, body, version)
        except EOFError:
            return

        yield header.id, frame

        if filtering and not must_frame_be_in_sequence(header.id):
            wanted.discard(header.id)
            if not wanted:
                return