"""Chapter frames (CHAP)."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .encoding import ENCODING_ISO, encode_text, encoded_size
from .errors import BlankFrameError, InvalidSizeFormatError
from .frames import Frame, TextFrame
from .header import FRAME_HEADER_SIZE, encode_frame, parse_frame_header
from .reader import FrameReader

IGNORED_OFFSET = 0xFFFFFFFF

_MILLISECOND = timedelta(milliseconds=1)
_TIMES = struct.Struct(">IIII")


def _millis(value):
    return (value // _MILLISECOND) & 0xFFFFFFFF


@dataclass(frozen=True)
class ChapterFrame(Frame):
    """A chapter frame (CHAP).

    Only the TIT2 (title) and TIT3 (description) sub-frames are kept; others
    are skipped. An offset equal to IGNORED_OFFSET means the corresponding
    time should be used instead.
    """

    element_id: str = ""
    start_time: timedelta = timedelta(0)
    end_time: timedelta = timedelta(0)
    start_offset: int = 0
    end_offset: int = 0
    title: Optional[TextFrame] = None
    description: Optional[TextFrame] = None

    def size(self):
        size = encoded_size(self.element_id, ENCODING_ISO) + 1 + _TIMES.size
        for sub in (self.title, self.description):
            if sub is not None:
                size += FRAME_HEADER_SIZE + sub.size()
        return size

    def unique_identifier(self):
        return self.element_id

    def to_bytes(self):
        body = (
            encode_text(self.element_id, ENCODING_ISO)
            + b"\x00"
            + _TIMES.pack(
                _millis(self.start_time),
                _millis(self.end_time),
                self.start_offset,
                self.end_offset,
            )
        )
        if self.title is not None:
            body += encode_frame("TIT2", self.title, True)
        if self.description is not None:
            body += encode_frame("TIT3", self.description, True)
        return body

    @classmethod
    def parse(cls, reader, version):
        """Parse a frame body from a FrameReader for a tag of the given version."""
        element_id = reader.read_text(ENCODING_ISO)
        start_time, end_time, start_offset, end_offset = _TIMES.unpack(reader.next(_TIMES.size))
        synch_safe = version == 4

        subframes = {}
        stream = io.BytesIO(reader.read_all())
        while True:
            try:
                header = parse_frame_header(stream, synch_safe)
            except (EOFError, BlankFrameError, InvalidSizeFormatError):
                break
            body = stream.read(header.body_size)
            if header.id in ("TIT2", "TIT3"):
                subframes[header.id] = TextFrame.parse(FrameReader(body))

        return cls(
            element_id=element_id.decode("latin-1"),
            start_time=timedelta(milliseconds=start_time),
            end_time=timedelta(milliseconds=end_time),
            start_offset=start_offset,
            end_offset=end_offset,
            title=subframes.get("TIT2"),
            description=subframes.get("TIT3"),
        )