"""The ID3v2 tag: a collection of frames read from and written to a stream."""

from __future__ import annotations

import contextlib
import io
import os
import shutil
import stat

from .encoding import ENCODING_ISO, ENCODING_UTF8
from .errors import NoFileError, NoTagError, UnsupportedVersionError
from .frames import TextFrame
from .header import FRAME_HEADER_SIZE, TAG_HEADER_SIZE, encode_frame, encode_tag_header, parse_header
from .ids import common_id, must_frame_be_in_sequence
from .parse import Options, parse_frames
from .sequence import Sequence

_COPY_BUFFER_SIZE = 128 * 1024
_TEMP_SUFFIX = "-id3v2"


class Tag:
    """An ID3v2 tag, optionally bound to the stream it was read from.

    A new tag is an empty ID3v2.4 tag. Text frames and other frames that may
    occur only once are stored by id; repeatable frames (pictures, comments,
    lyrics, ...) are kept in sequences unique by their unique identifier.
    """

    def __init__(self):
        self._frames = {}
        self._sequences = {}
        self._reader = None
        self._original_size = 0
        self._version = 4
        self.default_encoding = ENCODING_UTF8

    # Reading.

    def _init(self, stream, original_size, version):
        self.delete_all_frames()
        self._reader = stream
        self._original_size = original_size
        self._version = version
        self._set_default_encoding_for(version)

    def _set_default_encoding_for(self, version):
        self.default_encoding = ENCODING_UTF8 if version == 4 else ENCODING_ISO

    def _parse(self, stream, options):
        if stream is None:
            raise ValueError("stream is None")
        try:
            header = parse_header(stream)
        except (EOFError, NoTagError):
            self._init(stream, 0, 4)
            return
        if header.version < 3:
            raise UnsupportedVersionError()

        self._init(stream, TAG_HEADER_SIZE + header.frames_size, header.version)
        if not options.parse:
            return

        wanted = {self.common_id(description) for description in options.parse_frames}
        for frame_id, frame in parse_frames(stream, header.frames_size, self._version, wanted):
            self.add_frame(frame_id, frame)

    def reset(self, stream, options):
        """Delete all frames and read the tag in stream according to options."""
        self.delete_all_frames()
        self._parse(stream, options)

    # Adding and removing frames.

    def add_frame(self, frame_id, frame):
        """Add frame under frame_id; a blank id or a missing frame is ignored."""
        if not frame_id or frame is None:
            return
        if must_frame_be_in_sequence(frame_id):
            self._sequences.setdefault(frame_id, Sequence()).add_frame(frame)
        else:
            self._frames[frame_id] = frame

    def add_attached_picture(self, frame):
        """Add a picture frame (APIC)."""
        self.add_frame(self.common_id("Attached picture"), frame)

    def add_comment_frame(self, frame):
        """Add a comment frame (COMM)."""
        self.add_frame(self.common_id("Comments"), frame)

    def add_text_frame(self, frame_id, encoding, text):
        """Add a text frame with the given encoding and text."""
        self.add_frame(frame_id, TextFrame(encoding=encoding, text=text))

    def add_unsynchronised_lyrics_frame(self, frame):
        """Add an unsynchronised lyrics/text frame (USLT)."""
        self.add_frame(self.common_id("Unsynchronised lyrics/text transcription"), frame)

    def add_synchronised_lyrics_frame(self, frame):
        """Add a synchronised lyrics/text frame (SYLT)."""
        self.add_frame(self.common_id("Synchronised lyrics/text"), frame)

    def add_user_defined_text_frame(self, frame):
        """Add a user defined text frame (TXXX)."""
        self.add_frame(self.common_id("User defined text information frame"), frame)

    def add_ufid_frame(self, frame):
        """Add a unique file identifier frame (UFID)."""
        self.add_frame(self.common_id("Unique file identifier"), frame)

    def delete_all_frames(self):
        """Remove every frame from the tag."""
        self._frames = {}
        self._sequences = {}

    def delete_frames(self, frame_id):
        """Remove all frames with frame_id."""
        self._frames.pop(frame_id, None)
        self._sequences.pop(frame_id, None)

    # Looking frames up.

    def common_id(self, description):
        """Return the frame id for a description such as "Title" in this tag's version."""
        return common_id(description, self._version)

    def all_frames(self):
        """Return a dict from frame id to the list of frames with that id."""
        frames = {frame_id: [frame] for frame_id, frame in self._frames.items()}
        frames.update({frame_id: list(seq) for frame_id, seq in self._sequences.items()})
        return frames

    def get_frames(self, frame_id):
        """Return the frames with frame_id; an empty list if there are none."""
        if frame_id in self._frames:
            return [self._frames[frame_id]]
        if frame_id in self._sequences:
            return list(self._sequences[frame_id])
        return []

    def get_last_frame(self, frame_id):
        """Return the last frame with frame_id, or None."""
        if frame_id in self._frames:
            return self._frames[frame_id]
        frames = self.get_frames(frame_id)
        return frames[-1] if frames else None

    def get_text_frame(self, frame_id):
        """Return the text frame with frame_id, or an empty one if there is none."""
        frame = self.get_last_frame(frame_id)
        if frame is None:
            return TextFrame()
        if not isinstance(frame, TextFrame):
            raise TypeError(f"frame {frame_id!r} is not a text frame")
        return frame

    def _iter_frames(self):
        yield from self._frames.items()
        for frame_id, seq in self._sequences.items():
            for frame in seq:
                yield frame_id, frame

    def count(self):
        """Return the number of frames in the tag."""
        return len(self._frames) + sum(len(seq) for seq in self._sequences.values())

    def has_frames(self):
        """Tell whether the tag holds at least one frame."""
        return bool(self._frames) or bool(self._sequences)

    def size(self):
        """Return the size of the whole tag in bytes, or 0 if it has no frames."""
        if not self.has_frames():
            return 0
        return TAG_HEADER_SIZE + sum(
            FRAME_HEADER_SIZE + frame.size() for _, frame in self._iter_frames()
        )

    # Common text frames.

    def _text(self, description):
        return self.get_text_frame(self.common_id(description)).text

    def _set_text(self, description, text):
        self.add_text_frame(self.common_id(description), self.default_encoding, text)

    @property
    def title(self):
        """The title (TIT2)."""
        return self._text("Title")

    @title.setter
    def title(self, value):
        self._set_text("Title", value)

    @property
    def artist(self):
        """The lead artist (TPE1)."""
        return self._text("Artist")

    @artist.setter
    def artist(self, value):
        self._set_text("Artist", value)

    @property
    def album(self):
        """The album title (TALB)."""
        return self._text("Album/Movie/Show title")

    @album.setter
    def album(self, value):
        self._set_text("Album/Movie/Show title", value)

    @property
    def year(self):
        """The year (TYER in ID3v2.3, TDRC in ID3v2.4)."""
        return self._text("Year")

    @year.setter
    def year(self, value):
        self._set_text("Year", value)

    @property
    def genre(self):
        """The content type (TCON)."""
        return self._text("Content type")

    @genre.setter
    def genre(self, value):
        self._set_text("Content type", value)

    @property
    def version(self):
        """The major ID3v2 version; setting anything but 3 or 4 is ignored."""
        return self._version

    @version.setter
    def version(self, value):
        if value < 3 or value > 4:
            return
        self._version = value
        self._set_default_encoding_for(value)

    # Writing.

    def to_bytes(self):
        """Return the encoded tag, or b"" if it has no frames."""
        frames_size = self.size() - TAG_HEADER_SIZE
        if frames_size <= 0:
            return b""
        synch_safe = self._version == 4
        parts = [encode_tag_header(frames_size, self._version)]
        parts.extend(encode_frame(frame_id, frame, synch_safe) for frame_id, frame in self._iter_frames())
        return b"".join(parts)

    def write_to(self, stream):
        """Write the tag to stream and return the number of bytes written."""
        if stream is None:
            raise ValueError("stream is None")
        data = self.to_bytes()
        if data:
            stream.write(data)
        return len(data)

    def _file(self):
        reader = self._reader
        if isinstance(reader, io.IOBase) and isinstance(
            getattr(reader, "name", None), (str, bytes, os.PathLike)
        ):
            return reader
        raise NoFileError()

    def save(self):
        """Rewrite the file the tag was opened from with the current tag.

        The audio after the original tag is kept as it is. If the tag has no
        frames, only the audio is written. Raises NoFileError when the tag
        was not read from a file.
        """
        original = self._file()
        path = os.fsdecode(os.fspath(original.name))
        mode = stat.S_IMODE(os.fstat(original.fileno()).st_mode)
        temp_path = path + _TEMP_SUFFIX

        try:
            with open(temp_path, "wb") as new_file:
                os.chmod(temp_path, mode)
                tag_size = self.write_to(new_file)
                original.seek(self._original_size)
                shutil.copyfileobj(original, new_file, _COPY_BUFFER_SIZE)
            original.close()
            os.replace(temp_path, path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.remove(temp_path)
            raise

        self._reader = open(path, "rb")
        self._original_size = tag_size

    def close(self):
        """Close the file the tag was opened from; NoFileError if there is none."""
        self._file().close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        try:
            reader = self._file()
        except NoFileError:
            return None
        reader.close()
        return None


def parse_reader(stream, options):
    """Read a tag from stream; a stream without a tag gives an empty ID3v2.4 tag."""
    tag = Tag()
    tag._parse(stream, options)
    return tag


def open_tag(path, options):
    """Open the file at path and read its tag; the tag keeps the file open."""
    file = open(path, "rb")
    try:
        return parse_reader(file, options)
    except BaseException:
        file.close()
        raise


def new_empty_tag():
    """Return an empty ID3v2.4 tag that is not bound to any stream."""
    return Tag()