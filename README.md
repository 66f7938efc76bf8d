# id3kit

A small library with no dependencies for reading, editing and writing ID3v2
tags (versions 2.3 and 2.4) at the start of MP3 files.

## Installation

```
pip install id3kit
```

## Reading a tag

```python
from id3kit.parse import Options
from id3kit.tag import open_tag

with open_tag("song.mp3", Options(parse=True)) as tag:
    print(tag.artist, "-", tag.title)
    for frame in tag.get_frames(tag.common_id("Comments")):
        print(frame.language, frame.text)
```

`open_tag` keeps the file open; leaving the `with` block (or calling
`tag.close()`) closes it. `Options(parse=False)`, the default, reads only the
tag header and adds no frames.

To parse only some frames, name them by ID (`"TPE1"`) or by description
(`"Artist"`):

```python
tag = open_tag("song.mp3", Options(parse=True, parse_frames=["Artist", "Title"]))
```

A stream that does not start with an ID3v2 tag gives an empty ID3v2.4 tag.
Tags older than ID3v2.3 raise `UnsupportedVersionError`.

## Editing and saving

```python
from id3kit.encoding import ENCODING_UTF8
from id3kit.frames import CommentFrame, PictureFrame, PictureType
from id3kit.parse import Options
from id3kit.tag import open_tag

with open_tag("song.mp3", Options(parse=True)) as tag:
    tag.artist = "Artist"
    tag.title = "Title"
    tag.add_comment_frame(CommentFrame(
        encoding=ENCODING_UTF8,
        language="eng",
        description="My opinion",
        text="Very good song",
    ))
    with open("cover.jpg", "rb") as cover:
        tag.add_attached_picture(PictureFrame(
            encoding=ENCODING_UTF8,
            mime_type="image/jpeg",
            picture_type=PictureType.FRONT_COVER,
            description="Front cover",
            picture=cover.read(),
        ))
    tag.save()
```

`save()` writes the new tag followed by the untouched audio data to a
temporary file next to the original, keeps the original's permission bits
and then replaces the original. A tag with no frames is saved as the audio
alone. `save()` and `close()` raise `NoFileError` for a tag that was not
read from a file.

The properties `title`, `artist`, `album`, `year` and `genre` read and set
text frames; setting uses `tag.default_encoding` (UTF-8 for ID3v2.4,
ISO-8859-1 for ID3v2.3). `tag.version` may be set to 3 or 4; other values
are ignored. `tag.common_id(description)` maps descriptions such as
`"Year"` to the frame id for the tag's version (`TYER` or `TDRC`).

## Tags in memory

```python
import io
from id3kit.tag import new_empty_tag, parse_reader
from id3kit.parse import Options

tag = new_empty_tag()
tag.title = "Title"
data = tag.to_bytes()

again = parse_reader(io.BytesIO(data), Options(parse=True))
assert again.title == "Title"
```

`write_to(stream)` writes the same bytes and returns their count. Other
lookups: `get_frames(id)`, `get_last_frame(id)`, `get_text_frame(id)`,
`all_frames()`, `count()`, `has_frames()`, `size()`, `delete_frames(id)`,
`delete_all_frames()` and `reset(stream, options)`.

## Frames

All frames are frozen dataclasses with `size()`, `unique_identifier()`,
`to_bytes()`, `write_to(stream)` and a `parse(reader)` class method taking a
`id3kit.reader.FrameReader`.

- `id3kit.frames`: `TextFrame` (`T***`), `UserDefinedTextFrame` (`TXXX`),
  `CommentFrame` (`COMM`), `PictureFrame` (`APIC`),
  `UnsynchronisedLyricsFrame` (`USLT`), `PopularimeterFrame` (`POPM`, with
  an integer counter of at least four bytes), `UFIDFrame` (`UFID`) and
  `UnknownFrame`, which keeps the raw body of any other frame so it survives
  a round trip.
- `id3kit.synced_lyrics`: `SynchronisedLyricsFrame` (`SYLT`) with
  `SyncedText` entries and `TimestampFormat`.
- `id3kit.chapter`: `ChapterFrame` (`CHAP`) with `timedelta` start and end
  times, offsets, and optional `TIT2` title and `TIT3` description
  sub-frames; other sub-frames are skipped.

Frames that may occur more than once (pictures, comments, lyrics, `TXXX`,
...) are kept per id in an `id3kit.sequence.Sequence`; adding one with the
same unique identifier replaces the earlier one. Writing a comment or lyrics
frame whose language is not three bytes long raises
`InvalidLanguageLengthError`.

Lower-level helpers live in `id3kit.encoding` (text encodings),
`id3kit.size` (synchsafe and plain size fields), `id3kit.header` (tag and
frame headers), `id3kit.ids` (description tables) and `id3kit.parse`
(`parse_frame_body`, `parse_frames`). Errors derive from
`id3kit.errors.ID3Error`.

## What it does not do

- There is no command-line tool; this is a library only.
- ID3v1 tags and ID3v2.2 tags are not read or written.
- Tag and frame header flags are written as zero and not interpreted when
  read; extended headers, unsynchronisation, compression and encryption are
  not handled.