"""Common frame ids for ID3v2.3 and ID3v2.4 and rules about repeatable frames."""

from __future__ import annotations

from types import MappingProxyType

# Each group maps a frame id to the descriptions that name it.
_SHARED = {
    "APIC": ("Attached picture",),
    "COMM": ("Comments",),
    "POPM": ("Popularimeter",),
    "SYLT": ("Synchronised lyrics/text",),
    "TALB": ("Album/Movie/Show title",),
    "TBPM": ("BPM",),
    "TCOM": ("Composer",),
    "TCON": ("Content type", "Genre"),
    "TCOP": ("Copyright message",),
    "TDLY": ("Playlist delay",),
    "TENC": ("Encoded by",),
    "TEXT": ("Lyricist/Text writer",),
    "TFLT": ("File type",),
    "TIT1": ("Content group description",),
    "TIT2": ("Title/Songname/Content description", "Title"),
    "TIT3": ("Subtitle/Description refinement",),
    "TKEY": ("Initial key",),
    "TLAN": ("Language",),
    "TLEN": ("Length",),
    "TMED": ("Media type",),
    "TOAL": ("Original album/movie/show title",),
    "TOFN": ("Original filename",),
    "TOLY": ("Original lyricist/text writer",),
    "TOPE": ("Original artist/performer",),
    "TOWN": ("File owner/licensee",),
    "TPE1": ("Lead artist/Lead performer/Soloist/Performing group", "Artist"),
    "TPE2": ("Band/Orchestra/Accompaniment",),
    "TPE3": ("Conductor/performer refinement",),
    "TPE4": ("Interpreted, remixed, or otherwise modified by",),
    "TPOS": ("Part of a set",),
    "TPUB": ("Publisher",),
    "TRCK": ("Track number/Position in set",),
    "TRSN": ("Internet radio station name",),
    "TRSO": ("Internet radio station owner",),
    "TSRC": ("ISRC",),
    "TSSE": ("Software/Hardware and settings used for encoding",),
    "TXXX": ("User defined text information frame",),
    "UFID": ("Unique file identifier",),
    "USLT": ("Unsynchronised lyrics/text transcription",),
}

_V23_ONLY = {
    "TDAT": ("Date",),
    "TIME": ("Time",),
    "TORY": ("Original release year",),
    "TRDA": ("Recording dates",),
    "TSIZ": ("Size",),
    "TYER": ("Year",),
}

_V24_ONLY = {
    "TDEN": ("Encoding time",),
    "TDOR": ("Original release time", "Original release year"),
    "TDRC": ("Recording time", "Date", "Time", "Recording dates", "Year"),
    "TDRL": ("Release time",),
    "TDTG": ("Tagging time",),
    "TIPL": ("Involved people list",),
    "TMCL": ("Musician credits list",),
    "TMOO": ("Mood",),
    "TPRO": ("Produced notice",),
    "TSOA": ("Album sort order",),
    "TSOP": ("Performer sort order",),
    "TSOT": ("Title sort order",),
    "TSST": ("Set subtitle",),
    # The size frame was dropped in ID3v2.4.
    "": ("Size",),
}


def _build_table(*groups):
    return MappingProxyType(
        {
            description: frame_id
            for group in groups
            for frame_id, descriptions in group.items()
            for description in descriptions
        }
    )


V23_COMMON_IDS = _build_table(_SHARED, _V23_ONLY)
V24_COMMON_IDS = _build_table(_SHARED, _V24_ONLY)

_NOT_IN_SEQUENCE = frozenset({"IPLS", "RVAD"})


def common_id(description, version):
    """Return the frame id for a description in the given tag version.

    Version 3 uses the ID3v2.3 table, anything else the ID3v2.4 table.
    A description that is not known is returned unchanged.
    """
    ids = V23_COMMON_IDS if version == 3 else V24_COMMON_IDS
    return ids.get(description, description)


def must_frame_be_in_sequence(frame_id):
    """Tell whether frames with this id may occur more than once in a tag."""
    if frame_id != "TXXX" and frame_id.startswith("T"):
        return False
    return frame_id not in _NOT_IN_SEQUENCE