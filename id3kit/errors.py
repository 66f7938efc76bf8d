"""Exceptions raised while reading and writing ID3v2 tags."""


class ID3Error(Exception):
    """Base class for all errors raised by this package."""

    default_message = "ID3 tag error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class InvalidLanguageLengthError(ID3Error, ValueError):
    """A language code is not exactly three letters long."""

    default_message = "language code must consist of three letters according to ISO 639-2"


class SmallHeaderSizeError(ID3Error):
    """The stream ended before a whole tag header could be read."""

    default_message = "size of tag header is less than expected"


class UnsupportedVersionError(ID3Error):
    """The tag has a version older than ID3v2.3."""

    default_message = "unsupported version of ID3 tag"


class BodyOverflowError(ID3Error):
    """A frame claims more bytes than are left in the tag."""

    default_message = "frame went over tag area"


class InvalidSizeFormatError(ID3Error, ValueError):
    """A tag or frame size is not encoded as ID3v2 requires."""

    default_message = "invalid format of tag's/frame's size"


class SizeOverflowError(ID3Error, ValueError):
    """A size is too large to be stored in an ID3v2 size field."""

    default_message = "size of tag/frame is greater than allowed in id3 tag"


class NoFileError(ID3Error):
    """The tag was not opened from a file."""

    default_message = "tag was not initialized with file"


class NoTagError(ID3Error):
    """The stream does not start with an ID3v2 tag."""

    default_message = "there is no tag in file"


class BlankFrameError(ID3Error):
    """A frame header has a blank id or a zero size (usually padding)."""

    default_message = "id or size of frame are blank"