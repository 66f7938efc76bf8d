"""Read, edit and write ID3v2.3 and ID3v2.4 tags."""

__version__ = "0.1.0"