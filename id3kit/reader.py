"""A cursor over a frame body, with the reads frame parsers need."""

from .encoding import BOM, ENCODING_UTF16


class FrameReader:
    """Reads values from a byte string, raising EOFError when data runs out."""

    def __init__(self, data):
        self._data = bytes(data)
        self._pos = 0

    def remaining(self):
        """Return the number of unread bytes."""
        return len(self._data) - self._pos

    def discard(self, n):
        """Skip n bytes; raise EOFError if fewer are left (skipping all of them)."""
        available = self.remaining()
        if n > available:
            self._pos = len(self._data)
            raise EOFError(f"cannot discard {n} bytes, only {available} left")
        self._pos += n

    def read_byte(self):
        """Return the next byte as an int."""
        if self._pos >= len(self._data):
            raise EOFError("no bytes left")
        b = self._data[self._pos]
        self._pos += 1
        return b

    def next(self, n):
        """Return the next n bytes; nothing is consumed if fewer are left."""
        if n == 0:
            return b""
        if n > self.remaining():
            raise EOFError(f"cannot read {n} bytes, only {self.remaining()} left")
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk

    def read_all(self):
        """Return all unread bytes."""
        chunk = self._data[self._pos :]
        self._pos = len(self._data)
        return chunk

    def read_till_delim(self, delim):
        """Return the bytes before the next delim byte, leaving delim unread."""
        return self.read_till_delims(bytes([delim]))

    def read_till_delims(self, delims):
        """Return the bytes before the next occurrence of delims, leaving it unread."""
        delims = bytes(delims)
        if not delims:
            return b""
        index = self._data.find(delims, self._pos)
        if index < 0:
            self._pos = len(self._data)
            raise EOFError("delimiter not found")
        chunk = self._data[self._pos : index]
        self._pos = index
        return chunk

    def read_text(self, encoding):
        """Return encoded text up to its terminator and skip the terminator."""
        delims = encoding.termination_bytes
        text = self.read_till_delims(delims)
        # A UTF-16 terminator may start on the high byte of the last character.
        if encoding == ENCODING_UTF16 and text != BOM:
            text += bytes([self.read_byte()])
        self.discard(len(delims))
        return text