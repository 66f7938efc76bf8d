"""Ordered collections of frames that may appear more than once in a tag."""

from __future__ import annotations


class Sequence:
    """Frames sharing one id, kept unique by their unique identifier.

    Adding a frame whose unique identifier is already present replaces the
    earlier frame in place.
    """

    def __init__(self, frames=()):
        self._frames = []
        for frame in frames:
            self.add_frame(frame)

    def add_frame(self, frame):
        """Add frame, replacing any frame with the same unique identifier."""
        key = frame.unique_identifier()
        for index, existing in enumerate(self._frames):
            if existing.unique_identifier() == key:
                self._frames[index] = frame
                return
        self._frames.append(frame)

    def __len__(self):
        return len(self._frames)

    def __iter__(self):
        return iter(self._frames)