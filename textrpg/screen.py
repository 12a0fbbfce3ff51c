"""Character-cell screen drawn to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 64

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CURSOR_HOME = "\x1b[H"


class Screen:
    """A grid of characters that is composed in memory and then shown at once."""

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        stream: TextIO | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.stream = stream if stream is not None else sys.stdout
        self._buffer: list[list[str]] | None = None

    def __enter__(self) -> Screen:
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def init(self) -> None:
        """Allocate the buffer, clear it and hide the cursor."""
        self._buffer = [[" "] * self.width for _ in range(self.height)]
        self.stream.write(_HIDE_CURSOR)
        self.stream.flush()

    def release(self) -> None:
        """Drop the buffer and show the cursor again."""
        if self._buffer is not None:
            self._buffer = None
            self.stream.write(_SHOW_CURSOR)
            self.stream.flush()

    def _rows(self) -> list[list[str]]:
        if self._buffer is None:
            raise RuntimeError("screen is not initialised")
        return self._buffer

    def clear(self) -> None:
        for row in self._rows():
            row[:] = [" "] * self.width

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw(self, x: int, y: int, text: str) -> None:
        """Write ``text`` at (x, y); every character lands on that one cell."""
        rows = self._rows()
        if not self.is_valid_coordinate(x, y):
            return
        for char in text:
            rows[y][x] = char

    def frame(self) -> str:
        """The composed buffer as lines of text."""
        return "\n".join("".join(row) for row in self._rows())

    def swap_buffer(self) -> None:
        """Show the composed buffer on the stream."""
        self.stream.write(_CURSOR_HOME + self.frame())
        self.stream.flush()