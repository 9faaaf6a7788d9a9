from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Position:
    """A point in the input: characters consumed, zero-based row and column."""
    offset: int = 0
    row: int = 0
    col: int = 0

    def update(self, ch: str) -> 'Position':
        """Position after consuming a single character."""
        if ch == '\n':
            return Position(self.offset + 1, self.row + 1, 0)
        return Position(self.offset + 1, self.row, self.col + 1)

    def __str__(self) -> str:
        return f"line {self.row + 1}, column {self.col + 1}"


class Cursor:
    """
    Walks the input text one character at a time.

    The text is never copied or sliced while parsing; only the three position
    counters move, so saving and restoring a Position is cheap.
    """

    __slots__ = ("text", "filename", "_offset", "_row", "_col")

    def __init__(self, text: str, filename: str = ""):
        self.text = text
        self.filename = filename
        self._offset = 0
        self._row = 0
        self._col = 0

    @property
    def position(self) -> Position:
        return Position(self._offset, self._row, self._col)

    def restore(self, pos: Position) -> None:
        self._offset = pos.offset
        self._row = pos.row
        self._col = pos.col

    @property
    def offset(self) -> int:
        return self._offset

    def at_end(self) -> bool:
        return self._offset >= len(self.text)

    def peek(self) -> Optional[str]:
        """Next character, or None at end of input. Does not consume."""
        if self._offset < len(self.text):
            return self.text[self._offset]
        return None

    def prev(self) -> Optional[str]:
        """Most recently consumed character, or None at the start."""
        if self._offset > 0:
            return self.text[self._offset - 1]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input."""
        ch = self.peek()
        if ch is None:
            return None
        self._offset += 1
        if ch == '\n':
            self._row += 1
            self._col = 0
        else:
            self._col += 1
        return ch

    def __repr__(self) -> str:
        return f"Cursor({self.filename!r}, offset={self._offset}, row={self._row}, col={self._col})"
