from dataclasses import dataclass


@dataclass(frozen=True)
class Segment:
    """
    Half-open [start, stop) range of a lexeme before trimming.

    A segment never outlives the scan that produced it: the caller slices
    the text right away and drops the segment.
    """

    start: int
    stop: int

    def slice(self, text: str) -> str:
        return text[self.start:self.stop]


class Cursor:
    """
    An immutable input string with a forward-only scan position.

    The position is clamped to ``len(text)`` so that scanners which step
    over an escape pair at the very end of the input never leave the
    cursor past the end.
    """

    __slots__ = ("text", "_pos")

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self._pos = min(pos, len(text))

    @property
    def pos(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self.text)

    def peek(self) -> str | None:
        if self.at_end():
            return None
        return self.text[self._pos]

    def move_to(self, pos: int) -> None:
        if pos < self._pos:
            raise ValueError(f"Cursor cannot move backward ({pos} < {self._pos})")
        self._pos = min(pos, len(self.text))

    def advance(self, count: int = 1) -> None:
        self.move_to(self._pos + count)

    def skip_whitespace(self) -> bool:
        """Skip whitespace and return True if input remains."""
        text = self.text
        pos = self._pos
        while pos < len(text) and text[pos].isspace():
            pos += 1
        self._pos = pos
        return pos < len(text)

    def skip_until(self, delimiter: str) -> Segment:
        """Move to the next ``delimiter`` (or end of input) and return the skipped span."""
        start = self._pos
        stop = self.text.find(delimiter, start)
        if stop == -1:
            stop = len(self.text)
        self._pos = stop
        return Segment(start, stop)

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}, length={len(self.text)})"
