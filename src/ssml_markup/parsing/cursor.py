"""Forward-only read cursor over an immutable markup string."""

from typing import AbstractSet, Optional

WHITESPACE = frozenset(" \t\r\n")


class Cursor:
    """Position into an immutable input string.

    Every read is bounded by the input length, so scanning for a terminator
    that never appears stops at the end of input instead of overrunning it.
    """

    __slots__ = ("text", "position", "length")

    def __init__(self, text: str, position: int = 0) -> None:
        self.text = text
        self.position = position
        self.length = len(text)

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, length={self.length})"

    @property
    def at_end(self) -> bool:
        return self.position >= self.length

    def peek(self, ahead: int = 0) -> Optional[str]:
        """Return the character ``ahead`` places past the cursor, or None."""
        index = self.position + ahead
        if index < self.length:
            return self.text[index]
        return None

    def advance(self, count: int = 1) -> None:
        self.position = min(self.position + count, self.length)

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.position)

    def read_until(self, stop_chars: AbstractSet[str]) -> str:
        """Consume and return characters up to (not including) any stop char."""
        start = self.position
        while self.position < self.length and self.text[self.position] not in stop_chars:
            self.position += 1
        return self.text[start:self.position]

    def skip_whitespace(self) -> None:
        while self.position < self.length and self.text[self.position] in WHITESPACE:
            self.position += 1
