"""Read-only cursor over an input string.

Reads past the end raise ``IndexError``; each decoder entry point converts
that into its own "too few characters" error.
"""

from __future__ import annotations


class TextCursor:
    """A position within an immutable text buffer."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    @property
    def remaining(self) -> int:
        return len(self.text) - self.pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Character *offset* places ahead, without consuming it."""
        idx = self.pos + offset
        if idx >= len(self.text):
            raise IndexError(idx)
        return self.text[idx]

    def take(self) -> str:
        ch = self.peek()
        self.pos += 1
        return ch

    def advance(self, count: int) -> None:
        if self.pos + count > len(self.text):
            raise IndexError(self.pos + count)
        self.pos += count

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.pos)

    def find(self, sub: str) -> int:
        """Offset of *sub* from the cursor, or -1."""
        idx = self.text.find(sub, self.pos)
        return idx - self.pos if idx >= 0 else -1

    def ahead(self, count: int) -> str:
        """Up to *count* characters from the cursor, without consuming them."""
        return self.text[self.pos : self.pos + count]

    def rest_equals(self, token: str) -> bool:
        """Whether the unread input is exactly *token*."""
        return self.remaining == len(token) and self.startswith(token)

    def rest(self) -> str:
        return self.text[self.pos :]

    def __repr__(self) -> str:
        return f"TextCursor(pos={self.pos}, remaining={self.remaining})"
