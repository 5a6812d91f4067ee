"""Forward-only character cursor used by the multi-character scanners.

A Cursor is a position into a source string that only moves forward.
Lookahead never mutates it; ``clone()`` gives an independent copy for
speculative scans.

Thread Safety:
Cursor instances are cheap and single-use. Create one per match attempt.

"""

from __future__ import annotations

from collections.abc import Iterable


class Cursor:
    """Peekable, forward-only view over a string.

    Usage:
            >>> cursor = Cursor('"Hi" class')
            >>> cursor.bump()
            '"'
            >>> cursor.peek(), cursor.second()
            ('H', 'i')
            >>> cursor.consumed_len()
            1

    """

    __slots__ = ("_source", "_source_len", "_start", "_pos")

    def __init__(self, source: str, pos: int = 0) -> None:
        """Initialize cursor over ``source`` starting at ``pos``.

        Args:
            source: Source text (never copied)
            pos: Start offset; consumed_len() counts from here
        """
        self._source = source
        self._source_len = len(source)
        self._start = pos
        self._pos = pos

    @property
    def pos(self) -> int:
        """Absolute offset of the next character."""
        return self._pos

    def bump(self) -> str | None:
        """Consume and return the next character, or None at end of input."""
        if self._pos >= self._source_len:
            return None
        char = self._source[self._pos]
        self._pos += 1
        return char

    def peek(self) -> str | None:
        """Next character without consuming it."""
        if self._pos >= self._source_len:
            return None
        return self._source[self._pos]

    def second(self) -> str | None:
        """Character after the next one, without consuming anything."""
        if self._pos + 1 >= self._source_len:
            return None
        return self._source[self._pos + 1]

    def peek_many(self, n: int) -> str:
        """Up to ``n`` characters of lookahead (shorter near end of input)."""
        return self._source[self._pos : self._pos + n]

    def is_eof(self) -> bool:
        return self._pos >= self._source_len

    def next_is_null(self) -> bool:
        return self.peek() == "\0"

    def next_is_newline(self) -> bool:
        return self.peek() == "\n"

    def consumed_len(self) -> int:
        """Characters consumed since construction."""
        return self._pos - self._start

    def length_including(self, chars: Iterable[str]) -> int:
        """Distance up to and including the first character in ``chars``.

        Falls back to the distance to end of input when none occurs. Used to
        compute how far to skip after a scan error.

        Args:
            chars: Delimiter characters

        Returns:
            Number of characters from the current position
        """
        best = -1
        for char in chars:
            idx = self._source.find(char, self._pos)
            if idx != -1 and (best == -1 or idx < best):
                best = idx
        if best == -1:
            return self._source_len - self._pos
        return best - self._pos + 1

    def clone(self) -> Cursor:
        """Independent copy sharing the same start offset."""
        other = Cursor(self._source, self._start)
        other._pos = self._pos
        return other

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}, next={self.peek_many(10)!r})"
