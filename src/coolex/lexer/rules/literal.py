"""Exact-text rules: fixed literals and case-insensitive keywords."""

from __future__ import annotations

from collections.abc import Iterable

from coolex.lexer.rules.base import BaseRule, RuleMatch
from coolex.tokens import Keyword, Token, TokenKind


class LiteralRule(BaseRule):
    """Match one fixed string, case-sensitively.

    Usage:
            >>> rule = LiteralRule("<-", TokenKind.ASSIGN)
            >>> rule.try_match("x <- 1", 2).token
            Token(ASSIGN, '<-', @2)

    """

    __slots__ = ("literal", "kind")

    def __init__(self, literal: str, kind: TokenKind) -> None:
        if not literal:
            raise ValueError("LiteralRule needs a non-empty literal")
        self.literal = literal
        self.kind = kind

    def try_match(self, source: str, pos: int) -> RuleMatch | None:
        if not source.startswith(self.literal, pos):
            return None
        return RuleMatch(Token(self.kind, len(self.literal), source, pos))

    def __repr__(self) -> str:
        return f"LiteralRule({self.literal!r}, {self.kind.name})"


class KeywordRule(BaseRule):
    """Match the longest keyword spelling at the current position.

    Comparison ignores case. Among spellings that match, the longest wins;
    spellings of equal length are resolved by their order in ``keywords``
    (first listed wins), so the result never depends on hashing.

    Complexity: O(k) per attempt for k spellings.
    """

    __slots__ = ("_keywords",)

    def __init__(self, keywords: Iterable[tuple[str, Keyword]]) -> None:
        """Initialize from ordered ``(spelling, Keyword)`` pairs.

        Args:
            keywords: Spellings and the keyword each one produces.
                Duplicates are allowed; the first occurrence wins.
        """
        self._keywords: tuple[tuple[str, int, Keyword], ...] = tuple(
            (spelling.lower(), len(spelling), keyword) for spelling, keyword in keywords
        )
        if any(length == 0 for _, length, _ in self._keywords):
            raise ValueError("KeywordRule spellings must be non-empty")

    def try_match(self, source: str, pos: int) -> RuleMatch | None:
        best_length = 0
        best: Keyword | None = None
        for spelling, length, keyword in self._keywords:
            if length <= best_length:
                continue
            if source[pos : pos + length].lower() == spelling:
                best_length = length
                best = keyword
        if best is None:
            return None
        return RuleMatch(Token(TokenKind.KEYWORD, best_length, source, pos, best))

    def __repr__(self) -> str:
        return f"KeywordRule({len(self._keywords)} spellings)"
