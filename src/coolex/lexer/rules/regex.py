"""Regular-expression rules.

Patterns are compiled once, at construction, with ``re.MULTILINE`` and
``re.DOTALL``. Matching uses ``Pattern.match(source, pos)``, which is
anchored at ``pos`` without slicing the source.

A rule either produces a fixed kind (and optional fixed value) or asks a
refinement callback to turn the ``re.Match`` into ``(kind, value)``. A
custom commit can be installed with ``with_accept`` for rules that consume
more than they report, such as a line comment that also eats its newline.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from coolex.errors import RuleError
from coolex.lexer.rules.base import BaseRule, RuleMatch
from coolex.tokens import Token, TokenKind

if TYPE_CHECKING:
    from coolex.lexer.context import LexerContext

RefineFn = Callable[[re.Match[str]], "tuple[TokenKind, Any] | None"]
AcceptFn = Callable[[RuleMatch, "LexerContext", str], int]

REGEX_FLAGS = re.MULTILINE | re.DOTALL


class RegexRule(BaseRule):
    """Match a regular expression anchored at the current position.

    Usage:
            >>> rule = RegexRule(r"[0-9]+", TokenKind.INT)
            >>> rule.try_match("12313\\n\\tlet", 0).token.length
            5

            >>> ids = RegexRule.refined(
            ...     r"[a-z][A-Za-z0-9_]*", lambda m: (TokenKind.OBJECT_ID, m.group())
            ... )

    """

    __slots__ = ("_regex", "_kind", "_value", "_refine", "_accept_fn", "name")

    def __init__(
        self,
        pattern: str | re.Pattern[str],
        kind: TokenKind | None = None,
        value: Any = None,
        *,
        refine: RefineFn | None = None,
        name: str | None = None,
    ) -> None:
        """Compile ``pattern`` and fix how matches become tokens.

        Args:
            pattern: Pattern text, or an already compiled pattern (used as is)
            kind: Fixed token kind for every match
            value: Fixed payload for every match (with ``kind``)
            refine: Callback computing ``(kind, value)`` from the match, or
                None to reject it
            name: Short description used in errors and reprs

        Raises:
            RuleError: If the pattern does not compile, or if neither or both
                of ``kind`` and ``refine`` are given
        """
        self.name = name or (pattern if isinstance(pattern, str) else pattern.pattern)
        if (kind is None) == (refine is None):
            raise RuleError(self.name, "exactly one of kind or refine is required")
        if isinstance(pattern, re.Pattern):
            self._regex = pattern
        else:
            try:
                self._regex = re.compile(pattern, REGEX_FLAGS)
            except re.error as e:
                raise RuleError(self.name, f"invalid pattern: {e}") from e
        self._kind = kind
        self._value = value
        self._refine = refine
        self._accept_fn: AcceptFn | None = None

    @classmethod
    def refined(cls, pattern: str, refine: RefineFn, *, name: str | None = None) -> RegexRule:
        """Build a rule whose kind and value are computed per match."""
        return cls(pattern, refine=refine, name=name)

    def with_accept(self, accept_fn: AcceptFn) -> RegexRule:
        """Install a custom commit and return the rule (for chaining)."""
        self._accept_fn = accept_fn
        return self

    def try_match(self, source: str, pos: int) -> RuleMatch | None:
        mat = self._regex.match(source, pos)
        # An empty match would stall the driver
        if mat is None or mat.end() == pos:
            return None

        if self._refine is None:
            kind, value = self._kind, self._value
        else:
            refined = self._refine(mat)
            if refined is None:
                return None
            kind, value = refined

        return RuleMatch(Token(kind, mat.end() - pos, source, pos, value))

    def accept(self, match: RuleMatch, context: LexerContext, source: str) -> int:
        if self._accept_fn is not None:
            return self._accept_fn(match, context, source)
        return super().accept(match, context, source)

    def __repr__(self) -> str:
        return f"RegexRule({self.name!r})"
