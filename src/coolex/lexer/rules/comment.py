"""Nested block comment scanner for ``(* ... *)``."""

from __future__ import annotations

from coolex.cursor import Cursor
from coolex.lexer.rules.base import BaseRule, RuleMatch
from coolex.tokens import Token, TokenKind

UNMATCHED_CLOSE = "Unmatched *)"
EOF_IN_COMMENT = "EOF in comment"


class BlockCommentRule(BaseRule):
    """Match a block comment, honouring nested ``(*`` / ``*)`` pairs.

    A ``*)`` seen outside any comment is reported at once as an
    ``Unmatched *)`` ERROR of length 2. Depth is a plain int, so nesting is
    unbounded. Newlines inside the comment are returned in
    ``RuleMatch.lines``.
    """

    __slots__ = ()

    def try_match(self, source: str, pos: int) -> RuleMatch | None:
        head = source[pos : pos + 2]
        if head == "*)":
            return RuleMatch(Token(TokenKind.ERROR, 2, source, pos, UNMATCHED_CLOSE))
        if head != "(*":
            return None

        cursor = Cursor(source, pos)
        depth = 0
        lines = 0

        while True:
            char = cursor.bump()
            if char is None:
                return _match(TokenKind.ERROR, source, pos, cursor, lines, EOF_IN_COMMENT)
            if char == "(" and cursor.peek() == "*":
                cursor.bump()
                depth += 1
            elif char == "*" and cursor.peek() == ")":
                cursor.bump()
                depth -= 1
                if depth == 0:
                    return _match(TokenKind.BLOCK_COMMENT, source, pos, cursor, lines)
                if depth < 0:
                    return _match(TokenKind.ERROR, source, pos, cursor, lines, UNMATCHED_CLOSE)
            elif char == "\n":
                lines += 1

    def __repr__(self) -> str:
        return "BlockCommentRule()"


def _match(
    kind: TokenKind, source: str, pos: int, cursor: Cursor, lines: int, message: str | None = None
) -> RuleMatch:
    return RuleMatch(Token(kind, cursor.consumed_len(), source, pos, message), lines=lines)
