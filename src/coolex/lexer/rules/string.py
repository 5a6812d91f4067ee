"""String literal scanner.

Scans a double-quoted COOL string character by character, unescaping as it
goes. Malformed strings become ERROR tokens:

- EOF before the closing quote
- a raw newline (the newline is consumed with the error)
- a raw or escaped NUL character

After a NUL the match also records a recovery skip up to and including the
next newline or double quote, so scanning resumes at a stable boundary
instead of re-entering the broken literal.
"""

from __future__ import annotations

from coolex.cursor import Cursor
from coolex.lexer.rules.base import BaseRule, RuleMatch
from coolex.tokens import Token, TokenKind

EOF_IN_STRING = "EOF in string constant."
NULL_IN_STRING = "String contains null character."
ESCAPED_NULL_IN_STRING = "String contains escaped null character."
UNTERMINATED_STRING = "Unterminated string constant."

# \b \t \n \f; every other escaped character stands for itself
_ESCAPES = {"b": "\b", "t": "\t", "n": "\n", "f": "\f"}

_RECOVERY_STOPS = ("\n", '"')


class StringRule(BaseRule):
    """Match a string literal starting with ``"``.

    The STRING token's value is the unescaped string. Escaped newlines
    continue the string on the next line and are counted in
    ``RuleMatch.lines``.
    """

    __slots__ = ()

    def try_match(self, source: str, pos: int) -> RuleMatch | None:
        if not source.startswith('"', pos):
            return None

        cursor = Cursor(source, pos)
        cursor.bump()
        chars: list[str] = []
        lines = 0

        while True:
            if cursor.is_eof():
                return _error(source, pos, cursor, EOF_IN_STRING, lines)

            if cursor.next_is_null():
                skip = cursor.length_including(_RECOVERY_STOPS)
                return _error(source, pos, cursor, NULL_IN_STRING, lines, skip)

            if cursor.next_is_newline():
                cursor.bump()
                return _error(source, pos, cursor, UNTERMINATED_STRING, lines + 1)

            char = cursor.bump()
            if char == "\\" and not cursor.is_eof():
                escaped = cursor.bump()
                if escaped == "\0":
                    skip = cursor.length_including(_RECOVERY_STOPS)
                    return _error(source, pos, cursor, ESCAPED_NULL_IN_STRING, lines, skip)
                if escaped == "\n":
                    lines += 1
                chars.append(_ESCAPES.get(escaped, escaped))
            elif char == '"':
                token = Token(TokenKind.STRING, cursor.consumed_len(), source, pos, "".join(chars))
                return RuleMatch(token, lines=lines)
            else:
                chars.append(char)

    def __repr__(self) -> str:
        return "StringRule()"


def _error(
    source: str, pos: int, cursor: Cursor, message: str, lines: int, skip: int = 0
) -> RuleMatch:
    token = Token(TokenKind.ERROR, cursor.consumed_len(), source, pos, message)
    return RuleMatch(token, lines=lines, skip=skip)
