"""Token, TokenKind and Keyword definitions for the coolex lexer.

The lexer produces a stream of Token objects that later stages consume.
Each Token has a kind, an optional payload value, and an index range into
the source string it was cut from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind and Keyword are enums (inherently immutable).

Memory Note:
Token does not copy its text. It keeps a reference to the whole source
buffer plus (start, length); ``token.text`` slices on demand. The source
string therefore lives as long as any token cut from it.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Keyword(Enum):
    """Reserved words of COOL.

    ``true`` and ``false`` are not here: they lex as BOOL tokens because
    their first letter must be lower case while the rest is not.
    """

    CLASS = auto()
    ELSE = auto()
    FI = auto()
    IF = auto()
    IN = auto()
    INHERITS = auto()
    ISVOID = auto()
    LET = auto()
    LOOP = auto()
    POOL = auto()
    THEN = auto()
    WHILE = auto()
    CASE = auto()
    ESAC = auto()
    NEW = auto()
    OF = auto()
    NOT = auto()


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Organized by category:
    - Trivia (whitespace, comments)
    - Identifiers and literals
    - Keywords
    - Operators and punctuation
    - Errors

    """

    # Trivia - space, \n, \f, \r, \t, \v
    WHITESPACE = auto()
    LINE_COMMENT = auto()  # -- ...
    BLOCK_COMMENT = auto()  # (* ... *)

    # Identifiers and literals
    OBJECT_ID = auto()  # self, foo
    TYPE_ID = auto()  # SELF_TYPE, Main
    INT = auto()  # 42
    STRING = auto()  # "..."
    BOOL = auto()  # true, fALSE

    # Keywords (value is a Keyword member)
    KEYWORD = auto()

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    TILDE = auto()  # ~
    LT = auto()  # <
    LE = auto()  # <=
    DARROW = auto()  # =>
    ASSIGN = auto()  # <-

    # Punctuation
    COLON = auto()  # :
    COMMA = auto()  # ,
    DOT = auto()  # .
    EQUAL = auto()  # =
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    OPEN_BRACE = auto()  # {
    CLOSE_BRACE = auto()  # }
    AT = auto()  # @
    SEMICOLON = auto()  # ;

    # Diagnostics (value is the message)
    ERROR = auto()


# Kinds that carry no meaning for a parser
TRIVIA_KINDS = frozenset(
    {TokenKind.WHITESPACE, TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT}
)


@dataclass(frozen=True, slots=True)
class Token:
    """A classified, contiguous span of source text.

    Attributes:
        kind: The token kind (from TokenKind enum)
        length: Number of characters covered by the token (always > 0)
        source: The complete source buffer the token was cut from
        start: Absolute start offset in source
        value: Kind-specific payload:
            OBJECT_ID / TYPE_ID / INT -> matched text,
            STRING -> fully unescaped string value,
            BOOL -> bool,
            KEYWORD -> Keyword member,
            ERROR -> diagnostic message,
            anything else -> None

    """

    kind: TokenKind
    length: int
    source: str
    start: int = 0
    value: Any = None

    @property
    def end(self) -> int:
        """Absolute end offset (exclusive)."""
        return self.start + self.length

    @property
    def text(self) -> str:
        """The raw source text covered by the token."""
        return self.source[self.start : self.start + self.length]

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    @property
    def is_trivia(self) -> bool:
        return self.kind in TRIVIA_KINDS

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        text = self.text
        if len(text) > 20:
            text = text[:17] + "..."
        if self.value is None:
            return f"Token({self.kind.name}, {text!r}, @{self.start})"
        value = self.value.name if isinstance(self.value, Keyword) else self.value
        return f"Token({self.kind.name}, {text!r}, {value!r}, @{self.start})"
