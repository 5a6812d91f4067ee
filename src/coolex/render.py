"""Textual rendering of tokens in the classic COOL lexer listing format.

    #name "hello.cl"
    #1 CLASS
    #1 TYPEID Main
    #1 '{'
    #2 OBJECTID main
    #2 STR_CONST "Hello, World.\\n"

Whitespace and comments render as the empty string and are left out of
listings.

Thread Safety:
All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from coolex.lexer.context import LexerContext
from coolex.tokens import Token, TokenKind

_NAMED_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}

_SYMBOLS = {
    TokenKind.PLUS: "'+'",
    TokenKind.MINUS: "'-'",
    TokenKind.STAR: "'*'",
    TokenKind.SLASH: "'/'",
    TokenKind.TILDE: "'~'",
    TokenKind.LT: "'<'",
    TokenKind.LE: "LE",
    TokenKind.DARROW: "DARROW",
    TokenKind.ASSIGN: "ASSIGN",
    TokenKind.COLON: "':'",
    TokenKind.COMMA: "','",
    TokenKind.DOT: "'.'",
    TokenKind.EQUAL: "'='",
    TokenKind.OPEN_PAREN: "'('",
    TokenKind.CLOSE_PAREN: "')'",
    TokenKind.OPEN_BRACE: "'{'",
    TokenKind.CLOSE_BRACE: "'}'",
    TokenKind.AT: "'@'",
    TokenKind.SEMICOLON: "';'",
}


def _char_bytes(char: str) -> bytes:
    try:
        # Undecodable input bytes read with surrogateescape come back as-is
        return char.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return char.encode("utf-8", "surrogatepass")


def escape_string(value: str) -> str:
    """Escape a string for display between double quotes.

    Backslash, double quote, newline, tab, backspace and form feed use
    their backslash forms. Other characters outside printable ASCII are
    written as three-digit octal escapes of their UTF-8 bytes, so ``é``
    becomes ``\\303\\251``.
    """
    parts: list[str] = []
    for char in value:
        named = _NAMED_ESCAPES.get(char)
        if named is not None:
            parts.append(named)
        elif " " <= char <= "~":
            parts.append(char)
        else:
            parts.extend(f"\\{byte:03o}" for byte in _char_bytes(char))
    return "".join(parts)


def render_token(token: Token) -> str:
    """Render one token; trivia renders as ``""``."""
    kind = token.kind
    symbol = _SYMBOLS.get(kind)
    if symbol is not None:
        return symbol
    if kind is TokenKind.KEYWORD:
        return token.value.name
    if kind is TokenKind.BOOL:
        return f"BOOL_CONST {'true' if token.value else 'false'}"
    if kind is TokenKind.INT:
        return f"INT_CONST {token.value}"
    if kind is TokenKind.STRING:
        return f'STR_CONST "{escape_string(token.value)}"'
    if kind is TokenKind.TYPE_ID:
        return f"TYPEID {token.value}"
    if kind is TokenKind.OBJECT_ID:
        return f"OBJECTID {token.value}"
    if kind is TokenKind.ERROR:
        return f'ERROR "{escape_string(token.value)}"'
    return ""


def iter_listing(
    pairs: Iterable[tuple[Token, LexerContext]], source_file: str | None = None
) -> Iterator[str]:
    """Yield listing lines (without newlines) for a lexed token stream."""
    if source_file is not None:
        yield f'#name "{source_file}"'
    for token, context in pairs:
        rendered = render_token(token)
        if rendered:
            yield f"#{context.line_number} {rendered}"


def format_listing(
    pairs: Iterable[tuple[Token, LexerContext]], source_file: str | None = None
) -> str:
    """Full listing text, one line per rendered token."""
    return "".join(f"{line}\n" for line in iter_listing(pairs, source_file))
