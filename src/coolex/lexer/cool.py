"""The COOL rule set.

Order matters here: the driver uses maximal munch, and when two rules
consume the same number of characters the one listed first wins. That is
how ``class`` becomes a keyword rather than an object identifier, ``true``
a boolean, and a lone newline whitespace rather than a catch-all error.
"""

from __future__ import annotations

import re

from coolex.lexer.context import LexerContext
from coolex.lexer.rules import (
    BlockCommentRule,
    KeywordRule,
    LiteralRule,
    RegexRule,
    Rule,
    RuleMatch,
    StringRule,
)
from coolex.tokens import Keyword, TokenKind

KEYWORDS: tuple[tuple[str, Keyword], ...] = (
    ("class", Keyword.CLASS),
    ("else", Keyword.ELSE),
    ("fi", Keyword.FI),
    ("if", Keyword.IF),
    ("in", Keyword.IN),
    ("inherits", Keyword.INHERITS),
    ("isvoid", Keyword.ISVOID),
    ("let", Keyword.LET),
    ("loop", Keyword.LOOP),
    ("pool", Keyword.POOL),
    ("then", Keyword.THEN),
    ("while", Keyword.WHILE),
    ("case", Keyword.CASE),
    ("esac", Keyword.ESAC),
    ("new", Keyword.NEW),
    ("of", Keyword.OF),
    ("not", Keyword.NOT),
)

# Multi-character operators
OPERATORS: tuple[tuple[str, TokenKind], ...] = (
    ("<=", TokenKind.LE),
    ("=>", TokenKind.DARROW),
    ("<-", TokenKind.ASSIGN),
)

# Single characters, punctuation first, then arithmetic/comparison
SINGLE_CHARS: tuple[tuple[str, TokenKind], ...] = (
    ("{", TokenKind.OPEN_BRACE),
    ("}", TokenKind.CLOSE_BRACE),
    ("(", TokenKind.OPEN_PAREN),
    (")", TokenKind.CLOSE_PAREN),
    (":", TokenKind.COLON),
    (";", TokenKind.SEMICOLON),
    ("@", TokenKind.AT),
    (".", TokenKind.DOT),
    (",", TokenKind.COMMA),
    ("=", TokenKind.EQUAL),
    ("~", TokenKind.TILDE),
    ("+", TokenKind.PLUS),
    ("-", TokenKind.MINUS),
    ("*", TokenKind.STAR),
    ("/", TokenKind.SLASH),
    ("<", TokenKind.LT),
)


def _text_as(kind: TokenKind):
    def refine(mat: re.Match[str]) -> tuple[TokenKind, str]:
        return kind, mat.group()

    return refine


def _accept_line_comment(match: RuleMatch, context: LexerContext, source: str) -> int:
    end = match.token.end
    if end >= len(source):
        return end
    # `$` stops before the newline; eat it here
    context.line_number += 1
    return end + 1


def _accept_newline(match: RuleMatch, context: LexerContext, source: str) -> int:
    context.line_number += 1
    return match.token.end


def cool_rules() -> list[Rule]:
    """Build the COOL rules in priority order.

    Rules are stateless, so the returned list can back any number of
    lexers and concurrent scans.
    """
    return [
        KeywordRule(KEYWORDS),
        *(LiteralRule(text, kind) for text, kind in OPERATORS),
        # Comments
        BlockCommentRule(),
        RegexRule(r"--[^\n]*$", TokenKind.LINE_COMMENT, name="line comment").with_accept(
            _accept_line_comment
        ),
        StringRule(),
        *(LiteralRule(text, kind) for text, kind in SINGLE_CHARS),
        # First letter must be lower case, the rest is not case sensitive
        RegexRule(r"t(?i:rue)", TokenKind.BOOL, True, name="true"),
        RegexRule(r"f(?i:alse)", TokenKind.BOOL, False, name="false"),
        RegexRule.refined(r"[0-9]+", _text_as(TokenKind.INT), name="integer"),
        RegexRule.refined(
            r"[A-Z][A-Za-z0-9_]*", _text_as(TokenKind.TYPE_ID), name="type id"
        ),
        RegexRule.refined(r"[a-z][A-Za-z0-9_]*", _text_as(TokenKind.OBJECT_ID), name="object id"),
        # Newlines are split from other whitespace to count lines
        RegexRule(r"\n", TokenKind.WHITESPACE, name="newline").with_accept(_accept_newline),
        RegexRule(r"[ \t\r\f\v]+", TokenKind.WHITESPACE, name="whitespace"),
        # Catch-all: any other single character is an error
        RegexRule.refined(r".", _text_as(TokenKind.ERROR), name="catch-all"),
    ]
