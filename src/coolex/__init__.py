"""
coolex: rule-driven lexer for COOL

Turns COOL source text into an ordered stream of classified tokens, each
paired with the line it was committed on. Malformed input never raises:
it shows up as ERROR tokens and scanning carries on.

Quick Start:
    >>> from coolex import lex, render_token
    >>> for token, context in lex('class Main { s : String <- "hi"; };'):
    ...     if not token.is_trivia:
    ...         print(context.line_number, render_token(token))
    1 CLASS
    1 TYPEID Main
    1 '{'
    1 OBJECTID s
    1 ':'
    1 TYPEID String
    1 ASSIGN
    1 STR_CONST "hi"
    1 ';'
    1 '}'
    1 ';'

Custom Rule Sets:
    >>> from coolex import Lexer, RegexRule, TokenKind, cool_rules
    >>> # Also accept shell-style line comments
    >>> rules = [RegexRule(r"#[^\n]*", TokenKind.LINE_COMMENT), *cool_rules()]
    >>> lexer = Lexer(rules)

"""

from functools import lru_cache

from coolex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from coolex.cursor import Cursor
from coolex.errors import CoolexError, LexerInvariantError, NoRuleMatchedError, RuleError
from coolex.lexer import (
    BaseRule,
    BlockCommentRule,
    KeywordRule,
    LexedToken,
    Lexer,
    LexerContext,
    LiteralRule,
    RegexRule,
    Rule,
    RuleMatch,
    StringRule,
    cool_rules,
)
from coolex.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from coolex.render import escape_string, format_listing, render_token
from coolex.tokens import Keyword, Token, TokenKind

__version__ = "0.1.0"


@lru_cache(maxsize=1)
def default_lexer() -> Lexer:
    """Shared Lexer over the COOL rule set (rules are stateless)."""
    return Lexer(cool_rules())


def lex(source: str) -> list[LexedToken]:
    """Lex COOL source with the default rule set.

    Args:
        source: COOL source text

    Returns:
        (Token, LexerContext) pairs in source order

    """
    return default_lexer().lex(source)


__all__ = [
    # Main API
    "lex",
    "default_lexer",
    "Lexer",
    "LexerContext",
    "LexedToken",
    "cool_rules",
    # Tokens
    "Keyword",
    "Token",
    "TokenKind",
    # Rules
    "BaseRule",
    "BlockCommentRule",
    "Cursor",
    "KeywordRule",
    "LiteralRule",
    "RegexRule",
    "Rule",
    "RuleMatch",
    "StringRule",
    # Rendering
    "escape_string",
    "format_listing",
    "render_token",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    # Profiling
    "LexAccumulator",
    "get_lex_accumulator",
    "profiled_lex",
    # Errors
    "CoolexError",
    "LexerInvariantError",
    "NoRuleMatchedError",
    "RuleError",
    # Version
    "__version__",
]
