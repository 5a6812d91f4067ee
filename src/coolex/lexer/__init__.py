"""Rule-driven maximal-munch lexer for COOL.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerContext, rules
├── core.py              # Lexer driver (arbitration + commit loop)
├── context.py           # LexerContext (per-scan line counter)
├── cool.py              # The COOL rule set, in priority order
└── rules/               # Pluggable matchers
    ├── base.py          # Rule protocol, RuleMatch, BaseRule
    ├── literal.py       # LiteralRule, KeywordRule
    ├── regex.py         # RegexRule
    ├── string.py        # StringRule (escapes, recovery)
    └── comment.py       # BlockCommentRule (nesting)

Usage:
    >>> from coolex.lexer import Lexer, cool_rules
    >>> lexer = Lexer(cool_rules())
    >>> [(t.kind.name, c.line_number) for t, c in lexer.lex("x <- 1")]
    [('OBJECT_ID', 1), ('WHITESPACE', 1), ('ASSIGN', 1), ('WHITESPACE', 1), ('INT', 1)]

"""

from coolex.lexer.context import LexerContext
from coolex.lexer.cool import cool_rules
from coolex.lexer.core import LexedToken, Lexer
from coolex.lexer.rules import (
    BaseRule,
    BlockCommentRule,
    KeywordRule,
    LiteralRule,
    RegexRule,
    Rule,
    RuleMatch,
    StringRule,
)

__all__ = [
    "BaseRule",
    "BlockCommentRule",
    "KeywordRule",
    "LexedToken",
    "Lexer",
    "LexerContext",
    "LiteralRule",
    "RegexRule",
    "Rule",
    "RuleMatch",
    "StringRule",
    "cool_rules",
]
