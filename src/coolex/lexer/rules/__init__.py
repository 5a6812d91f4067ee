"""Matching rules for the coolex Lexer.

Stateless matchers:
- LiteralRule: one fixed string
- KeywordRule: longest case-insensitive keyword
- RegexRule: anchored regular expression, optionally refined

Multi-character scanners:
- StringRule: quoted string literal with escapes and error recovery
- BlockCommentRule: nested (* ... *) comments
"""

from coolex.lexer.rules.base import BaseRule, Rule, RuleMatch
from coolex.lexer.rules.comment import BlockCommentRule
from coolex.lexer.rules.literal import KeywordRule, LiteralRule
from coolex.lexer.rules.regex import RegexRule
from coolex.lexer.rules.string import StringRule

__all__ = [
    "BaseRule",
    "BlockCommentRule",
    "KeywordRule",
    "LiteralRule",
    "RegexRule",
    "Rule",
    "RuleMatch",
    "StringRule",
]
