"""Extend the COOL rule set with a rule of your own.

Rules registered earlier win ties, so a new rule placed first takes
precedence over the built-in ones for matches of equal length.
"""

from coolex import Lexer, RegexRule, TokenKind, cool_rules, render_token

# Shell-style comments; the catch-all would otherwise report "#" as an error
hash_comment = RegexRule(r"#[^\n]*", TokenKind.LINE_COMMENT, name="hash comment")

lexer = Lexer([hash_comment, *cool_rules()])

for token, context in lexer.lex("x <- 1 # set x\ny <- x"):
    if not token.is_trivia:
        print(context.line_number, render_token(token))
