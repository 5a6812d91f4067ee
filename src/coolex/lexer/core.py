"""Maximal-munch driver loop.

At every position each rule is asked for a match, in registration order.
The longest match wins; on equal length the rule registered first keeps
it. The winner commits (advancing the position and the line counter) and
the token is emitted together with a snapshot of the LexerContext.

Thread Safety:
A Lexer holds only its rule tuple, and rules keep no per-match state.
One Lexer can serve any number of concurrent scans; each scan owns its
own LexerContext.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from coolex.config import get_lex_config
from coolex.errors import LexerInvariantError, NoRuleMatchedError
from coolex.lexer.context import LexerContext
from coolex.lexer.rules import Rule, RuleMatch
from coolex.profiling import get_lex_accumulator
from coolex.tokens import Token
from coolex.utils.logger import get_logger

logger = get_logger(__name__)

LexedToken = tuple[Token, LexerContext]


class Lexer:
    """Rule-driven lexer.

    Usage:
            >>> from coolex.lexer.cool import cool_rules
            >>> lexer = Lexer(cool_rules())
            >>> for token, context in lexer.tokenize("class Main"):
            ...     print(context.line_number, token)
        1 Token(KEYWORD, 'class', 'CLASS', @0)
        1 Token(WHITESPACE, ' ', @5)
        1 Token(TYPE_ID, 'Main', 'Main', @6)

    The rule order is part of the lexer's observable behaviour: it decides
    every tie between equally long matches.

    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule]) -> None:
        """Initialize lexer with rules in priority order.

        Args:
            rules: Rules, highest priority first. The set must match any
                non-empty input, normally by ending with a catch-all rule.
        """
        self._rules: tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def tokenize(self, source: str) -> Iterator[LexedToken]:
        """Tokenize source into a stream of (token, context) pairs.

        The context is the line counter after the token was committed.
        The scan is recorded in the active LexAccumulator when it ends,
        whether it ran to the end, was closed early or raised.

        Yields:
            (Token, LexerContext) pairs in source order

        Raises:
            NoRuleMatchedError: If no rule matches at some position
            LexerInvariantError: If a rule's commit does not advance

        Complexity: O(n * r) for n characters and r rules, plus the length
        of each multi-character scan.
        """
        config = get_lex_config()
        accumulator = get_lex_accumulator()
        rules = self._rules  # Local var for faster access
        source_len = len(source)
        context = LexerContext()
        pos = 0
        token_count = 0
        error_count = 0

        try:
            while pos < source_len:
                rule, match = self._arbitrate(rules, source, pos)
                if match is None:
                    raise NoRuleMatchedError(
                        "no rule matched the remaining input",
                        position=pos,
                        line_number=context.line_number,
                        source_file=config.source_file,
                    )

                new_pos = rule.accept(match, context, source)
                if new_pos <= pos:
                    raise LexerInvariantError(
                        f"{rule!r} committed without advancing",
                        position=pos,
                        line_number=context.line_number,
                        source_file=config.source_file,
                    )
                pos = new_pos

                token = match.token
                token_count += 1
                if token.is_error:
                    error_count += 1
                    if config.log_errors:
                        logger.warning(
                            "%s:%d: %s",
                            config.source_file or "<string>",
                            context.line_number,
                            token.value,
                        )

                if token.is_trivia and not config.keep_trivia:
                    continue
                yield token, context.snapshot()
        finally:
            # Runs for abandoned and failed scans too; pos is how far we got
            logger.debug(
                "Lexed %d of %d characters into %d tokens (%d errors)",
                pos,
                source_len,
                token_count,
                error_count,
            )
            if accumulator is not None:
                accumulator.record_scan(pos, token_count, error_count)

    def lex(self, source: str) -> list[LexedToken]:
        """Tokenize the whole source at once."""
        return list(self.tokenize(source))

    @staticmethod
    def _arbitrate(
        rules: tuple[Rule, ...], source: str, pos: int
    ) -> tuple[Rule | None, RuleMatch | None]:
        """Pick the longest match at ``pos``; earlier rules win ties."""
        best_rule: Rule | None = None
        best: RuleMatch | None = None
        for rule in rules:
            match = rule.try_match(source, pos)
            if match is None:
                continue
            if best is None or match.token.length > best.token.length:
                best_rule = rule
                best = match
        return best_rule, best
