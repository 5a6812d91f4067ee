"""Rule contract shared by every matcher the Lexer can drive.

A rule is a two-step capability:

1. ``try_match(source, pos)`` looks at the input starting exactly at
   ``pos`` and returns a RuleMatch or None. It has no side effects.
2. ``accept(match, context, source)`` commits a match the driver picked:
   it returns the position to resume at and bumps the line counter for
   every newline it consumed.

Everything a scan learns while matching (newlines seen, how far to skip
after an error) is carried in the RuleMatch, never stored on the rule.
Rule instances are therefore stateless and can be shared between scans
and threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from coolex.tokens import Token

if TYPE_CHECKING:
    from coolex.lexer.context import LexerContext


@dataclass(frozen=True, slots=True)
class RuleMatch:
    """Result of a successful ``try_match``.

    Attributes:
        token: The matched token (length > 0)
        lines: Newlines inside the token text that the line counter must
            absorb on commit
        skip: Extra characters to consume after the token (error recovery)

    """

    token: Token
    lines: int = 0
    skip: int = 0


@runtime_checkable
class Rule(Protocol):
    """Protocol for lexer rules.

    Thread Safety:
        Implementations must not keep per-match state on the instance.

    """

    def try_match(self, source: str, pos: int) -> RuleMatch | None:
        """Attempt a match anchored at ``pos``.

        Args:
            source: The complete source buffer (read-only)
            pos: Offset to match at; never search past it

        Returns:
            RuleMatch with a non-empty token, or None
        """
        ...

    def accept(self, match: RuleMatch, context: LexerContext, source: str) -> int:
        """Commit ``match`` and return the offset to resume scanning at."""
        ...


class BaseRule:
    """Default commit behaviour for rules.

    Resumes right after the token plus any recovery skip, and adds every
    newline consumed that way to the line counter.
    """

    __slots__ = ()

    def try_match(self, source: str, pos: int) -> RuleMatch | None:
        raise NotImplementedError

    def accept(self, match: RuleMatch, context: LexerContext, source: str) -> int:
        end = match.token.end
        lines = match.lines
        if match.skip:
            lines += source.count("\n", end, end + match.skip)
            end += match.skip
        context.line_number += lines
        return end
