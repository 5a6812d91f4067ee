"""Exception classes for coolex.

Malformed COOL source never raises: it is reported as ERROR tokens in the
token stream. The exceptions here signal defects in how the lexer itself
was put together (bad rule definitions, a rule set with gaps).
"""

from __future__ import annotations


class CoolexError(Exception):
    """Base exception for all coolex errors.

    Subclass this for specific error categories.
    """

    pass


class RuleError(CoolexError):
    """A rule could not be built.

    Raised at rule construction, e.g. for a pattern that does not compile.
    """

    def __init__(self, rule_name: str, message: str) -> None:
        """Initialize rule error.

        Args:
            rule_name: Short description of the rule (e.g., "Type ID")
            message: Description of the failure
        """
        self.rule_name = rule_name
        super().__init__(f"Rule '{rule_name}': {message}")


class LexerInvariantError(CoolexError):
    """The driver loop found a state it must never reach.

    Not recoverable: the rule set handed to the Lexer is broken.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line_number: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize invariant error with optional location.

        Args:
            message: Error description
            position: Absolute offset in the source where scanning stopped
            line_number: Line number at that point (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.position = position
        self.line_number = line_number
        self.source_file = source_file

        # Build formatted message: "file.cl, line 3, offset 17: message"
        parts = []
        if source_file:
            parts.append(source_file)
        if line_number is not None:
            parts.append(f"line {line_number}")
        if position is not None:
            parts.append(f"offset {position}")
        location = f"{', '.join(parts)}: " if parts else ""

        super().__init__(f"{location}{message}")


class NoRuleMatchedError(LexerInvariantError):
    """No registered rule matched non-empty remaining input.

    A complete rule set ends with a catch-all rule, so this only happens
    when that rule is missing.
    """

    pass
