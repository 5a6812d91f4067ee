"""coolex LexAccumulator: opt-in profiling for lexing.

This module provides accumulated metrics during lexing:
- Total wall time
- Source length
- Token and error counts

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from coolex import lex
    from coolex.profiling import profiled_lex

    with profiled_lex() as metrics:
        lex("class Main {};")

    print(metrics.summary())
    # {"total_ms": 0.3, "scan_calls": 1, "source_length": 14, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during lexing.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of scans recorded, finished or not.
        source_length: Total characters scanned.
        token_count: Total tokens produced (trivia included).
        error_count: Total ERROR tokens produced.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    source_length: int = 0
    token_count: int = 0
    error_count: int = 0

    def record_scan(self, source_length: int, token_count: int, error_count: int) -> None:
        """Record one scan, including one stopped early.

        Args:
            source_length: Characters consumed before the scan ended.
            token_count: Number of tokens the scan produced.
            error_count: Number of those that were ERROR tokens.
        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.error_count += error_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of lex metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "error_count": self.error_count,
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Context manager for profiled lexing.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Yields:
        LexAccumulator that will be populated by every scan in the block.

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
