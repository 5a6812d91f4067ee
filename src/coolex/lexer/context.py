"""Per-scan mutable state threaded through rule commits."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(slots=True)
class LexerContext:
    """Scan state shared by the driver and the rules' ``accept``.

    Only ``accept`` mutates it. The driver attaches a snapshot to every
    emitted token so later stages can tell which line it came from.

    Attributes:
        line_number: Current line (1-indexed), never decreases

    """

    line_number: int = 1

    def snapshot(self) -> LexerContext:
        """Independent copy for the output stream."""
        return replace(self)
