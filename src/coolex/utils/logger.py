"""Logger lookup for coolex modules.

All coolex loggers live under the ``coolex`` namespace, so an application
can tune them as one unit:

    >>> import logging
    >>> logging.getLogger("coolex").setLevel(logging.WARNING)

The lexer logs one DEBUG line per scan, and a WARNING per ERROR token
when ``LexConfig.log_errors`` is set. The CLI reports unreadable files
at ERROR.
"""

from __future__ import annotations

import logging

_ROOT = "coolex"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the coolex namespace.

    Module names already under ``coolex`` are used unchanged; anything
    else is nested below it (``"rules"`` becomes ``"coolex.rules"``).
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
