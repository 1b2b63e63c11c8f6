"""Top-level exception handling — translate domain errors to exit codes.

Each domain exception maps to a specific exit code and a one-line
``error: ...`` message on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from nerf.domain.exceptions import (
    ApiError,
    ClipboardError,
    ConfigError,
    NerfError,
    NetworkError,
    ParseError,
    PromptFileError,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1

_EXCEPTION_EXIT_CODE: list[tuple[type[NerfError], int]] = [
    (ConfigError, 3),
    (PromptFileError, 4),
    (NetworkError, 5),
    (ApiError, 6),
    (ParseError, 7),
    (ClipboardError, 8),
]


def exit_code_for(exc: BaseException) -> int:
    for exc_type, code in _EXCEPTION_EXIT_CODE:
        if isinstance(exc, exc_type):
            return code
    return EXIT_UNEXPECTED


def handle_error(exc: Exception, stream: TextIO | None = None) -> int:
    """Report *exc* and return the exit code the process should terminate with."""
    out = stream if stream is not None else sys.stderr

    if isinstance(exc, NerfError):
        logger.debug("%s: %s", type(exc).__name__, exc)
        print(f"error: {exc}", file=out)
        return exit_code_for(exc)

    # ── Catch-all for unexpected errors ─────────────────────────────────
    logger.exception("Unhandled exception")
    print(f"error: unexpected failure: {exc}", file=out)
    return EXIT_UNEXPECTED
