"""Logging for docgen.

Two extra levels sit between the standard ones so that ``-v`` can be stepped
up gradually: CHANGES reports files written to disk, CHECKS reports what was
loaded and which pages were found.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

CHANGES_LEVEL = 25  # -v 1
CHECKS_LEVEL = 15  # -v 2

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

_VERBOSITY_LEVELS = {
    0: logging.ERROR,
    1: CHANGES_LEVEL,
    2: CHECKS_LEVEL,
    3: logging.DEBUG,
}


class DocgenLogger(logging.Logger):
    """Logger with a method per docgen verbosity step.

    ``changes`` is used by the page writer for every file it writes. ``checks``
    is used while parsing the model and enumerating interface pages. Per-page
    rendering goes to ``debug``.
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> DocgenLogger:
    """Return the shared "docgen" logger."""
    logging.setLoggerClass(DocgenLogger)
    logger = logging.getLogger("docgen")
    assert isinstance(logger, DocgenLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Point the docgen logger at a stream and set its level from ``-v``.

    Any previously installed handler is replaced, so the CLI callback can run
    once per invocation.

    Args:
        verbosity: 0 shows only errors, 3 shows per-page rendering
        stream: Destination for messages (sys.stderr when omitted)
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_VERBOSITY_LEVELS.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop all handlers and return to errors-only, e.g. between tests."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
