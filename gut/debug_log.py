"""Opt-in debug logging to a file named by ``GUT_LOG``.

The terminal is in raw alternate-screen mode while a session runs, so log
records never go to stderr: either a file handler or nothing at all.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

LOG_ENV_VAR = "GUT_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s"


def configure_debug_log(environ: Mapping[str, str] | None = None) -> logging.Handler:
    """Attach the session handler to the ``gut`` logger and return it.

    Raises ``SystemExit`` when ``GUT_LOG`` names a file that cannot be opened.
    """
    env = os.environ if environ is None else environ
    logger = logging.getLogger("gut")
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_path = env.get(LOG_ENV_VAR, "")
    if not log_path:
        handler: logging.Handler = logging.NullHandler()
        logger.setLevel(logging.WARNING)
    else:
        try:
            handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"Cannot open log file {log_path}: {exc.strerror or exc}") from exc
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    return handler
