"""Shared logging utilities.

Every entrypoint (API, training job, ingestion job) calls `configure_logging`
once at startup so all components emit the same line format to stdout. Modules
themselves only ever use `logging.getLogger(__name__)`.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single stdout handler on the root logger.

    Calling this again replaces the previous handler instead of stacking a
    second one, so it is safe to call from both an app module and a job.

    Args:
        level: Log level name (e.g. "DEBUG") or numeric level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_player_ai_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._player_ai_handler = True
    root.addHandler(handler)
    root.setLevel(level)
