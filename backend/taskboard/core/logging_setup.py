from __future__ import annotations

import logging
import sys


def setup_logging(level: str | int = logging.DEBUG) -> None:
    """
    Configure the root logger with a single console handler.

    Call this once, before the first log line. Pre-existing root handlers are
    removed so repeated calls (tests, reloads) don't duplicate output.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # uvicorn access lines are noise next to the job output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
