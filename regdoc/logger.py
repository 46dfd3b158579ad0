from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "WARNING", quiet: bool = False) -> None:
    """Configure the root logger to write to stderr.

    Rendered documents go to stdout, so log records never mix with them.
    ``quiet`` drops everything below ERROR.
    """
    root = logging.getLogger()
    root.handlers.clear()

    lvl = logging.ERROR if quiet else getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(lvl)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(lvl)
    ch.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root.addHandler(ch)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
