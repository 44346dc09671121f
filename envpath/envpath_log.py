from __future__ import annotations

import logging
import os

ROOT_LOGGER = "envpath"
DEBUG_ENV = "ENVPATH_DEBUG"


def setup(level: int | None = None) -> logging.Logger:
    """
    Attaches a stderr handler to the `envpath` logger once.
    Level is DEBUG when ENVPATH_DEBUG is set, WARNING otherwise.
    """
    log = logging.getLogger(ROOT_LOGGER)
    if level is None:
        level = logging.DEBUG if os.environ.get(DEBUG_ENV) else logging.WARNING
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)
    return log


__all__ = ["setup", "ROOT_LOGGER", "DEBUG_ENV"]
