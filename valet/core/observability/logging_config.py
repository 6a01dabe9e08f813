"""
Logging setup for the valet CLI.

The CLI passes a verbosity count taken from its flags; everything else
comes from the environment:

    VALET_LOG_LEVEL       console level when no flag is given (default WARNING)
    VALET_LOG_FILE        also write records to this file
    VALET_LOG_FILE_LEVEL  level for the file (default: the console level)

Verbosity: -1 = quiet (ERROR), 0 = env/WARNING, 1 = INFO, 2+ = DEBUG.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

LEVEL_ENV_VAR = "VALET_LOG_LEVEL"
FILE_ENV_VAR = "VALET_LOG_FILE"
FILE_LEVEL_ENV_VAR = "VALET_LOG_FILE_LEVEL"

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

_VERBOSITY_LEVELS = {-1: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}


def resolve_level(verbosity: int = 0, environ: Mapping[str, str] | None = None) -> int:
    """Console level for a verbosity count; flags win over VALET_LOG_LEVEL."""
    if verbosity != 0:
        return _VERBOSITY_LEVELS[max(-1, min(verbosity, 2))]
    env = os.environ if environ is None else environ
    return _parse_level(env.get(LEVEL_ENV_VAR))


def setup_logging(verbosity: int = 0, environ: Mapping[str, str] | None = None) -> int:
    """Install console (and optional file) handlers on the root logger.

    Returns the console level that was applied.
    """
    env = os.environ if environ is None else environ
    level = resolve_level(verbosity, env)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    if level <= logging.INFO:
        console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        # click already prints status lines; warnings read as plain text
        console.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root.setLevel(level)

    log_file = env.get(FILE_ENV_VAR)
    if log_file:
        file_level = _parse_level(env.get(FILE_LEVEL_ENV_VAR), default=level)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.setLevel(min(level, file_level))

    return level


def _parse_level(name: str | None, default: int = logging.WARNING) -> int:
    """Level constant for a name like "info"; ``default`` if unknown."""
    if not name:
        return default
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default
