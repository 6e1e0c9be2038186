"""
Logging for tvogen runs.

``tvogen generate``, ``tvogen show`` and ``tvogen config check`` all go
through ``cli()`` in main.py, which calls ``setup_logging`` before any
command body runs. What gets logged:

- ``src.core.config.loader``: which valueobjects.yml was found and loaded
- ``src.core.use_cases.generate``: selection, dry runs, per-file failures
- ``src.core.persistence.generated_files``: written / unchanged / skipped

The generators themselves never log. Their output is the .g.cs text.

Console level comes from ``--debug`` (DEBUG), ``-v`` (INFO) or ``-q``
(ERROR); without a flag, TVO_LOG_LEVEL is used, then WARNING. Setting
TVO_LOG_FILE adds a file log at TVO_LOG_FILE_LEVEL, handy for keeping a
DEBUG trace of a build while the terminal stays quiet.
"""

from __future__ import annotations

import logging
import sys

LOG_LEVEL_ENV = "TVO_LOG_LEVEL"
LOG_FILE_ENV = "TVO_LOG_FILE"
LOG_FILE_LEVEL_ENV = "TVO_LOG_FILE_LEVEL"

# Console formats, most detailed first: (max level, format, datefmt)
_CONSOLE_FORMATS = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
# Warnings and errors show up next to the command's own output
_CONSOLE_PLAIN = "%(message)s"

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _console_formatter(numeric_level: int) -> logging.Formatter:
    for max_level, fmt, datefmt in _CONSOLE_FORMATS:
        if numeric_level <= max_level:
            return logging.Formatter(fmt, datefmt=datefmt)
    return logging.Formatter(_CONSOLE_PLAIN)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Install the stderr handler (and optional file handler) on the root logger.

    Safe to call more than once; previous handlers are replaced.

    Args:
        level: Console level name, e.g. "INFO".
        log_file: Path of a log file to append to, if any.
        log_file_level: Level for the file. Falls back to ``level``.
    """
    console_level = parse_level(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = parse_level(log_file_level) if log_file_level else console_level
        # Root must let through whatever the more verbose handler wants
        root_level = min(root_level, file_level)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
        root.addHandler(file_handler)

    root.setLevel(root_level)

    # A broken log stream must not fail a generate run
    logging.raiseExceptions = False


def parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown or empty names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
