# word_scout/logger.py
"""Logging for WordScout.

Every module logs through one named logger::

    from word_scout.logger import logger
    logger.info("Crawl started")

Records go to stderr, so the JSON result printed on stdout stays clean.
:func:`configure` can also attach a rotating logfile. aiohttp records are
routed to the same handlers; below WARNING they are dropped unless the level
is DEBUG.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Iterable, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "WordScout"
LIBRARY_LOGGER: Final[str] = "aiohttp"

_NOISY_LOGGERS: Final[tuple[str, ...]] = ("aiohttp.access", "aiohttp.client", "aiohttp.internal")

_LevelT = Union[int, str]


class NoisyLibraryFilter(logging.Filter):
    """Drops records below WARNING coming from the given library loggers."""

    def __init__(self, prefixes: Iterable[str] = _NOISY_LOGGERS) -> None:
        super().__init__()
        self.prefixes = tuple(prefixes)

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= logging.WARNING:
            return True
        return not record.name.startswith(self.prefixes)


def _build_handlers(log_file: str | Path | None, fmt: str, quiet: bool) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
        if quiet:
            handler.addFilter(NoisyLibraryFilter())
    return handlers


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the handlers of the project logger.

    Parameters
    ----------
    level
        Numeric or textual logging level (e.g. ``"DEBUG"``).
    log_file
        Optional logfile, rotated at 5 MB with three backups.
    log_format
        Format string for :class:`logging.Formatter`.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    library = logging.getLogger(LIBRARY_LOGGER)
    library.setLevel(level)
    for handler in list(library.handlers):
        library.removeHandler(handler)

    # aiohttp records share our handlers; the filter keeps them quiet above DEBUG
    quiet = lg.getEffectiveLevel() > logging.DEBUG
    for handler in _build_handlers(log_file, log_format, quiet):
        lg.addHandler(handler)
        library.addHandler(handler)
    lg.propagate = False
    library.propagate = False
    return lg


def init_logging(
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Entry point used by the CLI."""
    return configure(level=level, log_file=log_file, log_format=log_format)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "NoisyLibraryFilter", "DEFAULT_FORMAT", "LOGGER_NAME"]
