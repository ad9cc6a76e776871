"""Logging configuration for programs that run the catalog.

Catalog modules only create loggers with `logging.getLogger(__name__)` and
never configure anything at import. An entry point calls `setup_logging()`
once. It attaches a Rich console handler to the `release_catalog` logger and,
when given a log file, adds a rotating file handler. The file handler records
warnings (duplicate tags, failed fetches) and errors. The host application's
root logger is left alone.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

__all__ = ['CATALOG_LOGGER_NAME', 'console', 'setup_logging']

CATALOG_LOGGER_NAME = 'release_catalog'

# Shared Rich console; stderr keeps stdout free for command output.
console: Console = Console(stderr=True)

_CONSOLE_HANDLER = 'release_catalog.console'
_FILE_HANDLER = 'release_catalog.file'


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(h.name == name for h in logger.handlers)


def setup_logging(
    level: int = logging.INFO,
    *,
    log_file: Path | str | None = None,
    file_level: int = logging.WARNING,
) -> logging.Logger:
    """Attach catalog handlers to the `release_catalog` logger (idempotent).

    Args:
        level: Level of the package logger and its console handler.
        log_file: Optional path of a rotating log file, its directory is created if missing.
        file_level: Minimum level written to `log_file`.

    Returns:
        The configured `release_catalog` logger.
    """
    logger = logging.getLogger(CATALOG_LOGGER_NAME)

    if not _has_handler(logger, _CONSOLE_HANDLER):
        console_handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
        console_handler.name = _CONSOLE_HANDLER
        logger.addHandler(console_handler)

    if log_file is not None and not _has_handler(logger, _FILE_HANDLER):
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding='utf-8')
        file_handler.name = _FILE_HANDLER
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s', datefmt='%Y-%m-%d %H:%M'),
        )
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        if handler.name == _CONSOLE_HANDLER:
            handler.setLevel(level)
    logger.setLevel(min(level, file_level))
    return logger
