"""Structured JSON logging via structlog, written to a file so the TUI keeps the terminal."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

import structlog

from chef_menu.config import LOG_PATH

_log_file: TextIO | None = None


def setup_logging(log_path: str = LOG_PATH, level: int = 20) -> None:
    """Configure structlog to append JSON lines to ``log_path``."""
    global _log_file

    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if _log_file is not None:
        _log_file.close()
    _log_file = path.open("a", encoding="utf-8")

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=_log_file),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a logger bound with the calling module name."""
    return structlog.get_logger(module=name)
