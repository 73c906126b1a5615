from __future__ import annotations

import logging
from pathlib import Path

from .errors import ConfigError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Route log records to ``log_file``, or to stderr when it is ``None``.

    The TUI owns the terminal, so it always passes a file.
    """

    handlers: list[logging.Handler]
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers = [logging.FileHandler(log_file, encoding="utf-8")]
        except OSError as exc:
            raise ConfigError(f"Cannot open log file: {log_file}") from exc
    else:
        handlers = [logging.StreamHandler()]
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
