"""
Structured Logging Configuration

One line per record: UTC timestamp, level, logger name, message.
"""
import logging
import sys
from typing import Optional
from datetime import datetime, timezone

from app.config import settings

_FILE_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


class StructuredFormatter(logging.Formatter):
    """Console formatter; warnings and errors are coloured on a terminal."""

    _HIGHLIGHT = {'WARNING': '\033[33m', 'ERROR': '\033[31m', 'CRITICAL': '\033[31m'}

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        line = f"[{stamp}] {record.levelname:8} [{record.name}] {record.getMessage()}"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        color = self._HIGHLIGHT.get(record.levelname) if self.use_color else None
        return f"{color}{line}\033[0m" if color else line


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Handlers installed by earlier calls are replaced; others (e.g. pytest's
    capture handler) are left alone.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(root_logger.handlers):
        if getattr(handler, "_plasma_handler", False):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter(use_color=sys.stdout.isatty()))
    handlers = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    for handler in handlers:
        handler._plasma_handler = True
        root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


setup_logging(settings.log_level, settings.log_file)
