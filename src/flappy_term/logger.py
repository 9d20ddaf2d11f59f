"""
logger.py: Logging setup for the game.

The game window owns the screen, so diagnostics go to stderr and,
optionally, to a plain-text log file.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER = "flappy_term"


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG": "\033[90m",     # grey
        "INFO": "\033[36m",      # cyan
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        name = record.name.replace(f"{ROOT_LOGGER}.", "")
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return line
        return f"{self.COLORS.get(record.levelname, '')}{line}{self.RESET}"


def setup_logging(level: str = "info", log_file: Optional[str] = None) -> None:
    """Configure the flappy_term root logger."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter(use_color=sys.stderr.isatty()))
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(HumanFormatter(use_color=False))
        root.addHandler(fh)
