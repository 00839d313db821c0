"""Logging configuration for git-worktree-manager"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FILE_ENV = "GIT_WORKTREE_MANAGER_LOG_FILE"
DEFAULT_LOG_FILE = Path.home() / ".git-worktree-manager" / "git-worktree-manager.log"

# GitPython logs every git invocation at DEBUG; only shown with --debug
THIRD_PARTY_LOGGERS = ("git", "asyncio")

CONSOLE_FORMAT = '[%(name)s] %(message)s'
DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for terminal output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, use_color: Optional[bool] = None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record):
        if not self.use_color or record.levelname not in self.COLORS:
            return super().format(record)
        # Records are shared between handlers, so color a copy
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(colored)


def get_log_file() -> Path:
    """Log file written in TUI and debug mode, overridable through the environment."""
    override = os.environ.get(LOG_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return DEFAULT_LOG_FILE


def setup_logging(verbose: bool = False, debug: bool = False, tui_mode: bool = False) -> Optional[Path]:
    """
    Configure logging for the application.

    Sync results are reported per entry on the console, so per-link messages
    stay at INFO and only appear with --verbose.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages and detailed formatting
        tui_mode: If True, log to file only (the TUI owns the terminal)

    Returns:
        Path of the log file in use, or None when logging only to the console
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    # The file gets everything in TUI mode; handlers do the filtering
    root_logger.setLevel(logging.DEBUG if tui_mode else level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if debug else logging.WARNING)

    log_file = None
    if tui_mode or debug:
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w')  # Overwrite each run
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    if not tui_mode:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        if debug:
            console_handler.setFormatter(ColoredFormatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
        else:
            console_handler.setFormatter(ColoredFormatter(fmt=CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    return log_file


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # Strip the package prefix for cleaner log names
    if name.startswith('git_worktree_manager.'):
        name = name.replace('git_worktree_manager.', '', 1)

    return logging.getLogger(name)
