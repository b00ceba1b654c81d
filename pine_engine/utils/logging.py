"""
Logging helpers for the engine.

The package never installs handlers on import. Applications (and the
``pine-engine`` command) call ``setup_logging`` once to attach console and
optional file output to the ``pine_engine`` logger tree.
"""

import logging
import os
import sys
import time
from typing import Dict, Optional

ROOT_LOGGER_NAME = "pine_engine"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[34m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}


def level_from_name(name: str, default: int) -> int:
    """
    Resolve a level name such as "debug" or "WARNING".

    Args:
        name: Level name from the command line or config file
        default: Level to use when the name is not recognised

    Returns:
        int: The numeric logging level
    """
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


class LogFormatter(logging.Formatter):
    """Formatter that highlights the level name with an ANSI color."""

    def __init__(self, colored: bool = True, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Windows consoles print the escape codes literally
        self.colored = colored and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if self.colored and color:
            text = text.replace(record.levelname, f"{color}{record.levelname}{RESET}", 1)
        return text


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "WARNING",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Attach console and file handlers to the engine logger.

    Calling it again for a logger that already has handlers changes nothing.

    Args:
        log_file: Path of a log file, or None to log to the console only
        console_level: Level name for console output
        file_level: Level name for file output
        component: Sub-logger to configure instead of the package logger
        colored: Whether console level names are colored

    Returns:
        logging.Logger: The configured logger
    """
    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    console = logging.StreamHandler()
    console.setLevel(level_from_name(console_level, logging.WARNING))
    console.setFormatter(LogFormatter(colored=colored, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level_from_name(file_level, logging.DEBUG))
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    # The logger passes on whatever its most verbose handler wants
    logger.setLevel(min(handler.level for handler in logger.handlers))
    return logger


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception at error level.

    Render errors are usually mistakes in the input, so the traceback is
    only attached when debug output is enabled.

    Args:
        logger: Logger to use
        exception: Exception to log
        message: Text logged in front of the exception message
    """
    exc_info = exception if logger.isEnabledFor(logging.DEBUG) else None
    logger.error(f"{message}: {exception}", exc_info=exc_info)


class PerformanceLogger:
    """
    Times the stages of a render.

    The duration of the most recent run of every stage is kept in
    ``timings`` and logged at debug level.
    """

    def __init__(self, logger: logging.Logger, component: str):
        """
        Initialize the stage timer.

        Args:
            logger: Logger the durations are written to
            component: Name prefixed to every logged duration
        """
        self.logger = logger
        self.component = component
        self.timings: Dict[str, float] = {}
        self._started: Dict[str, float] = {}

    def start(self, name: str) -> None:
        """Mark the start of stage ``name``."""
        self._started[name] = time.perf_counter()

    def end(self, name: str) -> float:
        """
        Mark the end of stage ``name``, record and log its duration.

        Args:
            name: Stage name passed to ``start``

        Returns:
            float: Duration in seconds, or 0.0 if the stage was never started
        """
        started = self._started.pop(name, None)
        if started is None:
            self.logger.warning(f"{self.component} stage {name} ended without being started")
            return 0.0

        duration = time.perf_counter() - started
        self.timings[name] = duration
        self.logger.debug(f"{self.component} {name} took {duration:.4f} seconds")
        return duration
