"""
Logging system for Alias Tips.

Logs always go to stderr: stdout is reserved for the tip itself, which the
calling shell displays verbatim. A rotating log file can be enabled through
configuration for debugging shell integration.
"""

import os
import sys
import time
import logging
import logging.handlers
from pathlib import Path
from typing import Dict
from contextlib import contextmanager


ROOT_LOGGER = "alias_tips"


class Colors:
    """ANSI color codes for console output."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    BRIGHT_BLACK = '\033[90m'
    BRIGHT_RED = '\033[91m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_BLUE = '\033[94m'
    BRIGHT_MAGENTA = '\033[95m'


class ColoredConsoleFormatter(logging.Formatter):
    """Formatter that adds colors to console output based on log level."""

    LEVEL_COLORS = {
        'DEBUG': Colors.BRIGHT_BLACK,
        'INFO': Colors.BRIGHT_BLUE,
        'WARNING': Colors.BRIGHT_YELLOW,
        'ERROR': Colors.BRIGHT_RED,
        'CRITICAL': Colors.BRIGHT_MAGENTA + Colors.BOLD,
    }

    def __init__(self, use_colors=True, stream=None):
        """Initialize the formatter.

        Args:
            use_colors: Whether to use colors in output
            stream: Stream the handler writes to, checked for TTY support
        """
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)
        super().__init__('%(levelname)-8s | %(name)s | %(message)s')

    @staticmethod
    def _supports_color(stream) -> bool:
        if not hasattr(stream, 'isatty') or not stream.isatty():
            return False
        if os.getenv('NO_COLOR'):
            return False
        return True

    def format(self, record):
        formatted = super().format(record)
        if not self.use_colors:
            return formatted

        color = self.LEVEL_COLORS.get(record.levelname, '')
        if color:
            formatted = f"{color}{formatted}{Colors.RESET}"
        return formatted


class PerformanceTimer:
    """Context manager for timing an operation."""

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.DEBUG):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.end_time = time.perf_counter()
        duration = self.end_time - self.start_time

        if exc_type is None:
            self.logger.log(self.level, f"Completed {self.operation} in {duration:.3f}s")
        else:
            self.logger.log(self.level, f"Failed {self.operation} after {duration:.3f}s")


class LoggingManager:
    """Central logging manager for Alias Tips."""

    def __init__(self):
        self._initialized = False
        self._loggers: Dict[str, logging.Logger] = {}

    def setup_logging(self, config, verbose: bool = False, force_reinit: bool = False):
        """Setup logging based on configuration.

        Args:
            config: AliasTipsConfig instance
            verbose: Enable debug logging (overrides config)
            force_reinit: Force reinitialization even if already setup
        """
        if self._initialized and not force_reinit:
            return

        if verbose or config.app.debug:
            log_level = logging.DEBUG
        else:
            log_level = getattr(logging, config.app.log_level.value, logging.WARNING)

        package_logger = logging.getLogger(ROOT_LOGGER)
        package_logger.setLevel(log_level)

        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
            handler.close()

        self._setup_console_handler(package_logger, log_level)

        if config.app.log_file:
            self._setup_file_handler(package_logger, config, log_level)

        self._initialized = True

        logger = self.get_logger('alias_tips.logging')
        logger.debug(f"Logging initialized at {logging.getLevelName(log_level)}")

    def _setup_console_handler(self, package_logger: logging.Logger, log_level: int):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(ColoredConsoleFormatter(use_colors=True, stream=sys.stderr))
        package_logger.addHandler(console_handler)

    def _setup_file_handler(self, package_logger: logging.Logger, config, log_level: int):
        """Setup file logging handler with rotation."""
        try:
            log_file = Path(config.app.log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=config.app.max_log_size_mb * 1024 * 1024,
                backupCount=config.app.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            package_logger.addHandler(file_handler)

        except OSError as e:
            print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance for the given name."""
        if name not in self._loggers:
            self._loggers[name] = logging.getLogger(name)
        return self._loggers[name]

    def create_performance_timer(self, operation: str, level: int = logging.DEBUG) -> PerformanceTimer:
        logger = self.get_logger('alias_tips.performance')
        return PerformanceTimer(logger, operation, level)


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config, verbose: bool = False, force_reinit: bool = False):
    """Setup logging based on configuration."""
    _logging_manager.setup_logging(config, verbose, force_reinit)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name (typically __name__)."""
    return _logging_manager.get_logger(name)


@contextmanager
def log_performance(operation: str, level: int = logging.DEBUG):
    """Context manager for performance timing.

    Yields:
        PerformanceTimer instance
    """
    timer = _logging_manager.create_performance_timer(operation, level)
    with timer:
        yield timer
