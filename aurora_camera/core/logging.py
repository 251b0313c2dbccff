# aurora_camera/core/logging.py

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional


class Logger:
    """
    Project logging wrapper.
    Console output always, file output when a log directory is given.
    """

    def __init__(self, name: str = "AuroraCamera", log_dir: Optional[str] = None,
                 level: str = "INFO"):
        self.name = name
        self.log_dir = Path(log_dir) if log_dir else None

        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Prevent duplicate handlers
        has_console = any(not isinstance(h, logging.FileHandler) for h in self.logger.handlers)
        has_file = any(isinstance(h, logging.FileHandler) for h in self.logger.handlers)

        if has_console:
            self.set_level(level)
        else:
            self._setup_console_handler(level)

        if self.log_dir is not None and not has_file:
            self._setup_file_handler()

    def _setup_console_handler(self, level: str):
        """Console handler at the requested level."""
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
        console_formatter = logging.Formatter(
            '%(levelname)-8s [%(name)s] %(message)s'
        )
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

    def _setup_file_handler(self):
        """File handler (DEBUG and above) in log_dir."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = self.log_dir / f"camera_{timestamp}.log"

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        self.logger.addHandler(file_handler)

    def set_level(self, level: str):
        """Change console verbosity."""
        for handler in self.logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(getattr(logging, level.upper(), logging.INFO))

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        """Log error message."""
        self.logger.error(message, exc_info=exc_info)

    def critical(self, message: str, exc_info: bool = False):
        """Log critical message."""
        self.logger.critical(message, exc_info=exc_info)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get global logger."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def init_logger(name: str = "AuroraCamera", log_dir: Optional[str] = None,
                level: str = "INFO") -> Logger:
    """Initialize global logger."""
    global _logger
    _logger = Logger(name, log_dir, level)
    return _logger
