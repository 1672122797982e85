"""Centralized Logging Management for the QFV client

Attaches handlers to the ``qfv`` logger hierarchy. The library itself only
emits records through ``logging.getLogger(__name__)``; applications opt in to
console or file output through ``LoggingManager.configure``.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config_manager import LoggingConfig


LIBRARY_LOGGER = 'qfv'


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


class LoggingManager:
    """Centralized logging configuration for the ``qfv`` logger tree."""

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logging manager (only once)."""
        if self._initialized:
            return

        self.loggers: Dict[str, logging.Logger] = {}
        self.handlers: Dict[str, logging.Handler] = {}
        self.root_logger = logging.getLogger(LIBRARY_LOGGER)
        self.root_logger.addHandler(logging.NullHandler())
        self._initialized = True

    def configure(self, config: 'LoggingConfig') -> logging.Logger:
        """Apply a logging configuration to the ``qfv`` logger.

        Args:
            config: Validated logging section of the application config

        Returns:
            The configured library logger
        """
        self._remove_handlers()
        self.root_logger.setLevel(self._numeric_level(config.level))

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            self._add_handler('console', console_handler)

        if config.file_path:
            log_file = Path(config.file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=config.max_bytes,
                backupCount=config.backup_count
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self._add_handler('file', file_handler)

        return self.root_logger

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger inside the ``qfv`` hierarchy.

        Args:
            name: Logger name (typically __name__ of the module)

        Returns:
            Logger instance
        """
        manager = cls()
        if name != LIBRARY_LOGGER and not name.startswith(LIBRARY_LOGGER + '.'):
            name = f"{LIBRARY_LOGGER}.{name}"

        if name in manager.loggers:
            return manager.loggers[name]

        logger = logging.getLogger(name)
        manager.loggers[name] = logger
        return logger

    def set_log_level(self, level: str):
        """Set the logging level of the library logger.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self.root_logger.setLevel(self._numeric_level(level))

    def _add_handler(self, key: str, handler: logging.Handler):
        self.root_logger.addHandler(handler)
        self.handlers[key] = handler

    def _remove_handlers(self):
        for handler in self.handlers.values():
            self.root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    @staticmethod
    def _numeric_level(level: str) -> int:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        return numeric_level
