import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from university_registry.config import LOG_DIR

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class LoggingConfig:
    """Centralized logging configuration for the university registry."""

    def __init__(self, logs_dir: Optional[Path] = None):
        self.logs_dir = Path(logs_dir or LOG_DIR)
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    def setup_logging(
        self,
        log_level: str = "INFO",
        console_level: Optional[str] = None,
        file_level: Optional[str] = None,
        max_file_size: int = 10 * 1024 * 1024,  # 10 MB
        backup_count: int = 5,
        log_format: Optional[str] = None,
        log_to_file: bool = True,
    ) -> None:
        """
        Set up console and rotating-file logging on the root logger.

        Args:
            log_level: Default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            console_level: Log level for console output (if different from log_level)
            file_level: Log level for file output (if different from log_level)
            max_file_size: Maximum size of log files before rotation (in bytes)
            backup_count: Number of backup files to keep
            log_format: Custom log format string
            log_to_file: Whether to attach the rotating file handler
        """
        if self._configured:
            return

        root_level = LEVELS.get(log_level.upper(), logging.INFO)
        console_log_level = LEVELS.get((console_level or log_level).upper(), root_level)
        file_log_level = LEVELS.get((file_level or log_level).upper(), root_level)
        formatter = logging.Formatter(log_format or DEFAULT_FORMAT)

        root_logger = logging.getLogger()
        root_logger.setLevel(
            min(console_log_level, file_log_level) if log_to_file else console_log_level
        )
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_log_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if log_to_file:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                self.logs_dir / "university-registry.log",
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(file_log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured - Console: {console_level or log_level}, "
            f"File: {(file_level or log_level) if log_to_file else 'disabled'}"
        )

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)


# Global instance
_logging_config = LoggingConfig()


def setup_logging(**kwargs) -> None:
    """Convenience function to set up logging."""
    _logging_config.setup_logging(**kwargs)


def get_logger(name: str) -> logging.Logger:
    """Convenience function to get a logger."""
    return _logging_config.get_logger(name)


def configure_from_env() -> None:
    """Configure logging from environment variables."""
    log_level = os.getenv("LOG_LEVEL", "WARNING")
    console_level = os.getenv("CONSOLE_LOG_LEVEL")
    file_level = os.getenv("FILE_LOG_LEVEL")
    log_to_file = os.getenv("LOG_TO_FILE", "true").lower() not in ("0", "false", "no")

    setup_logging(
        log_level=log_level,
        console_level=console_level,
        file_level=file_level,
        log_to_file=log_to_file,
    )
