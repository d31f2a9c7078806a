"""
Logging configuration with plain-text or JSON output.
"""
import json
import logging
import sys

from cipher_suite.core.config import get_settings

ROOT_LOGGER = "cipher_suite"


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_dict = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_dict["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_dict, ensure_ascii=False, default=str)


class LoggingConfig:
    """Centralized logging configuration."""

    _configured = False

    @classmethod
    def configure(cls, level: str | None = None, log_format: str | None = None) -> None:
        """Configure the package logger. Safe to call more than once."""
        if cls._configured:
            return

        settings = get_settings()
        level = level or settings.log_level
        log_format = log_format or settings.log_format

        if log_format.lower() == "json":
            formatter: logging.Formatter = JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)

        logger = logging.getLogger(ROOT_LOGGER)
        logger.setLevel(level.upper())
        logger.addHandler(handler)
        # Keep records out of uvicorn's root handlers
        logger.propagate = False

        cls._configured = True

    @classmethod
    def reset(cls) -> None:
        """Remove installed handlers so the next configure() starts fresh."""
        logger = logging.getLogger(ROOT_LOGGER)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.propagate = True
        cls._configured = False

    @staticmethod
    def get_logger(name: str) -> logging.Logger:
        """Get a logger under the package namespace."""
        return logging.getLogger(name)
