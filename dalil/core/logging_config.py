"""
Centralized logging configuration.

This module provides consistent logging across all application modules.
Logs are written to the console (stdout) and, when a log directory is
configured, to daily log files.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


# Module-level flag to prevent duplicate handler registration
_logging_configured = False


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """
    Configure application-wide logging.

    This function should be called once at application startup.
    Repeated calls are no-ops and return the root logger.

    Args:
        log_level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files. No file handler when None.

    Returns:
        Configured root logger instance

    Example:
        >>> from dalil.core.logging_config import setup_logging
        >>> logger = setup_logging("INFO")
        >>> logger.info("Application started")
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger()

    # Format: timestamp | level | module:line | message
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"relay_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)  # File captures everything
        root_logger.addHandler(file_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("groq").setLevel(logging.WARNING)

    _logging_configured = True

    root_logger.debug(f"Logging configured: level={log_level}, file={log_file}")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Using __name__ as the logger name preserves the module hierarchy.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Processing user request")
        2024-01-15 10:30:45 | INFO     | dalil.api.routes.chat:42 | Processing user request
    """
    return logging.getLogger(name)
