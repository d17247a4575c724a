"""
Logging configuration for the invoice assistant.
"""

import os
import logging
import logging.handlers
from pathlib import Path
from typing import Optional


def setup_logger(service_name: str, enable_file_logging: Optional[bool] = None,
                 log_dir: str = "logs") -> logging.Logger:
    """
    Set up logger with conditional file logging based on DEBUG_LOG environment variable.

    Args:
        service_name: Name of the service, used as logger name and log file name
        enable_file_logging: Force enable/disable file logging. If None, reads from DEBUG_LOG env var.
        log_dir: Directory for the rotating log file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(service_name)

    # Lambda reuses warm containers; avoid stacking handlers
    logger.handlers.clear()

    if enable_file_logging is None:
        debug_log = os.getenv("DEBUG_LOG", "false").lower()
        enable_file_logging = debug_log in ("true", "1", "yes", "on")

    if enable_file_logging:
        log_level = logging.DEBUG
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)

        log_file = logs_dir / f"{service_name}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)
    else:
        log_level = logging.ERROR

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    console_handler.setLevel(log_level)
    logger.addHandler(console_handler)

    logger.setLevel(log_level)
    logger.propagate = False

    return logger
