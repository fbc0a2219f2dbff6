"""
Logging Configuration for the Risk Reward Calculator

Log records go to stderr so calculator output on stdout (text or --json)
stays machine-readable. pandas/numpy warnings raised while sizing a batch
are routed through logging instead of printed raw.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, TextIO

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s'

# Warnings from these only matter when debugging
NOISY_LOGGERS = ('py.warnings', 'matplotlib', 'numexpr')


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    max_bytes: int = 10_000_000,
    backup_count: int = 5,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the root logger.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional rotating log file (None for console only)
        max_bytes: Max size before rotation
        backup_count: Number of rotated files to keep
        fmt: Record format
        stream: Console stream (defaults to stderr)

    Returns:
        Root logger configured
    """
    log_level = getattr(logging, str(level).upper(), None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    formatter = logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S')

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Library warnings become log records
    logging.captureWarnings(True)
    noisy_level = logging.DEBUG if log_level <= logging.DEBUG else logging.ERROR
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    return root_logger


def setup_logging_from_config(logging_config, debug: bool = False) -> logging.Logger:
    """Configure logging from a LoggingConfig section."""
    return setup_logging(
        level='DEBUG' if debug else logging_config.level,
        log_file=logging_config.log_file,
        max_bytes=logging_config.max_bytes,
        backup_count=logging_config.backup_count,
        fmt=logging_config.format
    )


def get_logger(name: str) -> logging.Logger:
    """Get a named logger (typically __name__)."""
    return logging.getLogger(name)
