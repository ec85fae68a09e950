"""
Centralized logging configuration
Gives every module the same format and level
"""

import json
import logging
import os
import sys
from datetime import datetime
from typing import Optional


class CustomFormatter(logging.Formatter):
    """Formatter with ANSI colours on interactive terminals"""

    COLORS = {
        'DEBUG': '\033[36m',    # cyan
        'INFO': '\033[32m',     # green
        'WARNING': '\033[33m',  # yellow
        'ERROR': '\033[31m',    # red
        'CRITICAL': '\033[35m', # magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        formatted = super().format(record)

        if sys.stdout.isatty() and os.getenv('FORCE_COLOR', '').lower() != 'false':
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            reset = self.COLORS['RESET']
            formatted = f"{color}{formatted}{reset}"

        return formatted


DEFAULT_FORMAT = (
    '%(asctime)s - %(name)s - %(levelname)s - '
    '[%(filename)s:%(lineno)d] - %(message)s'
)


def setup_logging(
    level: str = None,
    format_string: str = None,
    log_file: Optional[str] = None
) -> None:
    """
    Configure the root logger

    Args:
        level: logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: log record format
        log_file: optional path of an extra file handler
    """
    log_level = (level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    format_str = format_string or DEFAULT_FORMAT

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(CustomFormatter(format_str))
    root_logger.addHandler(console_handler)

    file_path = log_file or os.getenv('LOG_FILE')
    if file_path:
        log_dir = os.path.dirname(file_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        # no colour codes in files
        file_handler = logging.FileHandler(file_path, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(format_str))
        root_logger.addHandler(file_handler)

    # quieten chatty libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('openai').setLevel(logging.WARNING)
    logging.getLogger('openpyxl').setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging initialised (level: {log_level})")
    if file_path:
        logger.info(f"Log file: {file_path}")


def get_performance_logger(name: str) -> logging.Logger:
    """
    Logger dedicated to performance metrics

    Args:
        name: logger suffix

    Returns:
        logger under the ``performance`` namespace
    """
    logger = logging.getLogger(f"performance.{name}")

    perf_log_file = os.getenv('PERFORMANCE_LOG_FILE')
    if perf_log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        log_dir = os.path.dirname(perf_log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        perf_handler = logging.FileHandler(perf_log_file, encoding='utf-8')
        perf_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(message)s'))
        logger.addHandler(perf_handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger


def log_performance_metrics(
    operation: str,
    duration: float,
    **kwargs
) -> None:
    """
    Write one structured performance record

    Args:
        operation: operation name
        duration: elapsed seconds
        **kwargs: extra metric fields
    """
    perf_logger = get_performance_logger("metrics")

    metrics = {
        "operation": operation,
        "duration_seconds": round(duration, 3),
        "timestamp": datetime.now().isoformat(),
        **kwargs
    }

    perf_logger.info(json.dumps(metrics, ensure_ascii=False))


def init_logging():
    """Logging setup called on application start"""
    from .config import settings
    setup_logging(level=settings.LOG_LEVEL, format_string=settings.LOG_FORMAT)
