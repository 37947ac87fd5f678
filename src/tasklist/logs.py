import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "tasklist" / "logs"

def _console_level(level: str = None) -> int:
    env_level = os.getenv('TASKLIST_LOG_LEVEL', '').upper()
    is_debug = os.getenv('TASKLIST_DEBUG', '').lower() in ('1', 'true', 'yes')

    if is_debug:
        return logging.DEBUG
    if env_level:
        return getattr(logging, env_level, logging.WARNING)
    if level:
        return getattr(logging, level.upper(), logging.WARNING)
    return logging.WARNING  # Default: warnings and errors only

def setup_logging(level: str = None):
    """Set up logging for the tasklist package.

    The console handler writes to stderr so the interactive transcript on
    stdout is never interleaved with log records. ``TASKLIST_DEBUG`` and
    ``TASKLIST_LOG_LEVEL`` take precedence over ``level``.
    """
    console_level = _console_level(level)
    is_debug = console_level == logging.DEBUG

    log_format = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    detailed_formatter = logging.Formatter(log_format, date_format)
    console_formatter = logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if is_debug
        else '%(levelname)s: %(message)s'
    )

    logger = logging.getLogger('tasklist')
    logger.setLevel(logging.DEBUG)  # Logger accepts all, handlers filter
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()  # Remove any existing handlers

    log_dir = Path(os.getenv('TASKLIST_LOG_DIR', '') or DEFAULT_LOG_DIR)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "tasklist.log", encoding="utf-8")
    except OSError as e:
        file_handler = None
        sys.stderr.write(f"WARNING: file logging disabled ({e})\n")

    if file_handler is not None:
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'tasklist.{name}')
    return logging.getLogger('tasklist')
