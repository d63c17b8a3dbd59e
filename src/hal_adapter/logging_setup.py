"""
Logging configuration for the HAL adapter
"""

import logging
import sys
from typing import Any, Dict, Optional, Union

DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level name or number into a logging level

    Unknown names, such as 'notice', fall back to INFO.
    """
    if level is None:
        return DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LOG_LEVEL


def configure_logging(level: Union[int, str, None] = DEFAULT_LOG_LEVEL,
                      log_format: str = DEFAULT_LOG_FORMAT,
                      log_file: Optional[str] = None) -> None:
    """
    Configure root logging for applications embedding the adapter

    Args:
        level: Minimum level, as number or name
        log_format: Format string for log records
        log_file: Optional file to log to instead of stdout
    """
    handlers = [logging.FileHandler(log_file, encoding='utf-8')] if log_file else [logging.StreamHandler(sys.stdout)]
    logging.basicConfig(
        level=resolve_level(level),
        format=log_format,
        handlers=handlers,
        force=True
    )


def log_message(logger: logging.Logger, message: str, level: Union[int, str] = 'info',
                context: Optional[Dict[str, Any]] = None) -> None:
    """Log through a sink with a level name and optional structured context"""
    logger.log(resolve_level(level), message, extra={'context': context or {}})
