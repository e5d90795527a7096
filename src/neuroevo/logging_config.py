"""
Logging Configuration

The package logs through loguru's 'logger'. Library modules only emit messages;
applications (or a Trial) call 'configure_logging' to decide where they go.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

def configure_logging(log_level: str = "INFO",
                      log_file: Optional[Path] = None,
                      format_string: Optional[str] = None) -> None:
    """
    Replace loguru's default sink with a stderr sink and, optionally, a file sink.

    Parameters:
        log_level:     Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file:      Optional log file path; parent directories are created
        format_string: Custom loguru format string
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logger.remove()
    logger.add(sys.stderr, format=format_string, level=log_level.upper())

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(str(log_file), format=format_string, level=log_level.upper())
