"""
Logging Configuration
Attaches handlers to the 'objmesh' namespace logger.

Log records go to stderr so they never interleave with results the CLI
prints on stdout.
"""
import logging
import sys
from typing import Optional, Union

from objmesh.config import DEFAULT_LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: Union[int, str] = DEFAULT_LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'objmesh' logger and returns it.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("DEBUG").
        log_file: Optional path; the file is truncated and receives the same records.
    """
    logger = logging.getLogger("objmesh")
    logger.setLevel(level)

    # Calling twice replaces the previous handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized at level {logging.getLevelName(logger.level)}.")
    return logger
