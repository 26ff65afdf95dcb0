"""
Logging configuration for the progression engine.
"""

import os
import logging
import logging.handlers
import time
from typing import Dict, Optional

# Global configuration
DEFAULT_LEVEL = logging.INFO
LOGGERS: Dict[str, logging.Logger] = {}
LOGGER_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_DIRECTORY = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), 'logs')


def configure_logging(level: int = DEFAULT_LEVEL,
                      log_to_file: bool = False,
                      log_directory: Optional[str] = None) -> None:
    """
    Configure the logging system.

    Args:
        level: The log level to use.
        log_to_file: Whether to also write rotating log files.
        log_directory: Directory for log files. Defaults to <project>/logs.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOGGER_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        directory = log_directory or LOG_DIRECTORY
        if not os.path.exists(directory):
            os.makedirs(directory)

        # All records
        log_file = os.path.join(directory, f'progression_{time.strftime("%Y%m%d_%H%M%S")}.log')
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        # Errors only
        error_log_file = os.path.join(directory, f'error_{time.strftime("%Y%m%d_%H%M%S")}.log')
        error_file_handler = logging.handlers.RotatingFileHandler(
            error_log_file,
            maxBytes=5*1024*1024,  # 5 MB
            backupCount=5,
            encoding='utf-8'
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(formatter)
        root_logger.addHandler(error_file_handler)

    root_logger.info("Logging configured")


def setup_from_config(config=None) -> None:
    """
    Configure logging from the ``system`` configuration domain.

    Args:
        config: A GameConfig instance. The singleton is used when omitted.
    """
    if config is None:
        from rpgcore.base.config import get_config
        config = get_config()

    level_name = str(config.get("system.log_level", "INFO")).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = DEFAULT_LEVEL

    configure_logging(
        level=level,
        log_to_file=bool(config.get("system.log_to_file", False)),
        log_directory=config.get("system.log_dir"),
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: The name of the logger.

    Returns:
        The logger.
    """
    if name in LOGGERS:
        return LOGGERS[name]

    logger = logging.getLogger(name)
    LOGGERS[name] = logger

    return logger
