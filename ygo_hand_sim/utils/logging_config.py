# ygo_hand_sim/utils/logging_config.py

"""
logging_config.py

Provides centralized logging configuration for the hand simulator.
Log level and file output are taken from Settings so every entry point
configures logging the same way.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from ygo_hand_sim.settings import Settings

DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "ygo_hand_sim.log"

# Dictionary mapping string log level names to their numeric values
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(level_name: str) -> int:
    """Convert string log level to numeric log level"""
    return LOG_LEVELS.get(level_name.upper(), DEFAULT_LOG_LEVEL)


def setup_logging(
    settings: Optional[Settings] = None,
    log_to_file: Optional[bool] = None,
    log_to_console: bool = True,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the root logger for the application

    Args:
        settings: Settings providing log level, file output and log directory
        log_to_file: Whether to log to a file; defaults to the settings value
        log_to_console: Whether to log to stderr
        level: Log level name overriding the settings value

    Returns:
        logging.Logger: Configured root logger
    """
    settings = settings or Settings()
    if log_to_file is None:
        log_to_file = settings.log_to_file
    log_level = get_log_level(level or settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_to_file:
        log_dir = settings.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME, maxBytes=10_485_760, backupCount=5  # 10 MB
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger

