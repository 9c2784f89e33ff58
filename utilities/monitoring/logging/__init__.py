from typing import Any
import logging
import sys
from .handlers import CustomRotatingFileHandler, CustomTimedRotatingFileHandler
from .formatters import JSONFormatter

def setup_logger(
    name: str,
    log_file: str,
    level: int = logging.INFO,
    console_level: int = logging.INFO,
    rotation_type: str = "size",
    **kwargs: Any
) -> logging.Logger:
    """Set up a logger with a JSON file handler and a plain console handler"""
    logger = logging.getLogger(name)
    logger.setLevel(min(level, console_level))

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if rotation_type == "time":
        file_handler = CustomTimedRotatingFileHandler(
            log_file,
            when=kwargs.get('when', 'midnight'),
            interval=kwargs.get('interval', 1),
            backup_count=kwargs.get('backup_count', 30)
        )
    else:
        file_handler = CustomRotatingFileHandler(
            log_file,
            max_bytes=kwargs.get('max_bytes', 10 * 1024 * 1024),
            backup_count=kwargs.get('backup_count', 5)
        )

    file_handler.setLevel(level)
    file_handler.setFormatter(JSONFormatter())
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    logger.propagate = False
    return logger
