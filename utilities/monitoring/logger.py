import os
import logging
from typing import Dict

from .logging import setup_logger

class MonitoringService:
    """Hands out named loggers that share one log directory and level policy"""

    def __init__(
        self,
        app_name: str,
        log_dir: str = "logs",
        file_level: str = "INFO",
        console_level: str = "INFO"
    ):
        self.app_name = app_name
        self.log_dir = log_dir
        self.file_level = logging.getLevelName(file_level.upper())
        self.console_level = logging.getLevelName(console_level.upper())
        self.loggers: Dict[str, logging.Logger] = {}

        if not isinstance(self.file_level, int):
            self.file_level = logging.INFO
        if not isinstance(self.console_level, int):
            self.console_level = logging.INFO

    def get_logger(self, name: str) -> logging.Logger:
        """Get or create a logger for the specified name"""
        if name not in self.loggers:
            log_file = os.path.join(self.log_dir, f"{name}.log")
            self.loggers[name] = setup_logger(
                f"{self.app_name}.{name}",
                log_file,
                level=self.file_level,
                console_level=self.console_level
            )
        return self.loggers[name]
