from typing import Optional
import logging

from utils import AppSettings
from .logger import MonitoringService

class MonitoringFactory:
    _instance: Optional[MonitoringService] = None

    @classmethod
    def get_monitoring_service(cls, app_name: str = "exercisetracker") -> MonitoringService:
        if not cls._instance:
            settings = AppSettings()
            cls._instance = MonitoringService(
                app_name,
                log_dir=settings.log_dir,
                file_level=settings.file_log_level,
                console_level=settings.screen_log_level
            )
        return cls._instance

    @classmethod
    def get_logger(cls, module_name: str, app_name: str = "exercisetracker") -> logging.Logger:
        monitoring_service = cls.get_monitoring_service(app_name)
        return monitoring_service.get_logger(module_name)
