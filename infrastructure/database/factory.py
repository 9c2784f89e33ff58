from typing import Optional, Dict, Any
from core.interfaces import DatabaseRepository
from utilities.monitoring import MonitoringFactory
from .firebase import FirebaseAdminRepository

logger = MonitoringFactory.get_logger("database-factory")


class DatabaseFactory:
    """Builds the document store adapter named by ``type``."""

    _repositories = {
        "admin": FirebaseAdminRepository,
    }

    @classmethod
    def create_repository(
        cls,
        type: str = "admin",
        credentials_path: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None
    ) -> DatabaseRepository:
        repository_class = cls._repositories.get(type)
        if repository_class is None:
            logger.error(f"Unknown repository type requested: {type}")
            raise ValueError(f"Unknown repository type: {type}")
        return repository_class(credentials_path, options)
