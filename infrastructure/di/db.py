from core.interfaces import DatabaseRepository
from infrastructure.database import DatabaseFactory
from utils import FirebaseSettings


def get_database() -> DatabaseRepository:
    """
    Dependency for the document store.

    The Firebase repository is a process-wide singleton, so after the first
    call this only hands back the existing instance.
    """
    firebase_settings = FirebaseSettings()
    return DatabaseFactory.create_repository(
        type="admin",
        credentials_path=firebase_settings.admin_sdk,
        options=firebase_settings.app_options()
    )
