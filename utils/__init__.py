from .app_settings import AppSettings
from .cors_settings import CorsSettings
from .database_settings import FirebaseSettings, FirebaseOptions

__all__ = [
    "AppSettings",
    "CorsSettings",
    "FirebaseSettings",
    "FirebaseOptions",
]
