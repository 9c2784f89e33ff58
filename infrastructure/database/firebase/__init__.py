from .admin_repository import FirebaseAdminRepository

__all__ = [
    "FirebaseAdminRepository"
]
