from .database import StoreError, ConnectionError, QueryError
from .validation import ValidationError, NotFoundError

__all__ = [
    "StoreError",
    "ConnectionError",
    "QueryError",
    "ValidationError",
    "NotFoundError"
]
