from abc import ABC, abstractmethod
from typing import Dict, Any, Optional


class DatabaseRepository(ABC):
    """
    Hierarchical document store addressed by slash separated paths.

    Records are JSON objects stored as children of a path and identified by
    a key the store generates on insert.
    """

    @abstractmethod
    async def push(self, path: str, data: Dict[str, Any]) -> str:
        """Insert ``data`` as a new child of ``path`` and return its generated key"""
        pass

    @abstractmethod
    async def get(self, path: str, key: str) -> Optional[Dict[str, Any]]:
        """Read the child ``key`` of ``path``, None when absent"""
        pass

    @abstractmethod
    async def query(
        self,
        path: str,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
        start_at: Optional[Any] = None,
        end_at: Optional[Any] = None
    ) -> Dict[str, Dict[str, Any]]:
        """
        Read the children of ``path``.

        With ``order_by`` the children are sorted on that field and
        ``start_at``/``end_at`` bound it inclusively; ``limit`` keeps the
        first entries in that order. The result maps key to record.
        """
        pass
