import itertools
import uuid
from typing import Any, Dict, Optional

import pytest

from core.interfaces import DatabaseRepository


class InMemoryDatabase(DatabaseRepository):
    """
    Document store double with Realtime Database query semantics:
    ordering by a child, inclusive start/end bounds and limit-to-first.
    """

    def __init__(self):
        self.data: Dict[str, Any] = {}
        self._sequence = itertools.count()

    def _node(self, path: str, create: bool = False) -> Optional[Dict[str, Any]]:
        node = self.data
        for part in [p for p in path.split("/") if p]:
            if part not in node:
                if not create:
                    return None
                node[part] = {}
            node = node[part]
            if not isinstance(node, dict):
                return None
        return node

    async def push(self, path: str, data: Dict[str, Any]) -> str:
        # Push keys sort in insertion order, like Firebase push IDs
        key = f"{next(self._sequence):06d}{uuid.uuid4().hex[:8]}"
        self._node(path, create=True)[key] = dict(data)
        return key

    async def get(self, path: str, key: str) -> Optional[Dict[str, Any]]:
        node = self._node(path)
        if node is None:
            return None
        return node.get(key)

    async def query(
        self,
        path: str,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
        start_at: Optional[Any] = None,
        end_at: Optional[Any] = None
    ) -> Dict[str, Dict[str, Any]]:
        node = self._node(path) or {}
        items = list(node.items())

        if order_by:
            def value_of(item):
                return item[1].get(order_by) if isinstance(item[1], dict) else None
            items.sort(key=lambda item: (value_of(item) is not None, str(value_of(item) or ""), item[0]))
        else:
            def value_of(item):
                return item[0]
            items.sort(key=lambda item: item[0])

        if start_at is not None:
            items = [item for item in items if isinstance(value_of(item), str) and value_of(item) >= start_at]
        if end_at is not None:
            items = [item for item in items if isinstance(value_of(item), str) and value_of(item) <= end_at]
        if limit is not None:
            items = items[:limit]
        return dict(items)


@pytest.fixture
def memory_db():
    return InMemoryDatabase()
