from typing import Any, Callable, Dict, Optional
from firebase_admin import credentials, db
import firebase_admin
import asyncio
import threading
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from core.interfaces.database import DatabaseRepository
from core.exceptions import ConnectionError, QueryError
from utilities.monitoring.factory import MonitoringFactory

logger = MonitoringFactory.get_logger("firebase-admin")

class FirebaseAdminRepository(DatabaseRepository):
    """
    Document store adapter over the Firebase Realtime Database admin SDK.

    The SDK is synchronous, so every call is dispatched to a private thread
    pool. One instance is shared by the whole process.
    """
    _instance = None
    _lock = threading.Lock()

    def __new__(
        cls,
        credentials_path: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None
    ):
        if not cls._instance:
            with cls._lock:
                if not cls._instance:
                    try:
                        if not firebase_admin._apps:
                            if not options or 'databaseURL' not in options:
                                logger.error("databaseURL must be provided in options")
                                raise ConnectionError("databaseURL must be provided in options")
                            cred = credentials.Certificate(credentials_path) if credentials_path else None
                            firebase_admin.initialize_app(
                                credential=cred,
                                options=options
                            )

                        instance = super().__new__(cls)
                        instance._executor = ThreadPoolExecutor(
                            max_workers=10,
                            thread_name_prefix='admin-rtdb-pool'
                        )
                        instance._db = db.reference()
                        cls._instance = instance
                        logger.info("Firebase admin repository initialized")
                    except ConnectionError:
                        raise
                    except Exception as e:
                        logger.error(f"Firebase initialization error: {e}")
                        raise ConnectionError(f"Failed to initialize Firebase: {e}") from e

        return cls._instance

    def get_reference(self, path: str) -> db.Reference:
        """
        Get a reference to a specific path in the Realtime Database.

        Args:
            path (str): Path to the database location

        Returns:
            db.Reference: Reference to the specified location
        """
        try:
            return self._db.child(path)
        except Exception as e:
            logger.error(f"Exception at {self.__class__.__name__}.{self.get_reference.__name__}: {e}")
            raise QueryError(f"Invalid path {path}: {e}") from e

    async def _run(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run a blocking SDK call on the repository thread pool."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, partial(func, *args, **kwargs))

    async def push(self, path: str, data: Dict[str, Any]) -> str:
        try:
            ref = self.get_reference(path)
            pushed = await self._run(ref.push, data)
            return pushed.key
        except Exception as e:
            logger.error(f"Error pushing data: {e}")
            raise QueryError(f"Failed to push data: {e}") from e

    async def get(self, path: str, key: str) -> Optional[Dict[str, Any]]:
        try:
            ref = self.get_reference(path)
            return await self._run(ref.child(key).get)
        except Exception as e:
            logger.error(f"Error getting data: {e}")
            raise QueryError(f"Failed to get data: {e}") from e

    async def query(
        self,
        path: str,
        order_by: Optional[str] = None,
        limit: Optional[int] = None,
        start_at: Optional[Any] = None,
        end_at: Optional[Any] = None
    ) -> Dict[str, Dict[str, Any]]:
        """Query data with filters"""
        try:
            ref = self.get_reference(path)
            filtered = any(value is not None for value in (limit, start_at, end_at))

            if order_by:
                query = ref.order_by_child(order_by)
            elif filtered:
                # Range and limit clauses need an ordering
                query = ref.order_by_key()
            else:
                query = ref

            if start_at is not None:
                query = query.start_at(start_at)
            if end_at is not None:
                query = query.end_at(end_at)
            if limit is not None:
                query = query.limit_to_first(limit)

            result = await self._run(query.get)
            return dict(result) if isinstance(result, dict) else {}
        except Exception as e:
            logger.error(f"Exception at {self.__class__.__name__}.{self.query.__name__}: {e}")
            raise QueryError(f"Failed to query data: {e}") from e

    def close(self):
        """
        Cleanup method to shutdown thread pool and Firebase app.
        """
        if self._executor:
            self._executor.shutdown(wait=True)

        if firebase_admin._apps:
            firebase_admin.delete_app(firebase_admin.get_app())

        type(self)._instance = None
        logger.info("Firebase admin repository closed")
