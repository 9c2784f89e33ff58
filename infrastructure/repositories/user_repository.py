import re
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from core.entities import UserEntity
from core.interfaces import DatabaseRepository, UserRepositoryInterface
from utilities.monitoring import MonitoringFactory

# Characters the Realtime Database SDK rejects in paths, plus the path separator.
INVALID_KEY_PATTERN = re.compile(r"[.?$#\[\]/]")


def is_valid_key(key: str) -> bool:
    """True if ``key`` can address a single child record."""
    return bool(key) and not INVALID_KEY_PATTERN.search(key)


class UserRepository(UserRepositoryInterface):
    """
    Repository for user-related operations with Firebase.
    """

    def __init__(self, database: DatabaseRepository):
        self.database = database
        self.collection = "users"
        self.logger = MonitoringFactory.get_logger("user-repository")

    async def create_user(self, user: UserEntity) -> UserEntity:
        """
        Create a new user in the database. The store generates the ID.
        """
        try:
            user_id = await self.database.push(self.collection, user.to_document())
            return user.model_copy(update={"id": user_id})
        except Exception as e:
            self.logger.error(f"Error creating user: {e}")
            raise

    async def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        """
        Retrieve a user by ID. IDs that cannot name a record are simply not found.
        """
        if not is_valid_key(user_id):
            return None

        try:
            result = await self.database.get(self.collection, user_id)
        except Exception as e:
            self.logger.error(f"Error retrieving user by ID {user_id}: {e}")
            raise

        if not isinstance(result, dict):
            return None

        try:
            return UserEntity.model_validate({**result, "id": user_id})
        except PydanticValidationError:
            self.logger.warning(f"Malformed user record {user_id}")
            return None

    async def get_all_users(self) -> List[UserEntity]:
        """
        Retrieve all users from the database.
        """
        try:
            result = await self.database.query(self.collection)
        except Exception as e:
            self.logger.error(f"Error retrieving all users: {e}")
            raise

        users = []
        for user_id, user_data in result.items():
            if not isinstance(user_data, dict):
                continue
            try:
                users.append(UserEntity.model_validate({**user_data, "id": user_id}))
            except PydanticValidationError:
                self.logger.warning(f"Skipping malformed user record {user_id}")

        return users
