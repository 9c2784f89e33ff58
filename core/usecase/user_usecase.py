from typing import Any, List
from utilities.monitoring import MonitoringFactory

from core.entities import UserEntity
from core.exceptions import ValidationError
from core.interfaces import UserRepositoryInterface
from core.service import normalize_text, validate_username


class UserUseCase:
    """
    Use case class for handling user-related business logic.
    Implements user registration and listing.
    """

    def __init__(self, user_repository: UserRepositoryInterface):
        self.user_repository = user_repository
        self.logger = MonitoringFactory.get_logger("user-usecase")

    async def register_user(self, username: Any) -> UserEntity:
        """
        Register a new user in the system.

        Args:
            username: Raw username as received from the client

        Returns:
            UserEntity: The stored user with its generated ID

        Raises:
            ValidationError: If the username is absent, not a string or blank
        """
        if not validate_username(username):
            raise ValidationError("Username is required")

        try:
            user = await self.user_repository.create_user(
                UserEntity(username=normalize_text(username))
            )
            self.logger.info(f"User registered: {user.id}")
            return user
        except Exception as e:
            self.logger.error(f"Error registering user: {str(e)}")
            raise

    async def list_users(self) -> List[UserEntity]:
        """Return every user in store order."""
        try:
            return await self.user_repository.get_all_users()
        except Exception as e:
            self.logger.error(f"Error listing users: {str(e)}")
            raise
