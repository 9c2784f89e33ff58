from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List

from core.entities import UserEntity, ExerciseEntity, LogQuery

class UserRepositoryInterface(ABC):
    @abstractmethod
    async def create_user(self, user: UserEntity) -> UserEntity:
        """Persist a new user and return it with its generated ID"""
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        """Retrieve a user by ID"""
        pass

    @abstractmethod
    async def get_all_users(self) -> List[UserEntity]:
        """Retrieve every user in store order"""
        pass


class ExerciseRepositoryInterface(ABC):
    @abstractmethod
    async def create_exercise(self, exercise: ExerciseEntity) -> ExerciseEntity:
        """Persist a new exercise and return it with its generated ID"""
        pass

    @abstractmethod
    async def list_exercises(self, user_id: str, query: LogQuery) -> List[Dict[str, Any]]:
        """List raw exercise records of a user matching the query filters"""
        pass
