"""
Interfaces
- Defines abstract interfaces and contracts
- Creates clear boundaries between different components
- Enables dependency inversion and easier testing
"""

from .database import DatabaseRepository
from .repositories import UserRepositoryInterface, ExerciseRepositoryInterface

__all__ = [
    'DatabaseRepository',
    'UserRepositoryInterface',
    'ExerciseRepositoryInterface'
]
