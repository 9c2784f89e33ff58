import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .user_entity import UserEntity


class ExerciseEntity(BaseModel):
    """Exercise entity. Durations are minutes, dates carry no time component."""

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = Field(
        default=None, description="Unique identifier for the exercise"
    )
    user_id: str = Field(
        ...,
        alias="userId",
        validation_alias=AliasChoices("userId", "user_id"),
        serialization_alias="userId",
        description="Identifier of the user who logged the exercise",
    )
    description: str = Field(..., min_length=1, description="What was done")
    duration: Union[int, float] = Field(..., gt=0, description="Duration in minutes")
    date: dt.date = Field(..., description="Calendar date of the exercise")

    def to_document(self) -> Dict[str, Any]:
        """Serialize the exercise for storage with the date as an ISO string"""
        return self.model_dump(mode="json", by_alias=True, exclude={"id"})


@dataclass
class LogQuery:
    """Filters applied when reading a user's exercise log"""
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    limit: Optional[int] = None


@dataclass
class LogEntry:
    """A single exercise as it appears in a log"""
    description: str
    duration: Union[int, float]
    date: dt.date


@dataclass
class ExerciseLog:
    """A user's filtered and optionally capped exercise log"""
    user: UserEntity
    log: List[LogEntry] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.log)
