from typing import Any, List, Optional, Union
from pydantic import AliasChoices, BaseModel, Field, ConfigDict


class ExerciseCreate(BaseModel):
    """Raw exercise payload. Normalization happens in the use case."""
    model_config = ConfigDict(extra="ignore")
    description: Optional[Any] = Field(default=None, title="Description")
    duration: Optional[Any] = Field(default=None, title="Duration in minutes")
    date: Optional[Any] = Field(default=None, title="Date, defaults to today")


class ExerciseResponse(BaseModel):
    """Created exercise. ``_id`` is the owning user's ID."""
    model_config = ConfigDict(extra="forbid")
    username: str = Field(title="Username")
    description: str = Field(title="Description")
    duration: Union[int, float] = Field(title="Duration in minutes")
    date: str = Field(title="Date", examples=["Mon Jan 01 2024"])
    id: str = Field(alias="_id", validation_alias=AliasChoices("_id", "id"), serialization_alias="_id", title="User ID")


class LogEntryResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")
    description: str = Field(title="Description")
    duration: Union[int, float] = Field(title="Duration in minutes")
    date: str = Field(title="Date", examples=["Mon Jan 01 2024"])


class ExerciseLogResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")
    username: str = Field(title="Username")
    count: int = Field(title="Number of entries in the log")
    id: str = Field(alias="_id", validation_alias=AliasChoices("_id", "id"), serialization_alias="_id", title="User ID")
    log: List[LogEntryResponse] = Field(default_factory=list, title="Exercise log")
