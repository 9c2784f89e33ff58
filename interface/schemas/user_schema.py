from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, Field, ConfigDict


class UserCreate(BaseModel):
    """Raw user registration payload. Normalization happens in the use case."""
    model_config = ConfigDict(extra="ignore")
    username: Optional[Any] = Field(default=None, title="Username")


class UserResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")
    username: str = Field(title="Username")
    id: str = Field(alias="_id", validation_alias=AliasChoices("_id", "id"), serialization_alias="_id", title="User ID")
