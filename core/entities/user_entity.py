from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class UserEntity(BaseModel):
    """
    User entity model representing an account in the system.
    The identifier is assigned by the document store when the user is created.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = Field(
        default=None, description="Unique identifier for the user"
    )
    username: str = Field(..., min_length=1, description="User's username")

    def to_document(self) -> Dict[str, Any]:
        """Serialize the user for storage. The id is the record key, not a field."""
        return self.model_dump(exclude={"id"})
