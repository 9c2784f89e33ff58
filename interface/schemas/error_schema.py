from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(title="Error message")
