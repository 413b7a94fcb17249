from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TITLE_MAX_LENGTH = 200


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    Only the raw shape is checked here; blank titles are rejected by the service layer,
    which also trims the stored value.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Buy groceries"}})

    title: str = Field(
        ...,
        description="Short title for the todo item",
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        strict=True,
    )


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for partially updating an existing Todo item.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Buy groceries and supplies", "completed": True}}
    )

    title: Optional[str] = Field(
        default=None,
        description="Short title for the todo item",
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        strict=True,
    )
    completed: Optional[bool] = Field(default=None, description="Completion status flag", strict=True)

    @field_validator("title", "completed")
    @classmethod
    def reject_null(cls, v: Optional[Union[str, bool]]) -> Union[str, bool]:
        """
        Defaults are not validated, so this only fires for an explicit null.
        """
        if v is None:
            raise ValueError("field may be omitted but not null")
        return v


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item. Serialized with camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "3f1c2a9e-5b7d-4c1e-9a8f-2d6b4e0c7a11",
                "title": "Buy groceries",
                "completed": False,
                "createdAt": "2025-01-25T10:15:30.123456Z",
                "updatedAt": "2025-01-26T09:00:00.000001Z",
            }
        },
    )

    id: str = Field(..., description="Unique identifier (UUID4) of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp (ISO8601, UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (ISO8601, UTC)")


class TodoEnvelope(BaseModel):
    """Envelope for single-item responses."""

    data: TodoOut


class TodoListEnvelope(BaseModel):
    """Envelope for list responses."""

    data: List[TodoOut]


class ErrorDetail(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    status_code: int


class ErrorResponse(BaseModel):
    """Uniform error body: {"error": {"message": ..., "statusCode": ...}}."""

    error: ErrorDetail


class HealthOut(BaseModel):
    status: str = "ok"
