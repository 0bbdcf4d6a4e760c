"""
Pydantic schemas for the todo API.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

T = TypeVar("T")


class CreateTodoRequest(BaseModel):
    title: StrictStr
    content: StrictStr


class UpdateTodoRequest(BaseModel):
    title: Optional[StrictStr] = None
    content: Optional[StrictStr] = None
    completed: Optional[StrictBool] = None


class TodoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    content: str
    completed: bool
    created_at: datetime
    updated_at: datetime


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success/error envelope returned by every JSON endpoint."""

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse[T]":
        return cls(success=False, data=None, error=message)


TodoResponse = ApiResponse[TodoOut]
TodoListResponse = ApiResponse[list[TodoOut]]
ErrorResponse = ApiResponse[None]
