"""
Todo domain model with field validation and mutation helpers.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from uuid6 import uuid7

MAX_TITLE_LENGTH = 255
MAX_CONTENT_LENGTH = 10000


class TodoValidationError(ValueError):
    """Raised when a title or content value breaks the field rules."""


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> uuid.UUID:
    return uuid.UUID(str(uuid7()))


def validate_title(title: str) -> None:
    if not title or not title.strip():
        raise TodoValidationError("Title cannot be empty")
    if len(title) > MAX_TITLE_LENGTH:
        raise TodoValidationError(
            f"Title cannot exceed {MAX_TITLE_LENGTH} characters"
        )
    if "\n" in title or "\r" in title:
        raise TodoValidationError("Title cannot contain newlines")


def validate_content(content: str) -> None:
    if len(content) > MAX_CONTENT_LENGTH:
        raise TodoValidationError(
            f"Content cannot exceed {MAX_CONTENT_LENGTH} characters"
        )


def validate_create(title: str, content: str) -> None:
    validate_title(title)
    validate_content(content)


def validate_update(
    title: Optional[str] = None, content: Optional[str] = None
) -> None:
    """Validate only the fields present in a partial update."""
    if title is not None:
        validate_title(title)
    if content is not None:
        validate_content(content)


@dataclass
class Todo:
    id: uuid.UUID
    title: str
    content: str
    completed: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def new(cls, title: str, content: str) -> "Todo":
        """
        Build a fresh todo without validation. Both timestamps are identical.
        """
        now = _utcnow()
        return cls(
            id=_new_id(),
            title=title,
            content=content,
            completed=False,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def new_with_validation(cls, title: str, content: str) -> "Todo":
        validate_create(title, content)
        return cls.new(title, content)

    def _touch(self) -> None:
        # updated_at must strictly increase, even within one clock tick.
        now = _utcnow()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now

    def update_title(self, title: str) -> None:
        self.title = title
        self._touch()

    def update_content(self, content: str) -> None:
        self.content = content
        self._touch()

    def set_completed(self, completed: bool) -> None:
        self.completed = completed
        self._touch()

    def toggle_completed(self) -> None:
        self.set_completed(not self.completed)

    def update_with_validation(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> None:
        """
        Apply a partial update. Every supplied field is validated before any
        mutation, so a failed update leaves the todo untouched.
        """
        validate_update(title, content)
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        if completed is not None:
            self.completed = completed
        self._touch()

    def validate(self) -> None:
        validate_create(self.title, self.content)

    def is_valid(self) -> bool:
        try:
            self.validate()
        except TodoValidationError:
            return False
        return True
