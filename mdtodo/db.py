"""
Todo repository abstraction with an in-memory and a SQLAlchemy implementation.
"""

from __future__ import annotations

import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional, Protocol

from readerwriterlock import rwlock
from sqlalchemy import Boolean, Column, DateTime, String, Text, Uuid, create_engine, select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from mdtodo.todo import Todo

logger = logging.getLogger(__name__)


class RepositoryError(RuntimeError):
    """Raised when the storage backend fails."""


class TodoRepository(Protocol):
    """Interface for todo persistence."""

    def create_todo(self, todo: Todo) -> Todo:
        ...

    def list_todos(self) -> list[Todo]:
        ...

    def get_todo(self, todo_id: uuid.UUID) -> Optional[Todo]:
        ...

    def update_todo(
        self,
        todo_id: uuid.UUID,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Optional[Todo]:
        ...

    def delete_todo(self, todo_id: uuid.UUID) -> bool:
        ...


def _newest_first(todo: Todo) -> tuple[datetime, uuid.UUID]:
    return todo.created_at, todo.id


class InMemoryTodoRepository:
    """Dict-backed repository guarded by a reader/writer lock."""

    def __init__(self):
        self.todos: Dict[uuid.UUID, Todo] = {}
        self._lock = rwlock.RWLockFair()

    def create_todo(self, todo: Todo) -> Todo:
        stored = copy.copy(todo)
        with self._lock.gen_wlock():
            existing = self.todos.get(todo.id)
            if existing:
                # created_at is fixed by the first insert.
                stored.created_at = existing.created_at
            self.todos[todo.id] = stored
            return copy.copy(stored)

    def list_todos(self) -> list[Todo]:
        with self._lock.gen_rlock():
            items = [copy.copy(todo) for todo in self.todos.values()]
        items.sort(key=_newest_first, reverse=True)
        return items

    def get_todo(self, todo_id: uuid.UUID) -> Optional[Todo]:
        with self._lock.gen_rlock():
            todo = self.todos.get(todo_id)
            return copy.copy(todo) if todo else None

    def update_todo(
        self,
        todo_id: uuid.UUID,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Optional[Todo]:
        with self._lock.gen_wlock():
            todo = self.todos.get(todo_id)
            if not todo:
                return None
            todo.update_with_validation(title, content, completed)
            return copy.copy(todo)

    def delete_todo(self, todo_id: uuid.UUID) -> bool:
        with self._lock.gen_wlock():
            return self.todos.pop(todo_id, None) is not None

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        with self._lock.gen_wlock():
            self.todos.clear()


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlTodoRepository:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlTodoRepository")
        try:
            url = make_url(database_url)
            if url.get_backend_name() == "sqlite" and url.database in (
                None,
                "",
                ":memory:",
            ):
                # One shared connection, otherwise every thread sees an empty database.
                self.engine = create_engine(
                    url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            else:
                self.engine = create_engine(
                    url,
                    pool_pre_ping=True,
                    pool_recycle=1800,
                )
            self.Session = sessionmaker(
                bind=self.engine, class_=Session, expire_on_commit=False
            )
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to initialise todo storage") from exc

    def _to_todo(self, row: "TodoRow") -> Todo:
        return Todo(
            id=row.id,
            title=row.title,
            content=row.content,
            completed=row.completed,
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )

    def create_todo(self, todo: Todo) -> Todo:
        try:
            with self.Session() as session:
                row = session.get(TodoRow, todo.id)
                if row:
                    row.title = todo.title
                    row.content = todo.content
                    row.completed = todo.completed
                    row.updated_at = todo.updated_at
                else:
                    row = TodoRow(
                        id=todo.id,
                        title=todo.title,
                        content=todo.content,
                        completed=todo.completed,
                        created_at=todo.created_at,
                        updated_at=todo.updated_at,
                    )
                    session.add(row)
                session.commit()
                session.refresh(row)
                return self._to_todo(row)
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to create todo") from exc

    def list_todos(self) -> list[Todo]:
        try:
            with self.Session() as session:
                stmt = select(TodoRow).order_by(
                    TodoRow.created_at.desc(), TodoRow.id.desc()
                )
                rows = session.execute(stmt).scalars().all()
                return [self._to_todo(row) for row in rows]
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to list todos") from exc

    def get_todo(self, todo_id: uuid.UUID) -> Optional[Todo]:
        try:
            with self.Session() as session:
                row = session.get(TodoRow, todo_id)
                if not row:
                    return None
                return self._to_todo(row)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to fetch todo {todo_id}") from exc

    def update_todo(
        self,
        todo_id: uuid.UUID,
        *,
        title: Optional[str] = None,
        content: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Optional[Todo]:
        try:
            with self.Session() as session:
                stmt = select(TodoRow).where(TodoRow.id == todo_id).with_for_update()
                row = session.execute(stmt).scalar_one_or_none()
                if not row:
                    return None
                todo = self._to_todo(row)
                # Raises before anything is written; the session rolls back on exit.
                todo.update_with_validation(title, content, completed)
                row.title = todo.title
                row.content = todo.content
                row.completed = todo.completed
                row.updated_at = todo.updated_at
                session.commit()
                return todo
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to update todo {todo_id}") from exc

    def delete_todo(self, todo_id: uuid.UUID) -> bool:
        try:
            with self.Session() as session:
                row = session.get(TodoRow, todo_id)
                if not row:
                    return False
                session.delete(row)
                session.commit()
                return True
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Failed to delete todo {todo_id}") from exc


Base = declarative_base()


class TodoRow(Base):
    __tablename__ = "todos"

    id = Column(Uuid, primary_key=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, index=True)
