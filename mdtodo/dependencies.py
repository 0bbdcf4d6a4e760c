"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from mdtodo.config import get_settings
from mdtodo.db import InMemoryTodoRepository, SqlTodoRepository, TodoRepository
from mdtodo.seed import seed_sample_todos

logger = logging.getLogger(__name__)

_todo_repository: TodoRepository | None = None


def get_todo_repository() -> TodoRepository:
    """
    Return a singleton repository so in-memory state persists across requests.
    """
    global _todo_repository
    if _todo_repository:
        return _todo_repository

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.database_url:
        logger.info("Using in-memory todo repository")
        _todo_repository = InMemoryTodoRepository()
    else:
        logger.info("Using SQL todo repository")
        _todo_repository = SqlTodoRepository(settings.database_url)

    if settings.seed_sample_data:
        seed_sample_todos(_todo_repository)
    return _todo_repository
