"""
Sample todos for local development databases.
"""

from __future__ import annotations

import logging

from mdtodo.db import TodoRepository
from mdtodo.todo import Todo

logger = logging.getLogger(__name__)

SAMPLE_TODOS: list[tuple[str, str, bool]] = [
    (
        "Sample Task 1",
        "# Welcome to MD-Todo\n\n"
        "This is a **sample task** with *markdown* formatting.\n\n"
        "- [ ] Subtask 1\n- [x] Subtask 2\n- [ ] Subtask 3",
        False,
    ),
    (
        "Completed Task",
        "## This task is completed\n\n"
        "This demonstrates how completed tasks appear in the UI.\n\n"
        '```javascript\nconsole.log("Hello, World!");\n```',
        True,
    ),
    (
        "Task with Code",
        "### Development Task\n\n"
        "Implement the following function:\n\n"
        '```python\ndef hello_world():\n    print("Hello, World!")\n```\n\n'
        "Make sure to include proper error handling.",
        False,
    ),
]


def seed_sample_todos(repo: TodoRepository) -> int:
    """
    Insert the sample todos when the repository is empty. Returns how many were added.
    """
    if repo.list_todos():
        return 0
    for title, content, completed in SAMPLE_TODOS:
        todo = Todo.new_with_validation(title, content)
        if completed:
            todo.set_completed(True)
        repo.create_todo(todo)
    logger.info("Seeded %d sample todos", len(SAMPLE_TODOS))
    return len(SAMPLE_TODOS)
