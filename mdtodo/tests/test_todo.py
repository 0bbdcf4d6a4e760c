import unittest
from datetime import timezone

from mdtodo.todo import (
    Todo,
    TodoValidationError,
    validate_content,
    validate_create,
    validate_title,
    validate_update,
)


class ValidationTests(unittest.TestCase):
    def assertRejects(self, func, message, *args):
        with self.assertRaises(TodoValidationError) as ctx:
            func(*args)
        self.assertEqual(str(ctx.exception), message)

    def test_title_rules(self):
        validate_title("Valid Title")
        validate_title("a" * 255)
        self.assertRejects(validate_title, "Title cannot be empty", "")
        self.assertRejects(validate_title, "Title cannot be empty", "   ")
        self.assertRejects(
            validate_title, "Title cannot exceed 255 characters", "a" * 256
        )
        self.assertRejects(
            validate_title, "Title cannot contain newlines", "Title\nwith\nnewlines"
        )
        self.assertRejects(validate_title, "Title cannot contain newlines", "a\rb")

    def test_content_rules(self):
        validate_content("")
        validate_content("a" * 10000)
        validate_content("Content with emojis: 🚀 🎉 📝")
        self.assertRejects(
            validate_content, "Content cannot exceed 10000 characters", "a" * 10001
        )

    def test_create_checks_title_before_content(self):
        self.assertRejects(validate_create, "Title cannot be empty", "", "a" * 10001)
        self.assertRejects(
            validate_create,
            "Content cannot exceed 10000 characters",
            "Valid title",
            "a" * 10001,
        )

    def test_update_only_checks_present_fields(self):
        validate_update()
        validate_update(title="Updated", content=None)
        self.assertRejects(validate_update, "Title cannot be empty", "")
        self.assertRejects(
            validate_update, "Content cannot exceed 10000 characters", None, "a" * 10001
        )


class TodoTests(unittest.TestCase):
    def test_new_sets_defaults(self):
        todo = Todo.new("Test Title", "Test Content")
        self.assertEqual(todo.title, "Test Title")
        self.assertEqual(todo.content, "Test Content")
        self.assertFalse(todo.completed)
        self.assertEqual(todo.created_at, todo.updated_at)
        self.assertEqual(todo.created_at.tzinfo, timezone.utc)
        self.assertEqual(todo.id.version, 7)

    def test_ids_are_unique_and_time_ordered(self):
        first = Todo.new("Title 1", "Content 1")
        second = Todo.new("Title 2", "Content 2")
        self.assertNotEqual(first.id, second.id)
        self.assertLessEqual(first.created_at, second.created_at)

    def test_new_with_validation(self):
        todo = Todo.new_with_validation("Valid Title", "Valid Content")
        self.assertTrue(todo.is_valid())
        with self.assertRaises(TodoValidationError):
            Todo.new_with_validation("", "Valid Content")
        with self.assertRaises(TodoValidationError):
            Todo.new_with_validation("a" * 256, "Valid Content")

    def test_mutations_bump_updated_at_only(self):
        todo = Todo.new("Original Title", "Original Content")
        created_at = todo.created_at

        todo.update_title("Updated Title")
        after_title = todo.updated_at
        self.assertEqual(todo.title, "Updated Title")
        self.assertGreater(after_title, created_at)

        todo.update_content("Updated Content")
        self.assertEqual(todo.content, "Updated Content")
        self.assertGreater(todo.updated_at, after_title)
        self.assertEqual(todo.created_at, created_at)

    def test_toggle_completed(self):
        todo = Todo.new("Test Title", "Test Content")
        todo.toggle_completed()
        self.assertTrue(todo.completed)
        self.assertGreater(todo.updated_at, todo.created_at)
        todo.toggle_completed()
        self.assertFalse(todo.completed)

    def test_update_with_validation_applies_fields(self):
        todo = Todo.new("Original Title", "Original Content")
        todo.update_with_validation("Updated Title", "Updated Content", True)
        self.assertEqual(todo.title, "Updated Title")
        self.assertEqual(todo.content, "Updated Content")
        self.assertTrue(todo.completed)

    def test_update_with_validation_leaves_todo_untouched_on_error(self):
        todo = Todo.new("Original Title", "Original Content")
        updated_at = todo.updated_at
        with self.assertRaises(TodoValidationError):
            todo.update_with_validation("", "New Content", True)
        self.assertEqual(todo.title, "Original Title")
        self.assertEqual(todo.content, "Original Content")
        self.assertFalse(todo.completed)
        self.assertEqual(todo.updated_at, updated_at)

    def test_empty_update_still_touches(self):
        todo = Todo.new("Title", "Content")
        todo.update_with_validation()
        self.assertEqual(todo.title, "Title")
        self.assertGreater(todo.updated_at, todo.created_at)

    def test_markdown_content_is_kept_verbatim(self):
        content = "# Header\n\n**Bold** text with [link](https://example.com)"
        todo = Todo.new("Test Title", content)
        self.assertEqual(todo.content, content)

    def test_is_valid_false_for_bad_fields(self):
        todo = Todo.new("Title", "Content")
        todo.title = "bad\ntitle"
        self.assertFalse(todo.is_valid())


if __name__ == "__main__":
    unittest.main()
