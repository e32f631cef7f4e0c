"""Tests for editor snapshots."""

import dataclasses

import pytest

from patternkit.behavioral.memento import Editor, EditorHistory


class TestMemento:
    """Test save and restore."""

    def test_restore_immediately_after_save_is_no_op(self):
        editor = Editor("hello")
        editor.restore(editor.save())

        assert editor.content == "hello"
        assert editor.cursor == 5

    def test_restore_earlier_snapshot_reverts_exactly(self):
        editor = Editor("hello")
        snapshot = editor.save()

        editor.type(" world")
        editor.move_cursor(0)
        editor.type(">> ")
        editor.restore(snapshot)

        assert editor.content == "hello"
        assert editor.cursor == 5

    def test_snapshot_is_immutable(self):
        snapshot = Editor("hello").save()

        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot._content = "changed"

    def test_restore_does_not_change_snapshot(self):
        editor = Editor("one")
        snapshot = editor.save()
        editor.restore(snapshot)
        editor.type(" two")

        editor.restore(snapshot)
        assert editor.content == "one"

    def test_snapshot_repr_hides_state(self):
        assert "secret" not in repr(Editor("secret").save())

    def test_type_inserts_at_cursor(self):
        editor = Editor("ac")
        editor.move_cursor(1)
        editor.type("b")

        assert editor.content == "abc"
        assert editor.cursor == 2

    def test_move_cursor_is_bounded(self):
        editor = Editor("abc")
        editor.move_cursor(10)
        assert editor.cursor == 3
        editor.move_cursor(-4)
        assert editor.cursor == 0


class TestEditorHistory:
    """Test the caretaker."""

    def test_undo_walks_back_through_snapshots(self):
        editor = Editor()
        history = EditorHistory(editor)

        history.backup()
        editor.type("a")
        history.backup()
        editor.type("b")

        history.undo()
        assert editor.content == "a"
        history.undo()
        assert editor.content == ""
        assert history.undo() is None
        assert len(history) == 0

    def test_snapshots_are_ordered(self):
        editor = Editor()
        first = editor.save()
        second = editor.save()
        assert second.sequence > first.sequence
