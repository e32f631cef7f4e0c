"""Memento - snapshot and restore an editor's state."""
from __future__ import annotations
from dataclasses import dataclass, field
from itertools import count
from typing import List, Optional

_sequence = count(1)


@dataclass(frozen=True)
class EditorMemento:
    """
    Immutable, opaque snapshot of an Editor.

    Only the Editor reads the captured state; callers keep and hand back
    mementos without looking inside.
    """
    _content: str = field(repr=False)
    _cursor: int = field(repr=False)
    sequence: int = field(default_factory=lambda: next(_sequence))


class Editor:
    """Originator."""

    def __init__(self, content: str = ""):
        self._content = content
        self._cursor = len(content)

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor(self) -> int:
        return self._cursor

    def type(self, text: str) -> None:
        """Insert ``text`` at the cursor and move the cursor past it."""
        self._content = self._content[: self._cursor] + text + self._content[self._cursor:]
        self._cursor += len(text)

    def move_cursor(self, position: int) -> None:
        self._cursor = max(0, min(len(self._content), position))

    def save(self) -> EditorMemento:
        return EditorMemento(self._content, self._cursor)

    def restore(self, memento: EditorMemento) -> None:
        """Replace the current state with the snapshot's content."""
        self._content = memento._content
        self._cursor = memento._cursor


class EditorHistory:
    """Caretaker keeping a stack of snapshots."""

    def __init__(self, editor: Editor):
        self._editor = editor
        self._snapshots: List[EditorMemento] = []

    def backup(self) -> EditorMemento:
        memento = self._editor.save()
        self._snapshots.append(memento)
        return memento

    def undo(self) -> Optional[EditorMemento]:
        """Restore the most recent snapshot. Returns None if there is none."""
        if not self._snapshots:
            return None
        memento = self._snapshots.pop()
        self._editor.restore(memento)
        return memento

    def __len__(self) -> int:
        return len(self._snapshots)
