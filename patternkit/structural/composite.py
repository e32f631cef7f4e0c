"""Composite - files and folders treated through one interface.

A folder holds an ordered list of children. Every tree operation visits
nodes in insertion order and each node exactly once.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional

from patternkit.domain.core.common_types import ElementKind
from patternkit.domain.core.exceptions import ValidationError

INDENT = "  "


class Component(ABC):
    """Common interface for leaves and composites."""

    kind: ElementKind

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def display(self, depth: int = 0) -> List[str]:
        """Return the visitation log: one indented line per node."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Double dispatch into ``visitor``."""

    @abstractmethod
    def total_size(self) -> int:
        pass

    def walk(self) -> Iterator[Component]:
        """Pre-order traversal."""
        yield self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class File(Component):
    """Leaf node."""

    kind = ElementKind.FILE

    def __init__(self, name: str, size: int = 0):
        if size < 0:
            raise ValidationError("File size cannot be negative", {"size": size})
        super().__init__(name)
        self.size = size

    def display(self, depth: int = 0) -> List[str]:
        return [f"{INDENT * depth}{self.name}"]

    def accept(self, visitor: Any) -> Any:
        return visitor.visit(self)

    def total_size(self) -> int:
        return self.size


class Folder(Component):
    """Composite node holding an ordered sequence of children."""

    kind = ElementKind.FOLDER

    def __init__(self, name: str, children: Optional[List[Component]] = None):
        super().__init__(name)
        self._children: List[Component] = []
        for child in children or []:
            self.add(child)

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, child: Component) -> Folder:
        """
        Append ``child`` and return this folder for chaining.

        Raises:
            ValidationError: If the child is already a child of this folder or
                contains this folder (a cycle)
        """
        if any(node is self for node in child.walk()):
            raise ValidationError(
                f"Cannot add '{child.name}' to '{self.name}': would create a cycle"
            )
        if any(existing is child for existing in self._children):
            raise ValidationError(f"'{child.name}' is already a child of '{self.name}'")
        self._children.append(child)
        return self

    def remove(self, child: Component) -> bool:
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                return True
        return False

    def display(self, depth: int = 0) -> List[str]:
        lines = [f"{INDENT * depth}{self.name}/"]
        for child in self._children:
            lines.extend(child.display(depth + 1))
        return lines

    def accept(self, visitor: Any) -> Any:
        """Visit this folder, then each child in insertion order."""
        result = visitor.visit(self)
        for child in self._children:
            child.accept(visitor)
        return result

    def total_size(self) -> int:
        return sum(child.total_size() for child in self._children)

    def walk(self) -> Iterator[Component]:
        yield self
        for child in self._children:
            yield from child.walk()

    def __len__(self) -> int:
        return len(self._children)
