"""Visitor - double dispatch over a closed set of element kinds.

Elements call ``visitor.visit(self)`` from ``accept``. The visitor picks its
handler from a table keyed by ``element.kind`` rather than by inspecting
runtime types. Kinds without a handler return ``UNSUPPORTED``.
"""

from enum import Enum
from typing import Any, Callable, Dict, List

from patternkit.domain.core.common_types import ElementKind
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class VisitOutcome(Enum):
    UNSUPPORTED = "unsupported"


UNSUPPORTED = VisitOutcome.UNSUPPORTED


class Visitor:
    """Base visitor; subclasses fill in ``handlers``."""

    def __init__(self) -> None:
        self.unsupported: List[Any] = []

    def handlers(self) -> Dict[ElementKind, Callable[[Any], Any]]:
        return {}

    def visit(self, element: Any) -> Any:
        kind = getattr(element, "kind", None)
        handler = self.handlers().get(kind)
        if handler is None:
            logger.debug(f"{type(self).__name__} does not support {kind!r}")
            self.unsupported.append(element)
            return UNSUPPORTED
        return handler(element)

    def supports(self, kind: ElementKind) -> bool:
        return kind in self.handlers()


class SizeVisitor(Visitor):
    """Totals file sizes and counts folders in a file tree."""

    def __init__(self) -> None:
        super().__init__()
        self.total_size = 0
        self.file_count = 0
        self.folder_count = 0

    def handlers(self) -> Dict[ElementKind, Callable[[Any], Any]]:
        return {
            ElementKind.FILE: self.visit_file,
            ElementKind.FOLDER: self.visit_folder,
        }

    def visit_file(self, file: Any) -> int:
        self.file_count += 1
        self.total_size += file.size
        return file.size

    def visit_folder(self, folder: Any) -> int:
        self.folder_count += 1
        return 0


class InventoryVisitor(Visitor):
    """Builds an inventory line per vehicle and sums truck capacity."""

    def __init__(self) -> None:
        super().__init__()
        self.lines: List[str] = []
        self.total_payload = 0.0

    def handlers(self) -> Dict[ElementKind, Callable[[Any], Any]]:
        return {
            ElementKind.CAR: self.visit_car,
            ElementKind.TRUCK: self.visit_truck,
        }

    def visit_car(self, car: Any) -> str:
        line = f"car {car.model}: {car.doors} doors"
        self.lines.append(line)
        return line

    def visit_truck(self, truck: Any) -> str:
        line = f"truck {truck.model}: {truck.payload_tons:g} t"
        self.lines.append(line)
        self.total_payload += truck.payload_tons
        return line
