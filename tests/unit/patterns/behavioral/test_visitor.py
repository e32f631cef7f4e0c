"""Tests for the visitors."""

from patternkit.behavioral.visitor import UNSUPPORTED, InventoryVisitor, SizeVisitor, Visitor
from patternkit.domain.core.common_types import Car, ElementKind, Truck
from patternkit.structural.composite import File


class TestSizeVisitor:
    """Test the file tree visitor."""

    def test_visits_whole_tree(self, sample_tree):
        visitor = SizeVisitor()
        sample_tree.accept(visitor)

        assert visitor.total_size == 800
        assert visitor.file_count == 4
        assert visitor.folder_count == 3
        assert visitor.unsupported == []

    def test_double_dispatch_returns_handler_result(self):
        assert File("a", 42).accept(SizeVisitor()) == 42

    def test_unsupported_kind_signalled(self):
        visitor = SizeVisitor()
        truck = Truck(model="Actros")

        assert truck.accept(visitor) is UNSUPPORTED
        assert visitor.unsupported == [truck]
        assert visitor.total_size == 0


class TestInventoryVisitor:
    """Test the vehicle visitor."""

    def test_visits_each_vehicle(self, vehicles):
        visitor = InventoryVisitor()
        for vehicle in vehicles:
            vehicle.accept(visitor)

        assert visitor.lines == [
            "car Civic: 4 doors",
            "truck Actros: 18 t",
            "car Mini: 2 doors",
        ]
        assert visitor.total_payload == 18

    def test_files_are_unsupported(self):
        visitor = InventoryVisitor()
        assert File("a").accept(visitor) is UNSUPPORTED


def test_base_visitor_supports_nothing():
    visitor = Visitor()

    assert visitor.visit(Car(model="Civic")) is UNSUPPORTED
    assert not visitor.supports(ElementKind.CAR)


def test_element_without_kind_is_unsupported():
    assert SizeVisitor().visit(object()) is UNSUPPORTED


def test_supports():
    assert SizeVisitor().supports(ElementKind.FOLDER)
    assert InventoryVisitor().supports(ElementKind.TRUCK)
