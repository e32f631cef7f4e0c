from patternkit.domain.core.exceptions import (
    DomainException,
    PatternNotFoundError,
    UnknownFamilyError,
    UnknownVariantError,
)
from patternkit.domain.core.results import AccessDenied, InsufficientResource


def test_unknown_variant_lists_available_variants():
    error = UnknownVariantError("boat", ["truck", "car"])

    assert isinstance(error, DomainException)
    assert error.kind == "boat"
    assert error.available == ["car", "truck"]
    assert "boat" in str(error)


def test_unknown_family_message():
    error = UnknownFamilyError("sport", ["economy"])
    assert error.family == "sport"
    assert "sport" in str(error)


def test_pattern_not_found_is_unknown_variant():
    error = PatternNotFoundError("monad")
    assert isinstance(error, UnknownVariantError)
    assert error.name == "monad"


def test_failure_results_render_reason():
    assert "requested 50" in str(InsufficientResource(50, 10))
    assert "bob" in str(AccessDenied("bob", "withdraw"))
