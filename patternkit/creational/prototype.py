"""Prototype - cloning from a template without a live link to it."""

from typing import Any, Dict, List, Mapping, Optional, TypeVar
import copy
import dataclasses
import threading

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from patternkit.domain.core.exceptions import RegistrationError, UnknownVariantError, ValidationError
from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def clone(template: T, overrides: Optional[Mapping[str, Any]] = None) -> T:
    """
    Return a deep copy of ``template`` with ``overrides`` applied.

    The template is never mutated and the copy shares no mutable state with it.

    Args:
        template: Object to copy (pydantic model, dataclass instance, or plain object)
        overrides: Field values to replace in the copy

    Returns:
        New object of the same type as ``template``

    Raises:
        ValidationError: If an override names an unknown field or fails validation
    """
    overrides = dict(overrides or {})

    if isinstance(template, BaseModel):
        _check_fields(template, overrides, type(template).model_fields)
        # Re-validate so overrides get the same checks as construction
        data = template.model_dump()
        data.update(copy.deepcopy(overrides))
        try:
            return type(template).model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e, f"Invalid overrides for {type(template).__name__}") from e

    if dataclasses.is_dataclass(template) and not isinstance(template, type):
        field_names = {f.name for f in dataclasses.fields(template)}
        _check_fields(template, overrides, field_names)
        return dataclasses.replace(copy.deepcopy(template), **copy.deepcopy(overrides))

    _check_fields(template, overrides, vars(template))
    duplicate = copy.deepcopy(template)
    for name, value in overrides.items():
        setattr(duplicate, name, copy.deepcopy(value))
    return duplicate


def _check_fields(template: Any, overrides: Dict[str, Any], known: Any) -> None:
    unknown = sorted(name for name in overrides if name not in known)
    if unknown:
        raise ValidationError(
            f"{type(template).__name__} has no field(s) {unknown}", {"fields": unknown}
        )


class PrototypeRegistry:
    """Named templates from which copies are cloned on request."""

    def __init__(self) -> None:
        self._templates: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def register(self, name: str, template: Any) -> None:
        """
        Register a template under ``name``.

        Raises:
            RegistrationError: If ``name`` is already registered
        """
        with self._lock:
            if name in self._templates:
                raise RegistrationError(f"Prototype '{name}' is already registered")
            # Keep a private copy so later changes to the caller's object are not seen
            self._templates[name] = copy.deepcopy(template)
        logger.debug(f"Registered prototype: {name}")

    def clone(self, name: str, **overrides: Any) -> Any:
        """
        Clone the template registered under ``name``.

        Raises:
            UnknownVariantError: If ``name`` is not registered
        """
        template = self._templates.get(name)
        if template is None:
            raise UnknownVariantError(name, self._templates.keys())
        return clone(template, overrides)

    def names(self) -> List[str]:
        return sorted(self._templates)
