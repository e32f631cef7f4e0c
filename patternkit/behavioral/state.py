"""State - a traffic light delegating behaviour to its current state.

``change()`` only runs the active state's handler. Moving to another state
is always an explicit call (``set_state`` or ``advance``).
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Type, Union

from patternkit.domain.core.exceptions import ValidationError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class LightColor(str, Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class TrafficLightState(ABC):
    color: LightColor
    next_color: LightColor

    @abstractmethod
    def handle(self, light: TrafficLight) -> str:
        """Action drivers should take while this state is active."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RedLight(TrafficLightState):
    color = LightColor.RED
    next_color = LightColor.GREEN

    def handle(self, light: TrafficLight) -> str:
        return "Stop"


class GreenLight(TrafficLightState):
    color = LightColor.GREEN
    next_color = LightColor.YELLOW

    def handle(self, light: TrafficLight) -> str:
        return "Go"


class YellowLight(TrafficLightState):
    color = LightColor.YELLOW
    next_color = LightColor.RED

    def handle(self, light: TrafficLight) -> str:
        return "Slow down"


STATES: Dict[LightColor, Type[TrafficLightState]] = {
    LightColor.RED: RedLight,
    LightColor.GREEN: GreenLight,
    LightColor.YELLOW: YellowLight,
}


class TrafficLight:
    """Context."""

    def __init__(self, initial: Union[TrafficLightState, LightColor, str] = LightColor.RED):
        self._state = self._resolve(initial)
        self.history: List[LightColor] = [self._state.color]

    @property
    def state(self) -> TrafficLightState:
        return self._state

    def set_state(self, state: Union[TrafficLightState, LightColor, str]) -> None:
        """
        Switch to ``state``.

        Raises:
            ValidationError: If ``state`` is not one of the known light states
        """
        self._state = self._resolve(state)
        self.history.append(self._state.color)
        logger.debug(f"Traffic light switched to {self._state.color.value}")

    def change(self) -> str:
        """Delegate to the active state's handler."""
        return self._state.handle(self)

    def advance(self) -> TrafficLightState:
        """Switch to the successor the current state names."""
        self.set_state(self._state.next_color)
        return self._state

    @staticmethod
    def _resolve(state: Union[TrafficLightState, LightColor, str]) -> TrafficLightState:
        if isinstance(state, TrafficLightState):
            return state
        try:
            return STATES[LightColor(state)]()
        except ValueError as e:
            raise ValidationError(f"Unknown traffic light state: {state!r}") from e
