"""Command - requests as objects, with optional undo."""

from abc import ABC, abstractmethod
from typing import List

from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Command(ABC):
    """Encapsulates a receiver and one action on it."""

    @abstractmethod
    def execute(self) -> None:
        pass


class ReversibleCommand(Command):
    """Command whose effect can be reverted."""

    @abstractmethod
    def undo(self) -> None:
        pass


class Light:
    """Receiver."""

    def __init__(self, location: str = "room"):
        self.location = location
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True

    def turn_off(self) -> None:
        self.is_on = False


class LightOnCommand(ReversibleCommand):
    def __init__(self, light: Light):
        self.light = light
        self._was_on = light.is_on

    def execute(self) -> None:
        self._was_on = self.light.is_on
        self.light.turn_on()

    def undo(self) -> None:
        if not self._was_on:
            self.light.turn_off()


class LightOffCommand(ReversibleCommand):
    def __init__(self, light: Light):
        self.light = light
        self._was_on = light.is_on

    def execute(self) -> None:
        self._was_on = self.light.is_on
        self.light.turn_off()

    def undo(self) -> None:
        if self._was_on:
            self.light.turn_on()


class TextDocument:
    """Receiver holding text."""

    def __init__(self, text: str = ""):
        self.text = text


class AppendTextCommand(ReversibleCommand):
    def __init__(self, document: TextDocument, text: str):
        self.document = document
        self.text = text

    def execute(self) -> None:
        self.document.text += self.text

    def undo(self) -> None:
        if self.text and self.document.text.endswith(self.text):
            self.document.text = self.document.text[: -len(self.text)]


class MacroCommand(ReversibleCommand):
    """Runs several commands in order; undo reverts them in reverse order."""

    def __init__(self, commands: List[Command]):
        self.commands = list(commands)

    def execute(self) -> None:
        for command in self.commands:
            command.execute()

    def undo(self) -> None:
        for command in reversed(self.commands):
            if isinstance(command, ReversibleCommand):
                command.undo()


class CommandInvoker:
    """Executes commands and remembers the reversible ones for undo."""

    def __init__(self) -> None:
        self._history: List[ReversibleCommand] = []

    @property
    def history(self) -> List[ReversibleCommand]:
        return list(self._history)

    def run(self, command: Command) -> None:
        command.execute()
        logger.debug(f"Executed {type(command).__name__}")
        if isinstance(command, ReversibleCommand):
            self._history.append(command)

    def undo(self) -> bool:
        """Undo the most recent reversible command. Returns False if there is none."""
        if not self._history:
            return False
        command = self._history.pop()
        command.undo()
        logger.debug(f"Undid {type(command).__name__}")
        return True
