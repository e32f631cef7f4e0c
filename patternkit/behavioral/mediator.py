"""Mediator - participants talk only through a chat room."""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

from patternkit.domain.core.exceptions import ValidationError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ChatRoom:
    """Routes messages between registered participants."""

    def __init__(self, name: str = "lobby"):
        self.name = name
        self._participants: Dict[str, Participant] = {}

    @property
    def participants(self) -> List[str]:
        return list(self._participants)

    def register(self, participant: Participant) -> None:
        """
        Register ``participant`` and point it at this room.

        Raises:
            ValidationError: If another participant already uses the name
        """
        existing = self._participants.get(participant.name)
        if existing is not None and existing is not participant:
            raise ValidationError(f"Participant name '{participant.name}' is taken in '{self.name}'")
        self._participants[participant.name] = participant
        participant.mediator = self
        logger.debug(f"'{participant.name}' joined '{self.name}'")

    def send(self, message: str, sender: Participant, to: Optional[str] = None) -> int:
        """
        Deliver ``message`` to one participant or broadcast it to all others.

        Returns:
            Number of participants the message was delivered to
        """
        if to is not None:
            recipient = self._participants.get(to)
            if recipient is None:
                logger.debug(f"No participant named '{to}' in '{self.name}'")
                return 0
            recipient.receive(message, sender.name)
            return 1

        delivered = 0
        for participant in list(self._participants.values()):
            if participant is not sender:
                participant.receive(message, sender.name)
                delivered += 1
        return delivered


class Participant:
    """Holds a reference to its mediator, never to other participants."""

    def __init__(self, name: str, mediator: ChatRoom):
        self.name = name
        self.mediator: ChatRoom = mediator
        self.inbox: List[Tuple[str, str]] = []
        mediator.register(self)

    def send(self, message: str, to: Optional[str] = None) -> int:
        return self.mediator.send(message, self, to)

    def receive(self, message: str, sender_name: str) -> None:
        self.inbox.append((sender_name, message))
