"""Behavioral patterns."""

from .chain import UNHANDLED, ApprovalHandler, ChainOutcome, FunctionHandler, Handler, build_chain
from .command import (
    AppendTextCommand,
    Command,
    CommandInvoker,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    ReversibleCommand,
    TextDocument,
)
from .interpreter import BinaryOp, Expression, Literal, Operator
from .iterator import IteratorResult, SequenceIterator
from .mediator import ChatRoom, Participant
from .memento import Editor, EditorHistory, EditorMemento
from .observer import Subject
from .state import GreenLight, LightColor, RedLight, TrafficLight, TrafficLightState, YellowLight
from .strategy import FixedDiscount, NoDiscount, PercentageDiscount, PricingContext, PricingStrategy
from .template import BeverageRecipe, BlackCoffee, Coffee, Tea
from .visitor import UNSUPPORTED, InventoryVisitor, SizeVisitor, VisitOutcome, Visitor

__all__ = [
    "UNHANDLED",
    "ChainOutcome",
    "Handler",
    "ApprovalHandler",
    "FunctionHandler",
    "build_chain",
    "Command",
    "ReversibleCommand",
    "Light",
    "LightOnCommand",
    "LightOffCommand",
    "TextDocument",
    "AppendTextCommand",
    "MacroCommand",
    "CommandInvoker",
    "Expression",
    "Literal",
    "BinaryOp",
    "Operator",
    "IteratorResult",
    "SequenceIterator",
    "ChatRoom",
    "Participant",
    "Editor",
    "EditorMemento",
    "EditorHistory",
    "Subject",
    "LightColor",
    "TrafficLight",
    "TrafficLightState",
    "RedLight",
    "GreenLight",
    "YellowLight",
    "PricingStrategy",
    "NoDiscount",
    "PercentageDiscount",
    "FixedDiscount",
    "PricingContext",
    "BeverageRecipe",
    "Tea",
    "Coffee",
    "BlackCoffee",
    "UNSUPPORTED",
    "VisitOutcome",
    "Visitor",
    "SizeVisitor",
    "InventoryVisitor",
]
