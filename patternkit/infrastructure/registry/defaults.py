"""Built-in pattern registrations."""

from patternkit import behavioral, creational, structural
from patternkit.infrastructure.registry.catalog_registry import PatternCatalog, PatternCategory

_DEFAULT_PATTERNS = [
    # Creational
    ("singleton", PatternCategory.CREATIONAL, creational.get_singleton,
     "One shared instance per key"),
    ("factory", PatternCategory.CREATIONAL, creational.VehicleFactory,
     "Create products by variant name"),
    ("abstract-factory", PatternCategory.CREATIONAL, creational.AbstractFactory,
     "Factories for families of related products"),
    ("builder", PatternCategory.CREATIONAL, creational.CarBuilder,
     "Chainable step-by-step construction of an immutable product"),
    ("prototype", PatternCategory.CREATIONAL, creational.clone,
     "Copy a template with overrides"),
    # Structural
    ("adapter", PatternCategory.STRUCTURAL, structural.CalculatorAdapter,
     "Expose a target interface over an incompatible object"),
    ("bridge", PatternCategory.STRUCTURAL, structural.RemoteControl,
     "Abstraction with an interchangeable implementation"),
    ("composite", PatternCategory.STRUCTURAL, structural.Folder,
     "Treat leaves and trees uniformly"),
    ("decorator", PatternCategory.STRUCTURAL, structural.MilkDecorator,
     "Stackable wrappers that augment behaviour"),
    ("facade", PatternCategory.STRUCTURAL, structural.ComputerFacade,
     "One simple operation over several subsystems"),
    ("flyweight", PatternCategory.STRUCTURAL, structural.CarModelPool,
     "Share intrinsic state between many objects"),
    ("proxy", PatternCategory.STRUCTURAL, structural.AccountProxy,
     "Guarded stand-in for another object"),
    # Behavioral
    ("chain-of-responsibility", PatternCategory.BEHAVIORAL, behavioral.build_chain,
     "Pass a request along a chain of handlers"),
    ("command", PatternCategory.BEHAVIORAL, behavioral.CommandInvoker,
     "Requests as objects with undo"),
    ("interpreter", PatternCategory.BEHAVIORAL, behavioral.BinaryOp,
     "Evaluate expression trees"),
    ("iterator", PatternCategory.BEHAVIORAL, behavioral.SequenceIterator,
     "Sequential access without exposing the sequence"),
    ("mediator", PatternCategory.BEHAVIORAL, behavioral.ChatRoom,
     "Participants communicate through a central object"),
    ("memento", PatternCategory.BEHAVIORAL, behavioral.Editor,
     "Snapshot and restore state"),
    ("observer", PatternCategory.BEHAVIORAL, behavioral.Subject,
     "Notify subscribers of changes"),
    ("state", PatternCategory.BEHAVIORAL, behavioral.TrafficLight,
     "Behaviour delegated to the current state object"),
    ("strategy", PatternCategory.BEHAVIORAL, behavioral.PricingContext,
     "Swappable algorithms"),
    ("template", PatternCategory.BEHAVIORAL, behavioral.Tea,
     "Fixed skeleton with overridable steps"),
    ("visitor", PatternCategory.BEHAVIORAL, behavioral.SizeVisitor,
     "Operations over elements via double dispatch"),
]


def register_default_patterns(catalog: PatternCatalog) -> None:
    """Register every built-in pattern that is not already registered."""
    for name, category, entry_point, description in _DEFAULT_PATTERNS:
        if not catalog.is_registered(name):
            catalog.register_pattern(name, category, entry_point, description)
