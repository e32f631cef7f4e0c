"""Pattern Catalog - Root Package.

This package provides the classic object-oriented design patterns
(creational, structural, behavioral) as small, reusable components with a
uniform interface.

Key Components:
    - domain: Shared value types, result types and exceptions
    - creational: Singleton, Factory, Abstract Factory, Builder, Prototype
    - structural: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy
    - behavioral: Chain of Responsibility, Command, Interpreter, Iterator,
      Mediator, Memento, Observer, State, Strategy, Template, Visitor
    - infrastructure: Logging and the pattern catalog registry
    - config: Configuration schemas and manager

Each pattern module is independent; none imports another pattern module.
"""

import logging

from ._package import PACKAGE_NAME, __version__

__author__ = "Pattern Catalog Maintainers"
__package_name__ = PACKAGE_NAME

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__", "PACKAGE_NAME"]
