import logging

import pytest
import structlog

from patternkit.creational.singleton import SingletonRegistry
from patternkit.domain.core.common_types import BankAccount, Car, Truck
from patternkit.infrastructure.logging.logger import ROOT_LOGGER_NAME
from patternkit.infrastructure.registry.catalog_registry import PatternCatalog
from patternkit.structural.composite import File, Folder


def _reset_logging():
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in package_logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_registries():
    """Give every test a clean singleton registry, catalog and logging setup."""
    SingletonRegistry.get_instance().reset()
    catalog = PatternCatalog()
    catalog.reset()
    yield
    SingletonRegistry.get_instance().reset()
    catalog.reset()
    _reset_logging()


@pytest.fixture
def sample_tree():
    """
    root/
      docs/
        readme.md (100)
        guide.md (250)
      src/
        main.py (400)
      notes.txt (50)
    """
    docs = Folder("docs", [File("readme.md", 100), File("guide.md", 250)])
    src = Folder("src", [File("main.py", 400)])
    return Folder("root", [docs, src, File("notes.txt", 50)])


@pytest.fixture
def vehicles():
    return [
        Car(model="Civic", doors=4),
        Truck(model="Actros", payload_tons=18),
        Car(model="Mini", doors=2),
    ]


@pytest.fixture
def account():
    return BankAccount(owner="alice", balance=100.0)
