"""Structural patterns."""

from .adapter import AdvancedCalculator, CalculatorAdapter, CelsiusSensorAdapter, FahrenheitSensor
from .bridge import AdvancedRemoteControl, Device, Radio, RemoteControl, Television
from .composite import Component, File, Folder
from .decorator import (
    AddOnDecorator,
    Beverage,
    BeverageDecorator,
    Coffee,
    DiscountDecorator,
    MilkDecorator,
    SugarDecorator,
)
from .facade import CPU, ComputerFacade, HardDrive, Memory
from .flyweight import CarModel, CarModelPool, FlyweightPool, ParkedCar
from .proxy import AccountProxy

__all__ = [
    "AdvancedCalculator",
    "CalculatorAdapter",
    "FahrenheitSensor",
    "CelsiusSensorAdapter",
    "Device",
    "Television",
    "Radio",
    "RemoteControl",
    "AdvancedRemoteControl",
    "Component",
    "File",
    "Folder",
    "Beverage",
    "Coffee",
    "BeverageDecorator",
    "AddOnDecorator",
    "MilkDecorator",
    "SugarDecorator",
    "DiscountDecorator",
    "CPU",
    "Memory",
    "HardDrive",
    "ComputerFacade",
    "FlyweightPool",
    "CarModel",
    "CarModelPool",
    "ParkedCar",
    "AccountProxy",
]
