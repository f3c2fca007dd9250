"""Muster-Demo: Observer, Strategy, Singleton, Factory, Adapter, Decorator."""

from .weather import WeatherMonitor, MobileDisplay, TelevisionDisplay
from .sorting import (
    BubbleSortStrategy,
    QuickSortStrategy,
    SorterContext,
    SORTING_STRATEGIES,
    get_strategy,
)
from .connection import ConnectionHolder, DatabaseConnection
from .shapes import CircleShape, ShapeFactory, SquareShape
from .payment import LegacyPaymentSystem, PaymentAdapter
from .coffee import (
    CoffeeDecorator,
    MilkDecorator,
    SimpleCoffee,
    SugarDecorator,
    TOPPINGS,
    build_coffee,
)

__all__ = [
    "WeatherMonitor",
    "MobileDisplay",
    "TelevisionDisplay",
    "BubbleSortStrategy",
    "QuickSortStrategy",
    "SorterContext",
    "SORTING_STRATEGIES",
    "get_strategy",
    "ConnectionHolder",
    "DatabaseConnection",
    "CircleShape",
    "SquareShape",
    "ShapeFactory",
    "LegacyPaymentSystem",
    "PaymentAdapter",
    "CoffeeDecorator",
    "MilkDecorator",
    "SimpleCoffee",
    "SugarDecorator",
    "TOPPINGS",
    "build_coffee",
]
