"""Kaffee mit Zutaten (Decorator).

Jede Zutat besitzt genau einen eingewickelten Kaffee und addiert einen
festen Aufpreis. Die Beschreibung folgt der Wickel-Reihenfolge, der Preis
ist eine reine Summe.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol


class Coffee(Protocol):
    def get_description(self) -> str: ...

    def cost(self) -> float: ...


@dataclass(frozen=True)
class SimpleCoffee:
    description: str = "Simple Coffee"
    price: float = 2.0

    def get_description(self) -> str:
        return self.description

    def cost(self) -> float:
        return self.price


@dataclass(frozen=True)
class CoffeeDecorator:
    """Knoten der Kette: ein eingewickelter Kaffee plus fester Zuschlag."""

    inner: Coffee
    suffix: str
    surcharge: float

    def get_description(self) -> str:
        return f"{self.inner.get_description()}, {self.suffix}"

    def cost(self) -> float:
        return self.inner.cost() + self.surcharge


@dataclass(frozen=True)
class MilkDecorator(CoffeeDecorator):
    suffix: str = "Milk"
    surcharge: float = 0.5


@dataclass(frozen=True)
class SugarDecorator(CoffeeDecorator):
    suffix: str = "Sugar"
    surcharge: float = 0.2


TOPPINGS: dict[str, type] = {
    "milk": MilkDecorator,
    "sugar": SugarDecorator,
}


def build_coffee(toppings: Iterable[str], base: Optional[Coffee] = None) -> Coffee:
    """Wickelt den Basiskaffee in der angegebenen Reihenfolge ein."""
    coffee: Coffee = base if base is not None else SimpleCoffee()
    for name in toppings:
        decorator = TOPPINGS.get(name.lower())
        if decorator is None:
            raise ValueError(
                f"Unbekannte Zutat '{name}'. Verfügbar: {sorted(TOPPINGS)}")
        coffee = decorator(coffee)
    return coffee
