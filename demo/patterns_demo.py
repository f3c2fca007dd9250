"""Muster-Demo: Observer, Strategy, Singleton, Factory, Adapter, Decorator."""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from config.schema import PatternsDemoConfig
from models.context import AppContext
from patterns.coffee import build_coffee
from patterns.payment import LegacyPaymentSystem, PaymentAdapter, PaymentSystem
from patterns.shapes import ShapeFactory
from patterns.sorting import SorterContext, get_strategy
from patterns.weather import MobileDisplay, TelevisionDisplay, WeatherMonitor

console = Console()


def _section(title: str) -> None:
    console.print()
    console.print(f"[bold cyan]──── {title} ────[/bold cyan]")


def run_patterns_demo(ctx: AppContext,
                      config: Optional[PatternsDemoConfig] = None) -> list[int]:
    """Spielt die sechs Muster nacheinander durch.

    Gibt die sortierte Liste zurück (für Tests und die CLI-Zusammenfassung).
    """
    config = config or PatternsDemoConfig()

    # 1. Observer
    _section("Observer")
    station = WeatherMonitor()
    station.register_observer(MobileDisplay())
    station.register_observer(TelevisionDisplay())
    station.set_temperature(config.temperature)

    # 2. Strategy
    _section("Strategy")
    array = list(config.sort_input)
    strategies = [get_strategy(name) for name in config.sort_strategies]
    sorter = SorterContext(strategies[0])
    sorter.sort_array(array)
    for strategy in strategies[1:]:
        sorter.set_sorting_strategy(strategy)
        sorter.sort_array(array)
    console.print(f"Ergebnis: {array}")

    # 3. Singleton
    _section("Singleton")
    connection = ctx.get_connection()
    connection.execute_query(config.query)

    # 4. Factory
    _section("Factory")
    factory = ShapeFactory()
    for kind in config.shapes:
        shape = factory.create_shape(kind)
        if shape is None:
            console.print(
                f"[yellow]Unbekannte Form: {escape(kind)} "
                f"(bekannt: {', '.join(factory.known_kinds())})[/yellow]")
            continue
        shape.draw()

    # 5. Adapter
    _section("Adapter")
    payment: PaymentSystem = PaymentAdapter(LegacyPaymentSystem())
    payment.process_payment(config.payment_amount)

    # 6. Decorator
    _section("Decorator")
    coffee = build_coffee(config.coffee_toppings)
    console.print(f"{coffee.get_description()} kostet ${coffee.cost():.2f}")

    return array
