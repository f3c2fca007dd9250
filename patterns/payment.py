"""Zahlungsabwicklung über ein Altsystem (Adapter)."""

from typing import Protocol

from rich.console import Console

console = Console()


class PaymentSystem(Protocol):
    def process_payment(self, amount: float) -> None: ...


class LegacyPaymentSystem:
    """Altsystem mit eigener Aufrufkonvention. Zahlungen gelingen immer."""

    def make_payment(self, amount: float) -> None:
        console.print(f"Verarbeite Zahlung über ${amount} mit dem Altsystem.")


class PaymentAdapter:
    """Stellt das Altsystem als PaymentSystem bereit."""

    def __init__(self, legacy_system: LegacyPaymentSystem) -> None:
        self._legacy_system = legacy_system

    def process_payment(self, amount: float) -> None:
        self._legacy_system.make_payment(amount)
