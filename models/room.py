"""Besprechungsraum mit Belegungsstatus und angeschlossenen Geräten (Observer)."""

from typing import Protocol

from rich.console import Console

from config.defaults import OCCUPANCY_THRESHOLD

console = Console()


class OccupancyObserver(Protocol):
    """Gerät, das bei jeder Belegungsänderung benachrichtigt wird."""

    def update(self, is_occupied: bool) -> None: ...


class _Switch:
    """Gemeinsame Basis für Geräte mit Ein/Aus-Zustand."""

    label = "Gerät"

    def __init__(self) -> None:
        self.is_on = False

    def update(self, is_occupied: bool) -> None:
        self.is_on = is_occupied
        if is_occupied:
            console.print(f"{self.label} eingeschaltet.")
        else:
            console.print(f"{self.label} ausgeschaltet.")


class AirConditioning(_Switch):
    """Klimaanlage: läuft nur bei belegtem Raum."""

    label = "Klimaanlage"


class Lights(_Switch):
    """Beleuchtung: brennt nur bei belegtem Raum."""

    label = "Licht"


class Room:
    """Ein Besprechungsraum.

    Belegt ist der Raum genau dann, wenn der letzte Aufruf von
    add_occupants() mindestens OCCUPANCY_THRESHOLD Personen gemeldet hat.
    Die Belegung ist nicht kumulativ.
    """

    def __init__(self, number: int) -> None:
        self.number = number
        self.occupied = False
        self.max_capacity = 0
        # Reihenfolge ist Benachrichtigungsreihenfolge
        self._observers: list[OccupancyObserver] = [AirConditioning(), Lights()]

    @property
    def observers(self) -> list[OccupancyObserver]:
        return list(self._observers)

    def subscribe(self, observer: OccupancyObserver) -> None:
        """Hängt ein weiteres Gerät hinten an die Benachrichtigungsliste."""
        self._observers.append(observer)

    def set_max_capacity(self, max_capacity: int) -> bool:
        """Setzt die maximale Belegung. Gibt False bei ungültigem Wert zurück."""
        if max_capacity > 0:
            self.max_capacity = max_capacity
            console.print(
                f"Raum {self.number}: maximale Belegung auf {max_capacity} gesetzt.")
            return True
        console.print(
            "[yellow]Ungültige Kapazität. Bitte eine positive Zahl angeben.[/yellow]")
        return False

    def add_occupants(self, count: int) -> None:
        """Meldet die aktuelle Personenzahl und benachrichtigt alle Geräte."""
        if count >= OCCUPANCY_THRESHOLD:
            self.occupied = True
            console.print(f"Raum {self.number} ist jetzt mit {count} Personen belegt.")
        else:
            self.occupied = False
            console.print(
                f"Raum {self.number}: Belegung reicht nicht aus, um als belegt "
                f"zu gelten.")
        self._notify_observers()

    def release_occupants(self) -> None:
        """Gibt den Raum frei und benachrichtigt alle Geräte."""
        self.occupied = False
        console.print(f"Raum {self.number} ist jetzt frei.")
        self._notify_observers()

    def _notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.occupied)

    def __repr__(self) -> str:
        status = "belegt" if self.occupied else "frei"
        return f"Room({self.number}, {status}, max={self.max_capacity})"
