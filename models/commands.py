"""Buchen und Stornieren als ausführbare Befehle (Command)."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console

from config.defaults import BOOKING_OCCUPANTS
from config.schema import StartTime
from models.room import Room

console = Console()


class Command(Protocol):
    def execute(self) -> bool: ...


class BookRoomCommand(BaseModel):
    """Bucht einen freien Raum ab start_time für duration Minuten."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    room: Room
    start_time: StartTime         # "HH:MM"
    duration: int = Field(gt=0)   # Minuten

    def execute(self) -> bool:
        """True wenn gebucht wurde, False bei bereits belegtem Raum."""
        if self.room.occupied:
            console.print(f"[yellow]Raum {self.room.number} ist bereits gebucht.[/yellow]")
            return False
        console.print(
            f"Raum {self.room.number} gebucht ab {self.start_time} "
            f"für {self.duration} Minuten.")
        self.room.add_occupants(BOOKING_OCCUPANTS)
        return True


class CancelBookingCommand(BaseModel):
    """Storniert die Buchung eines belegten Raums."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    room: Room

    def execute(self) -> bool:
        """True wenn storniert wurde, False wenn der Raum nicht gebucht war."""
        if not self.room.occupied:
            console.print(f"[yellow]Raum {self.room.number} ist nicht gebucht.[/yellow]")
            return False
        self.room.release_occupants()
        console.print(
            f"[green]✓[/green] Buchung für Raum {self.room.number} erfolgreich storniert.")
        return True
