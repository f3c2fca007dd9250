"""Raumverwaltung: hält alle Besprechungsräume eines Büros."""

import logging
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from models.room import Room

logger = logging.getLogger(__name__)
console = Console()


class RoomRegistry:
    """Geordnete Liste aller Räume, adressiert über 1-basierte Raumnummern.

    Es gibt pro AppContext genau eine Instanz (siehe models.context).
    """

    def __init__(self) -> None:
        self._rooms: list[Room] = []
        logger.debug("RoomRegistry angelegt")

    def configure_rooms(self, count: int) -> list[Room]:
        """Legt `count` neue Räume an und hängt sie hinten an.

        Wiederholte Aufrufe erweitern das Büro; die Nummerierung läuft
        fort, damit Raumnummern eindeutig bleiben.
        """
        if count <= 0:
            console.print(
                "[yellow]Ungültige Raumanzahl. Bitte eine positive Zahl angeben.[/yellow]")
            return []
        start = len(self._rooms) + 1
        new_rooms = [Room(n) for n in range(start, start + count)]
        self._rooms.extend(new_rooms)
        logger.info(f"{count} Räume angelegt (Nr. {start}–{start + count - 1})")
        console.print(f"Büro mit {count} Besprechungsräumen konfiguriert.")
        return new_rooms

    def get_room(self, room_number: int) -> Optional[Room]:
        """Gibt den Raum zurück oder None bei ungültiger Nummer."""
        if 0 < room_number <= len(self._rooms):
            return self._rooms[room_number - 1]
        console.print("[red]Ungültige Raumnummer.[/red]")
        logger.debug(f"Raum {room_number} angefragt, vorhanden: {len(self._rooms)}")
        return None

    @property
    def rooms(self) -> list[Room]:
        return list(self._rooms)

    def occupied_rooms(self) -> list[Room]:
        """Alle aktuell belegten Räume."""
        return [r for r in self._rooms if r.occupied]

    def __len__(self) -> int:
        return len(self._rooms)

    def print_status(self) -> None:
        """Gibt den Belegungsstand als Tabelle aus."""
        table = Table(title="Raumstatus", box=box.ROUNDED)
        table.add_column("Raum", style="bold")
        table.add_column("Kapazität")
        table.add_column("Status")
        for r in self._rooms:
            status = "[red]belegt[/red]" if r.occupied else "[green]frei[/green]"
            capacity = str(r.max_capacity) if r.max_capacity else "—"
            table.add_row(str(r.number), capacity, status)
        console.print(table)
        console.print(f"Belegt: {len(self.occupied_rooms())} von {len(self._rooms)} Räumen")
