"""Büro-Demo: Raumbelegung (Observer), Raumverwaltung (Singleton),
Buchungen (Command)."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel

from config.schema import OfficeDemoConfig
from models.commands import BookRoomCommand, CancelBookingCommand, Command
from models.context import AppContext

console = Console()


def run_office_demo(ctx: AppContext,
                    config: Optional[OfficeDemoConfig] = None) -> AppContext:
    """Spielt den festen Büro-Ablauf durch und gibt den Kontext zurück."""
    config = config or OfficeDemoConfig()
    console.print(Panel("[bold]Büro-Demo[/bold]", border_style="cyan", expand=False))

    office = ctx.office
    office.configure_rooms(config.room_count)

    # Kapazitäten
    for cap in config.capacities:
        room = office.get_room(cap.room_number)
        if room is not None:
            room.set_max_capacity(cap.max_capacity)

    # Raum buchen, stornieren, erneut buchen
    primary = config.primary_booking
    room = office.get_room(primary.room_number)
    book: Command = BookRoomCommand(room=room, start_time=primary.start_time,
                                    duration=primary.duration_minutes)
    cancel: Command = CancelBookingCommand(room=room)
    book.execute()
    cancel.execute()
    book.execute()

    # Zweitbuchung: beide Befehle werden gebaut, nur das Storno läuft
    secondary = config.secondary_booking
    other = office.get_room(secondary.room_number)
    book_other: Command = BookRoomCommand(
        room=other, start_time=secondary.start_time,
        duration=secondary.duration_minutes)
    cancel_other: Command = CancelBookingCommand(room=other)
    cancel_other.execute()

    # Belegungsänderungen (nicht kumulativ)
    for count in config.occupancy_changes:
        room.add_occupants(count)

    console.print()
    office.print_status()
    return ctx
