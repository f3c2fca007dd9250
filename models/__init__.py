from models.room import AirConditioning, Lights, Room
from models.registry import RoomRegistry
from models.commands import BookRoomCommand, CancelBookingCommand, Command
from models.context import AppContext

__all__ = [
    "AirConditioning",
    "Lights",
    "Room",
    "RoomRegistry",
    "BookRoomCommand",
    "CancelBookingCommand",
    "Command",
    "AppContext",
]
