import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator


TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _check_start_time(v: str) -> str:
    if not TIME_PATTERN.match(v):
        raise ValueError(f"Startzeit '{v}' ist nicht im Format HH:MM")
    return v


# Uhrzeit im Format "HH:MM" (00:00–23:59)
StartTime = Annotated[str, AfterValidator(_check_start_time)]


# ─── BÜRO-DEMO ───

class RoomCapacity(BaseModel):
    """Maximale Belegung eines einzelnen Raums."""
    # Raumnummer, 1-basiert
    room_number: int = Field(ge=1)
    # Maximale Personenzahl (≤ 0 wird von Room als ungültig gemeldet)
    max_capacity: int


class BookingDefinition(BaseModel):
    """Eine Buchung im Demo-Ablauf."""
    # Raumnummer, 1-basiert
    room_number: int = Field(ge=1)
    # Beginn im Format "HH:MM"
    start_time: StartTime = "09:00"
    # Dauer in Minuten
    duration_minutes: int = Field(60, gt=0)


class OfficeDemoConfig(BaseModel):
    """Konfiguration der Büro-Demo (Observer, Singleton, Command).

    Der Ablauf selbst ist fest: konfigurieren → Kapazitäten → buchen →
    stornieren → erneut buchen → Raum-2-Storno → Belegungsänderungen.
    """
    # Anzahl Besprechungsräume
    room_count: int = Field(3, ge=1, le=50,
        description="Anzahl Besprechungsräume")
    # Kapazitäten, die zu Beginn gesetzt werden
    capacities: list[RoomCapacity] = Field(
        default_factory=lambda: [
            RoomCapacity(room_number=1, max_capacity=10),
            RoomCapacity(room_number=2, max_capacity=8),
        ],
        description="Maximale Belegung je Raum")
    # Hauptbuchung (wird gebucht, storniert und erneut gebucht)
    primary_booking: BookingDefinition = Field(
        default_factory=lambda: BookingDefinition(room_number=1))
    # Zweitbuchung (wird nur konstruiert, nur das Storno läuft)
    secondary_booking: BookingDefinition = Field(
        default_factory=lambda: BookingDefinition(room_number=2))
    # Belegungsänderungen am Ende, in dieser Reihenfolge
    occupancy_changes: list[int] = Field(
        default_factory=lambda: [0, 3],
        description="Personenzahlen für add_occupants am Ende")

    @model_validator(mode='after')
    def check_room_numbers(self):
        """Alle referenzierten Räume müssen konfiguriert sein."""
        numbers = [c.room_number for c in self.capacities]
        numbers += [self.primary_booking.room_number,
                    self.secondary_booking.room_number]
        for n in numbers:
            if n > self.room_count:
                raise ValueError(
                    f"Raum {n} existiert nicht (nur {self.room_count} Räume)")
        return self


# ─── MUSTER-DEMO ───

class PatternsDemoConfig(BaseModel):
    """Konfiguration der Muster-Demo (Observer bis Decorator)."""
    # Temperatur, die an die Anzeigen verteilt wird
    temperature: float = Field(25.5, description="Temperatur in °C")
    # Eingabe für beide Sortierstrategien
    sort_input: list[int] = Field(
        default_factory=lambda: [10, 5, 2, 8, 7],
        description="Zu sortierende Zahlen")
    # Reihenfolge der Strategien
    sort_strategies: list[str] = Field(
        default_factory=lambda: ["bubble", "quick"], min_length=1,
        description="Sortierstrategien in Ausführungsreihenfolge")
    # Abfrage über die gemeinsame Verbindung
    query: str = Field("SELECT * FROM users")
    # Formen, die die Fabrik erzeugt
    shapes: list[str] = Field(default_factory=lambda: ["CIRCLE", "SQUARE"])
    # Betrag für den Adapter
    payment_amount: float = Field(100.0, ge=0.0)
    # Zutaten in Wickel-Reihenfolge
    coffee_toppings: list[str] = Field(default_factory=lambda: ["milk", "sugar"])

    @field_validator("sort_strategies")
    @classmethod
    def check_strategies(cls, v: list[str]) -> list[str]:
        from patterns.sorting import SORTING_STRATEGIES
        unknown = [s for s in v if s.lower() not in SORTING_STRATEGIES]
        if unknown:
            raise ValueError(f"Unbekannte Sortierstrategie(n): {unknown}")
        return [s.lower() for s in v]

    @field_validator("coffee_toppings")
    @classmethod
    def check_toppings(cls, v: list[str]) -> list[str]:
        from patterns.coffee import TOPPINGS
        unknown = [t for t in v if t.lower() not in TOPPINGS]
        if unknown:
            raise ValueError(f"Unbekannte Zutat(en): {unknown}")
        return [t.lower() for t in v]


# ─── GESAMT-CONFIG ───

class DemoConfig(BaseModel):
    """Gesamtkonfiguration beider Demo-Programme."""
    # Titel für die Konsolenausgabe
    title: str = Field("Entwurfsmuster-Demo")
    # Büro-Demo
    office: OfficeDemoConfig = Field(default_factory=OfficeDemoConfig)
    # Muster-Demo
    patterns: PatternsDemoConfig = Field(default_factory=PatternsDemoConfig)
