from config.schema import (
    BookingDefinition,
    DemoConfig,
    OfficeDemoConfig,
    PatternsDemoConfig,
    RoomCapacity,
)


# Personenzahl, ab der ein Raum als belegt gilt
OCCUPANCY_THRESHOLD = 2

# Personenzahl, mit der eine Buchung den Raum belegt
BOOKING_OCCUPANTS = 2


def default_office_config() -> OfficeDemoConfig:
    """Standard-Büro: 3 Räume, Raum 1 = 10 Plätze, Raum 2 = 8 Plätze.

    Ablauf:
    1. Raum 1 buchen (09:00, 60 min)
    2. Raum 1 stornieren
    3. Raum 1 erneut buchen
    4. Raum 2: Buchung + Storno konstruieren, nur Storno ausführen
    5. Raum 1: add_occupants(0), dann add_occupants(3)
    """
    return OfficeDemoConfig(
        room_count=3,
        capacities=[
            RoomCapacity(room_number=1, max_capacity=10),
            RoomCapacity(room_number=2, max_capacity=8),
        ],
        primary_booking=BookingDefinition(
            room_number=1, start_time="09:00", duration_minutes=60),
        secondary_booking=BookingDefinition(
            room_number=2, start_time="09:00", duration_minutes=60),
        occupancy_changes=[0, 3],
    )


def default_patterns_config() -> PatternsDemoConfig:
    """Standard-Werte der Muster-Demo."""
    return PatternsDemoConfig(
        temperature=25.5,
        sort_input=[10, 5, 2, 8, 7],
        sort_strategies=["bubble", "quick"],
        query="SELECT * FROM users",
        shapes=["CIRCLE", "SQUARE"],
        payment_amount=100.0,
        coffee_toppings=["milk", "sugar"],
    )


def default_demo_config() -> DemoConfig:
    """Vollständige Default-Config beider Demos."""
    return DemoConfig(
        office=default_office_config(),
        patterns=default_patterns_config(),
    )
