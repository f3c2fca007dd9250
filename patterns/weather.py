"""Wetterstation mit Anzeigegeräten (Observer)."""

from typing import Optional, Protocol

from rich.console import Console

console = Console()


class WeatherObserver(Protocol):
    def update(self, temperature: float) -> None: ...


class MobileDisplay:
    """Anzeige auf dem Mobiltelefon."""

    def __init__(self) -> None:
        self.last_temperature: Optional[float] = None

    def update(self, temperature: float) -> None:
        self.last_temperature = temperature
        console.print(f"Mobilanzeige zeigt Temperatur: {temperature}°C")


class TelevisionDisplay:
    """Anzeige im Fernsehen."""

    def __init__(self) -> None:
        self.last_temperature: Optional[float] = None

    def update(self, temperature: float) -> None:
        self.last_temperature = temperature
        console.print(f"Fernsehanzeige zeigt Temperatur: {temperature}°C")


class WeatherMonitor:
    """Hält den aktuellen Messwert und verteilt ihn an alle Anzeigen."""

    def __init__(self) -> None:
        self._observers: list[WeatherObserver] = []
        self.temperature: Optional[float] = None

    @property
    def observers(self) -> list[WeatherObserver]:
        return list(self._observers)

    def register_observer(self, observer: WeatherObserver) -> None:
        """Meldet eine Anzeige an. Mehrfachanmeldung ist erlaubt."""
        self._observers.append(observer)

    def unregister_observer(self, observer: WeatherObserver) -> bool:
        """Entfernt die erste Anmeldung genau dieses Objekts.

        Gibt True zurück wenn eine Anmeldung entfernt wurde.
        """
        for i, o in enumerate(self._observers):
            if o is observer:
                del self._observers[i]
                return True
        return False

    def set_temperature(self, temperature: float) -> None:
        self.temperature = temperature
        self._notify_observers()

    def _notify_observers(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temperature)
