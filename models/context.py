"""AppContext: hält die prozessweit einmaligen Objekte der Demos.

Statt globaler Singletons wird ein AppContext beim Start erzeugt und
explizit an alle Stellen übergeben, die Raumverwaltung oder
Datenbankverbindung brauchen. Beide werden erst beim ersten Zugriff
angelegt.
"""

import logging
from typing import Optional

from models.registry import RoomRegistry
from patterns.connection import ConnectionHolder, DatabaseConnection

logger = logging.getLogger(__name__)


class AppContext:
    def __init__(self) -> None:
        self._office: Optional[RoomRegistry] = None
        self._connections = ConnectionHolder()

    @property
    def office(self) -> RoomRegistry:
        """Die eine Raumverwaltung dieses Kontexts."""
        if self._office is None:
            logger.info("Raumverwaltung wird angelegt")
            self._office = RoomRegistry()
        return self._office

    def get_connection(self) -> DatabaseConnection:
        """Die eine Datenbankverbindung dieses Kontexts."""
        if not self._connections.is_connected:
            logger.info("Datenbankverbindung wird erstmals angefordert")
        return self._connections.get_instance()
