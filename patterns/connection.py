"""Gemeinsame Datenbankverbindung, die nur einmal aufgebaut wird (Singleton)."""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)
console = Console()


class DatabaseConnection:
    """Simulierte, teure Verbindung. Es wird nichts gespeichert."""

    def __init__(self) -> None:
        console.print("Datenbankverbindung wird aufgebaut...")
        logger.info("DatabaseConnection erzeugt")
        self.executed_queries: list[str] = []

    def execute_query(self, query: str) -> None:
        self.executed_queries.append(query)
        console.print(f"Führe Abfrage aus: {escape(query)}")


class ConnectionHolder:
    """Erzeugt die Verbindung beim ersten Zugriff und liefert danach
    immer dieselbe Instanz.

    Nicht threadsicher; die Demo läuft single-threaded.
    """

    def __init__(self) -> None:
        self._instance: Optional[DatabaseConnection] = None

    @property
    def is_connected(self) -> bool:
        return self._instance is not None

    def get_instance(self) -> DatabaseConnection:
        if self._instance is None:
            self._instance = DatabaseConnection()
        return self._instance
