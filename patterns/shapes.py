"""Formen-Fabrik: erzeugt Formen über einen Namen (Factory)."""

from typing import Optional, Protocol

from rich.console import Console

console = Console()


class Shape(Protocol):
    def draw(self) -> None: ...


class CircleShape:
    def draw(self) -> None:
        console.print("Zeichne einen Kreis")


class SquareShape:
    def draw(self) -> None:
        console.print("Zeichne ein Quadrat")


class ShapeFactory:
    """Bildet Namen (Groß-/Kleinschreibung egal) auf Formen ab."""

    _SHAPES: dict[str, type] = {
        "circle": CircleShape,
        "square": SquareShape,
    }

    def create_shape(self, shape_type: Optional[str]) -> Optional[Shape]:
        """Gibt None bei unbekanntem oder fehlendem Namen zurück."""
        if shape_type is None:
            return None
        cls = self._SHAPES.get(shape_type.lower())
        return cls() if cls is not None else None

    @classmethod
    def known_kinds(cls) -> list[str]:
        return sorted(cls._SHAPES)
