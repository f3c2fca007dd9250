"""Austauschbare Sortierverfahren (Strategy).

Beide Strategien sortieren aufsteigend und arbeiten in-place auf der
übergebenen Liste.
"""

import logging
from typing import Protocol

from rich.console import Console

logger = logging.getLogger(__name__)
console = Console()


class SortingStrategy(Protocol):
    name: str

    def sort(self, array: list[int]) -> None: ...


class BubbleSortStrategy:
    """Bubble Sort: n-1 volle Durchläufe, stabil, ohne vorzeitigen Abbruch."""

    name = "bubble"

    def sort(self, array: list[int]) -> None:
        console.print("Sortiere mit Bubble Sort")
        n = len(array)
        for i in range(n - 1):
            for j in range(n - i - 1):
                if array[j] > array[j + 1]:
                    array[j], array[j + 1] = array[j + 1], array[j]


class QuickSortStrategy:
    """Quick Sort mit dem letzten Element als Pivot (nicht stabil)."""

    name = "quick"

    def sort(self, array: list[int]) -> None:
        console.print("Sortiere mit Quick Sort")
        self._quick_sort(array, 0, len(array) - 1)

    def _quick_sort(self, array: list[int], low: int, high: int) -> None:
        # Rekursion nur in die kleinere Hälfte: Tiefe bleibt O(log n),
        # auch bei bereits sortierter Eingabe.
        while low < high:
            pi = self._partition(array, low, high)
            if pi - low < high - pi:
                self._quick_sort(array, low, pi - 1)
                low = pi + 1
            else:
                self._quick_sort(array, pi + 1, high)
                high = pi - 1

    @staticmethod
    def _partition(array: list[int], low: int, high: int) -> int:
        pivot = array[high]
        i = low - 1
        for j in range(low, high):
            if array[j] <= pivot:
                i += 1
                array[i], array[j] = array[j], array[i]
        array[i + 1], array[high] = array[high], array[i + 1]
        return i + 1


SORTING_STRATEGIES: dict[str, type] = {
    BubbleSortStrategy.name: BubbleSortStrategy,
    QuickSortStrategy.name: QuickSortStrategy,
}


def get_strategy(name: str) -> SortingStrategy:
    """Erzeugt eine Strategie über ihren Namen ("bubble", "quick")."""
    try:
        return SORTING_STRATEGIES[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unbekannte Sortierstrategie '{name}'. "
            f"Verfügbar: {sorted(SORTING_STRATEGIES)}"
        ) from None


class SorterContext:
    """Sortiert mit der gerade gesetzten Strategie.

    Eine Strategie ist schon beim Erzeugen Pflicht, damit sort_array()
    nie ohne Verfahren aufgerufen werden kann.
    """

    def __init__(self, strategy: SortingStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> SortingStrategy:
        return self._strategy

    def set_sorting_strategy(self, strategy: SortingStrategy) -> None:
        logger.debug(f"Sortierstrategie: {self._strategy.name} → {strategy.name}")
        self._strategy = strategy

    def sort_array(self, array: list[int]) -> None:
        self._strategy.sort(array)
