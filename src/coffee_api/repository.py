"""In-memory coffee repository."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from coffee_api.schema import Coffee, Size

logger = logging.getLogger(__name__)

SEED_COFFEES: tuple[Coffee, ...] = (
    Coffee(id=1, name="Caffè Americano", size=Size.GRANDE),
    Coffee(id=2, name="Café Latte", size=Size.VENTI),
    Coffee(id=3, name="Caffè Caramel Macchiato", size=Size.TALL),
)


class CoffeeRepository:
    """Owns the coffee records and hands out ids.

    Records are kept in insertion order. Ids come from a counter that only
    moves forward, so a deleted id is never handed out again. All operations
    take the same lock.

    Args:
        seed: Initial records. ``None`` loads ``SEED_COFFEES``; pass an empty
            iterable to start without data.

    Raises:
        ValueError: If two seed records share an id.
    """

    def __init__(self, seed: Iterable[Coffee] | None = None):
        self._lock = threading.Lock()
        self._coffees: dict[int, Coffee] = {}
        for coffee in SEED_COFFEES if seed is None else seed:
            if coffee.id in self._coffees:
                raise ValueError(f"Duplicate seed coffee id: {coffee.id}")
            self._coffees[coffee.id] = coffee
        self._last_id = max(self._coffees, default=0)

    def find_all(self) -> list[Coffee]:
        with self._lock:
            return list(self._coffees.values())

    def find_one(self, coffee_id: int) -> Coffee | None:
        with self._lock:
            return self._coffees.get(coffee_id)

    def create(self, name: str, size: Size) -> Coffee:
        with self._lock:
            self._last_id += 1
            coffee = Coffee(id=self._last_id, name=name, size=size)
            self._coffees[coffee.id] = coffee
        logger.info("Created coffee %s", coffee.id)
        return coffee

    def update(self, coffee_id: int, name: str, size: Size) -> Coffee | None:
        """Replace name and size of an existing coffee.

        Returns the updated record, or ``None`` if no coffee has that id.
        The record keeps its id and its position in ``find_all``.
        """
        with self._lock:
            if coffee_id not in self._coffees:
                return None
            coffee = Coffee(id=coffee_id, name=name, size=size)
            self._coffees[coffee_id] = coffee
        logger.info("Updated coffee %s", coffee_id)
        return coffee

    def delete(self, coffee_id: int) -> Coffee | None:
        """Remove a coffee and return it, or ``None`` if no coffee has that id."""
        with self._lock:
            coffee = self._coffees.pop(coffee_id, None)
        if coffee is not None:
            logger.info("Deleted coffee %s", coffee_id)
        return coffee

    def __len__(self) -> int:
        with self._lock:
            return len(self._coffees)
