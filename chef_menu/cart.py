"""Customer cart keyed by dish id."""

from __future__ import annotations

from decimal import Decimal

from chef_menu.models import CartEntry, Dish


class CartLedger:
    """Quantity-keyed dish selection, kept in first-added order."""

    def __init__(self) -> None:
        self._entries: dict[str, CartEntry] = {}

    def add(self, dish: Dish) -> None:
        """Add one of ``dish``; repeat adds increment the quantity."""
        entry = self._entries.get(dish.id)
        if entry is None:
            self._entries[dish.id] = CartEntry(dish=dish)
            return
        entry.quantity += 1

    def remove(self, dish_id: str) -> None:
        """Drop the whole entry, whatever its quantity."""
        self._entries.pop(dish_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> list[CartEntry]:
        return list(self._entries.values())

    def total_count(self) -> int:
        return sum(entry.quantity for entry in self._entries.values())

    def total_price(self) -> Decimal:
        return sum((entry.line_total for entry in self._entries.values()), Decimal(0))

    def __len__(self) -> int:
        return len(self._entries)
