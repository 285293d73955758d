"""Domain models for chef-menu."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Literal


class Course(str, Enum):
    """Fixed menu course. Values are the strings written to storage."""

    STARTERS = "Starters"
    MAINS = "Mains"
    DESSERTS = "Desserts"


ALL = "All"

MenuFilter = Course | Literal["All"]

FILTER_CYCLE: list[MenuFilter] = [ALL, Course.STARTERS, Course.MAINS, Course.DESSERTS]


def parse_filter(value: str) -> MenuFilter:
    """Resolve a filter label to ``ALL`` or a Course."""
    if value == ALL:
        return ALL
    return Course(value)


@dataclass(frozen=True)
class Dish:
    """A menu item created by the chef."""

    id: str
    name: str
    course: Course
    price: Decimal
    created_at: int
    description: str = ""

    def to_record(self) -> dict[str, Any]:
        """Storage shape: ``{id, name, description, course, price, createdAt}``."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "course": self.course.value,
            "price": float(self.price),
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Dish:
        """Build a Dish from a stored record. Raises KeyError/ValueError/TypeError on bad shape."""
        price = Decimal(str(record["price"]))
        if not price.is_finite() or price < 0:
            raise ValueError(f"invalid stored price {record['price']!r}")
        name = str(record["name"]).strip()
        if not name:
            raise ValueError("stored dish has an empty name")
        return cls(
            id=str(record["id"]),
            name=name,
            course=Course(record["course"]),
            price=price,
            created_at=int(record["createdAt"]),
            description=str(record.get("description") or ""),
        )


@dataclass
class CartEntry:
    """A dish in the cart with its quantity."""

    dish: Dish
    quantity: int = 1

    @property
    def line_total(self) -> Decimal:
        return self.dish.price * self.quantity
