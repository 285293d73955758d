"""Derived read-only views over a menu snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from chef_menu.models import ALL, Course, Dish, MenuFilter


def count_by_course(menu: Sequence[Dish]) -> dict[Course, int]:
    """Dish count for every course, including courses with no dishes."""
    counts = {course: 0 for course in Course}
    for dish in menu:
        counts[dish.course] += 1
    return counts


def average_price_by_course(menu: Sequence[Dish]) -> dict[Course, Decimal]:
    """Mean price per course; an empty course averages to 0."""
    totals = {course: Decimal(0) for course in Course}
    counts = count_by_course(menu)
    for dish in menu:
        totals[dish.course] += dish.price
    return {
        course: (totals[course] / counts[course]) if counts[course] else Decimal(0)
        for course in Course
    }


def filter_by_course(menu: Sequence[Dish], selector: MenuFilter) -> list[Dish]:
    if selector == ALL:
        return list(menu)
    course = Course(selector)
    return [dish for dish in menu if dish.course is course]


@dataclass(frozen=True)
class MenuSummary:
    """Header numbers for the chef screen."""

    total: int
    by_course: dict[Course, int]
    average_price: dict[Course, Decimal]


def menu_summary(menu: Sequence[Dish]) -> MenuSummary:
    return MenuSummary(
        total=len(menu),
        by_course=count_by_course(menu),
        average_price=average_price_by_course(menu),
    )
