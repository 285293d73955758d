from __future__ import annotations

from decimal import Decimal

import pytest

from chef_menu.aggregation import (
    average_price_by_course,
    count_by_course,
    filter_by_course,
    menu_summary,
)
from chef_menu.models import ALL, Course, Dish
from chef_menu.rendering import format_summary


def _dish(idx: int, course: Course, price: str) -> Dish:
    return Dish(id=str(idx), name=f"Dish {idx}", course=course, price=Decimal(price), created_at=idx)


@pytest.fixture
def menu() -> list[Dish]:
    return [
        _dish(1, Course.MAINS, "180"),
        _dish(2, Course.STARTERS, "45"),
        _dish(3, Course.MAINS, "120"),
        _dish(4, Course.STARTERS, "55.50"),
        _dish(5, Course.MAINS, "90"),
    ]


def test_count_by_course_includes_empty_courses(menu):
    assert count_by_course(menu) == {Course.STARTERS: 2, Course.MAINS: 3, Course.DESSERTS: 0}


def test_count_by_course_sums_to_menu_length(menu):
    assert sum(count_by_course(menu).values()) == len(menu)


def test_count_by_course_empty_menu():
    assert count_by_course([]) == {course: 0 for course in Course}


def test_average_price_by_course(menu):
    averages = average_price_by_course(menu)

    assert averages[Course.STARTERS] == Decimal("50.25")
    assert averages[Course.MAINS] == Decimal("130")
    assert averages[Course.DESSERTS] == 0


def test_average_price_empty_menu_is_zero_everywhere():
    assert average_price_by_course([]) == {course: Decimal(0) for course in Course}


def test_filter_all_returns_same_sequence(menu):
    result = filter_by_course(menu, ALL)

    assert result == menu
    assert result is not menu


def test_filter_by_course_preserves_order(menu):
    assert [dish.id for dish in filter_by_course(menu, Course.MAINS)] == ["1", "3", "5"]
    assert [dish.id for dish in filter_by_course(menu, Course.STARTERS)] == ["2", "4"]
    assert filter_by_course(menu, Course.DESSERTS) == []


def test_filter_accepts_course_value(menu):
    assert filter_by_course(menu, "Starters") == filter_by_course(menu, Course.STARTERS)


def test_menu_summary(menu):
    summary = menu_summary(menu)

    assert summary.total == 5
    assert summary.by_course[Course.MAINS] == 3
    assert summary.average_price[Course.STARTERS] == Decimal("50.25")
    assert summary.average_price[Course.DESSERTS] == 0


def test_summary_header_shows_averages_for_stocked_courses(menu):
    header = format_summary(menu_summary(menu)).plain

    assert "Total dishes: 5" in header
    assert " Starters  2 avg R50.25" in header
    assert " Mains  3 avg R130.00" in header
    assert header.endswith(" Desserts  0")
