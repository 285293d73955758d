"""Rich text helpers for dish rows, prices and summaries."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from chef_menu.aggregation import MenuSummary
from chef_menu.constant import COURSE_BADGE_STYLES, CURRENCY_SYMBOL
from chef_menu.models import ALL, CartEntry, Course, Dish, MenuFilter


def format_price(price: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{price:.2f}"


def badge_style(course: Course) -> str:
    """Return a consistent badge style for course tags."""
    return COURSE_BADGE_STYLES.get(course.value, "bold #ffffff on #555555")


def format_dish_label(dish: Dish, selected: bool = False) -> Text:
    """Render a dish row: course badge, name, price and optional selected mark."""
    text = Text()
    text.append(f" {dish.course.value} ", style=badge_style(dish.course))
    text.append(f" {dish.name}", style="bold")
    text.append(f"  {format_price(dish.price)}")
    if selected:
        text.append("  ✓ Selected", style="bold green")
    if dish.description:
        text.append(f"\n      {dish.description}", style="dim")
    return text


def format_dish_detail(dish: Dish) -> Text:
    text = Text()
    text.append(dish.name, style="bold")
    text.append("\n")
    text.append(f"{dish.course.value} • {format_price(dish.price)}")
    if dish.description:
        text.append(f"\n\n{dish.description}")
    return text


def format_filter_bar(current: MenuFilter) -> Text:
    """Render the filter chips, highlighting the active one."""
    text = Text()
    labels = [ALL, *(course.value for course in Course)]
    for idx, label in enumerate(labels):
        if idx > 0:
            text.append(" ")
        active = label == current
        chip = f"[{idx}] {label}"
        text.append(chip, style="bold reverse" if active else "")
    return text


def format_summary(summary: MenuSummary) -> Text:
    text = Text()
    text.append(f"Total dishes: {summary.total}", style="bold")
    for course in Course:
        text.append("   ")
        text.append(f" {course.value} ", style=badge_style(course))
        text.append(f" {summary.by_course[course]}")
        if summary.by_course[course]:
            text.append(f" avg {format_price(summary.average_price[course])}", style="dim")
    return text


def format_cart_bar(count: int, total: Decimal) -> str:
    return f"Cart: {count} items • {format_price(total)}"


def format_cart_line(entry: CartEntry) -> Text:
    text = Text()
    text.append(entry.dish.name, style="bold")
    text.append(f"  {entry.quantity} × {format_price(entry.dish.price)}")
    return text


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of a list that keeps ``selected`` roughly centered."""
    if total <= 0:
        return (0, 0)

    rows = max(1, rows)
    if total <= rows:
        return (0, total)

    if selected is None:
        start = 0
    else:
        half = rows // 2
        start = selected - half
        start = max(0, start)
        start = min(start, total - rows)

    return (start, start + rows)


def format_dish_rows(dishes: list[Dish], cursor: int | None, rows: int, selected_id: str | None = None) -> Text:
    """Render a scrolling window of dish rows with a pointer on ``cursor``."""
    start, end = window_bounds(len(dishes), rows, cursor)

    lines = Text()
    if start > 0:
        lines.append("⋮\n", style="dim")

    for idx in range(start, end):
        if idx > start:
            lines.append("\n")
        pointer = "➤ " if idx == cursor else "  "
        lines.append(pointer)
        lines.append_text(format_dish_label(dishes[idx], selected=dishes[idx].id == selected_id))

    if end < len(dishes):
        lines.append("\n⋮", style="dim")
    return lines
