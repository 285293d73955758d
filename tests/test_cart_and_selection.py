from __future__ import annotations

from decimal import Decimal

from chef_menu.cart import CartLedger
from chef_menu.models import Course, Dish
from chef_menu.selection import SelectionState

SOUP = Dish(id="1", name="Soup", course=Course.STARTERS, price=Decimal("45.00"), created_at=1)
STEAK = Dish(id="2", name="Steak", course=Course.MAINS, price=Decimal("180.00"), created_at=2)


def test_adding_same_dish_twice_increments_quantity():
    cart = CartLedger()
    cart.add(SOUP)
    cart.add(SOUP)

    assert len(cart) == 1
    assert cart.entries()[0].quantity == 2
    assert cart.total_count() == 2
    assert cart.total_price() == 2 * SOUP.price


def test_totals_over_several_dishes():
    cart = CartLedger()
    cart.add(SOUP)
    cart.add(STEAK)
    cart.add(STEAK)

    assert cart.total_count() == 3
    assert cart.total_price() == Decimal("405.00")
    assert [entry.dish for entry in cart.entries()] == [SOUP, STEAK]


def test_remove_drops_whole_entry_regardless_of_quantity():
    cart = CartLedger()
    cart.add(STEAK)
    cart.add(STEAK)
    cart.add(SOUP)

    cart.remove(STEAK.id)

    assert [entry.dish for entry in cart.entries()] == [SOUP]
    assert cart.total_count() == 1


def test_remove_unknown_id_is_noop():
    cart = CartLedger()
    cart.add(SOUP)

    cart.remove("missing")

    assert cart.total_count() == 1


def test_clear_empties_cart():
    cart = CartLedger()
    cart.add(SOUP)
    cart.add(STEAK)

    cart.clear()

    assert cart.entries() == []
    assert cart.total_count() == 0
    assert cart.total_price() == 0


def test_closing_preview_keeps_confirmed_selection():
    selection = SelectionState()
    selection.preview(SOUP)
    selection.confirm()

    selection.preview(STEAK)
    selection.close_preview()

    assert selection.previewed is None
    assert selection.confirmed_id == SOUP.id
    assert selection.is_selected(SOUP.id)


def test_confirming_replaces_previous_selection():
    selection = SelectionState()
    selection.preview(SOUP)
    selection.confirm()
    selection.preview(STEAK)
    selection.confirm()

    assert selection.confirmed_id == STEAK.id
    assert not selection.is_selected(SOUP.id)
    assert selection.previewed is None


def test_confirm_without_preview_is_noop():
    selection = SelectionState(confirmed_id=SOUP.id)
    selection.confirm()

    assert selection.confirmed_id == SOUP.id
