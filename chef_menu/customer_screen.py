"""Customer-facing browse screen: filter, preview, select and cart."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import Key
from textual.screen import Screen
from textual.widgets import Header, Static

from chef_menu.aggregation import filter_by_course
from chef_menu.cart import CartLedger
from chef_menu.cart_modal import CartModal
from chef_menu.constant import COURSE_SHORTCUTS, EMPTY_CUSTOMER_MENU_TEXT
from chef_menu.dish_detail_modal import ADD_TO_CART, SELECT, DishDetailModal
from chef_menu.logs import get_logger
from chef_menu.menu_store import MenuStore
from chef_menu.models import ALL, FILTER_CYCLE, Dish, MenuFilter, parse_filter
from chef_menu.rendering import format_cart_bar, format_dish_rows, format_filter_bar
from chef_menu.selection import SelectionState

log = get_logger(__name__)


class CustomerScreen(Screen):
    """Browse the latest menu as a guest."""

    CSS = """
    #customer-pane {
        border: round $primary;
        padding: 1;
        height: 1fr;
    }

    #customer-greeting {
        text-style: bold;
    }

    #filter-bar {
        margin: 1 0;
    }

    #dish-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 3;
    }
    """

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "open_detail", "Details"),
    ]

    def __init__(
        self,
        store: MenuStore,
        cart: CartLedger,
        selection_state: SelectionState,
        customer_name: str,
        on_chef_login: Callable[[], None],
    ) -> None:
        super().__init__()
        self.store = store
        self.cart = cart
        self.selection_state = selection_state
        self.customer_name = customer_name
        self.on_chef_login = on_chef_login
        self.menu_filter: MenuFilter = ALL
        self.cursor_index: int | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="customer-pane"):
            yield Static(Text(f"Chef Christoffel • Welcome, {self.customer_name}"), id="customer-greeting")
            yield Static("Latest menu, curated daily")
            yield Static(id="filter-bar")
            yield Static(id="dish-list")
            yield Static(id="cart-bar")
            yield Static("0-3/F filter. J/K move. Enter details. B cart. C chef. Ctrl+Q quit.")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_screen_resume(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key in COURSE_SHORTCUTS:
            self.set_filter(parse_filter(COURSE_SHORTCUTS[key]))
        elif key == "f":
            position = FILTER_CYCLE.index(self.menu_filter)
            self.set_filter(FILTER_CYCLE[(position + 1) % len(FILTER_CYCLE)])
        elif key == "j":
            self.action_move_cursor(1)
        elif key == "k":
            self.action_move_cursor(-1)
        elif key == "b":
            self.app.push_screen(CartModal(self.cart), lambda _: self._refresh_cart_bar())
        elif key == "c":
            self.on_chef_login()
        else:
            return
        event.stop()

    def visible_dishes(self) -> list[Dish]:
        return filter_by_course(self.store.list(), self.menu_filter)

    def set_filter(self, menu_filter: MenuFilter) -> None:
        self.menu_filter = menu_filter
        self.cursor_index = None
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        dishes = self.visible_dishes()
        if not dishes:
            return
        if self.cursor_index is None:
            self.cursor_index = 0 if delta > 0 else len(dishes) - 1
        else:
            self.cursor_index = (self.cursor_index + delta) % len(dishes)
        self._refresh_dishes()

    def action_open_detail(self) -> None:
        dishes = self.visible_dishes()
        if self.cursor_index is None or not (0 <= self.cursor_index < len(dishes)):
            return
        dish = dishes[self.cursor_index]
        self.selection_state.preview(dish)
        self.app.push_screen(DishDetailModal(dish), self._on_detail_closed)

    def _on_detail_closed(self, choice: str | None) -> None:
        previewed = self.selection_state.previewed
        if choice == SELECT:
            self.selection_state.confirm()
            log.info("dish_selected", dish_id=self.selection_state.confirmed_id)
        else:
            if choice == ADD_TO_CART and previewed is not None:
                self.cart.add(previewed)
            self.selection_state.close_preview()
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_filter_bar()
        self._refresh_dishes()
        self._refresh_cart_bar()

    def _refresh_filter_bar(self) -> None:
        self.query_one("#filter-bar", Static).update(format_filter_bar(self.menu_filter))

    def _refresh_dishes(self) -> None:
        widget = self.query_one("#dish-list", Static)
        dishes = self.visible_dishes()
        if not dishes:
            self.cursor_index = None
            widget.update(EMPTY_CUSTOMER_MENU_TEXT)
            return
        if self.cursor_index is not None and self.cursor_index >= len(dishes):
            self.cursor_index = len(dishes) - 1
        rows = widget.size.height if widget.size.height > 0 else 8
        widget.update(format_dish_rows(dishes, self.cursor_index, rows, self.selection_state.confirmed_id))

    def _refresh_cart_bar(self) -> None:
        self.query_one("#cart-bar", Static).update(
            format_cart_bar(self.cart.total_count(), self.cart.total_price())
        )
