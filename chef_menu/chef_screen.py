"""Chef management screen: summary, add and delete."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import Key
from textual.screen import Screen
from textual.widgets import Header, Static

from chef_menu.aggregation import menu_summary
from chef_menu.constant import EMPTY_CHEF_MENU_TEXT
from chef_menu.dish_form_modal import DishFormModal
from chef_menu.menu_store import MenuStore
from chef_menu.models import Dish
from chef_menu.prompts import ConfirmPrompt, remove_with_confirmation
from chef_menu.rendering import format_dish_rows, format_summary


class ChefScreen(Screen):
    """Add or remove dishes. Esc or H returns to the customer screen."""

    CSS = """
    #chef-pane {
        border: round $secondary;
        padding: 1;
        height: 1fr;
    }

    #chef-title {
        text-style: bold;
    }

    #chef-summary {
        margin: 1 0;
    }

    #chef-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("escape", "go_home", "Home"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
    ]

    def __init__(self, store: MenuStore, confirm: ConfirmPrompt) -> None:
        super().__init__()
        self.store = store
        self.confirm = confirm
        self.cursor_index: int | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="chef-pane"):
            yield Static("Chef Management • Add or remove dishes", id="chef-title")
            yield Static(id="chef-summary")
            yield Static(id="chef-list")
            yield Static("A add. D delete. J/K move. Esc/H home.")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        key = event.character.lower()
        if key == "a":
            self.app.push_screen(DishFormModal(self.store), self._on_dish_added)
        elif key == "d":
            self._delete_selected()
        elif key == "j":
            self.action_move_cursor(1)
        elif key == "k":
            self.action_move_cursor(-1)
        elif key == "h":
            self.action_go_home()
        else:
            return
        event.stop()

    def action_go_home(self) -> None:
        self.app.pop_screen()

    def action_move_cursor(self, delta: int) -> None:
        total = self.store.total()
        if not total:
            return
        if self.cursor_index is None:
            self.cursor_index = 0 if delta > 0 else total - 1
        else:
            self.cursor_index = (self.cursor_index + delta) % total
        self._refresh_list()

    def _selected_dish(self) -> Dish | None:
        dishes = self.store.list()
        if self.cursor_index is None or not (0 <= self.cursor_index < len(dishes)):
            return None
        return dishes[self.cursor_index]

    def _delete_selected(self) -> None:
        dish = self._selected_dish()
        if dish is None:
            return
        remove_with_confirmation(self.store, dish.id, self.confirm, on_done=self._refresh_all)

    def _on_dish_added(self, dish: Dish | None) -> None:
        if dish is not None:
            self.cursor_index = 0
        self._refresh_all()

    def _refresh_all(self) -> None:
        dishes = self.store.list()
        self.query_one("#chef-summary", Static).update(format_summary(menu_summary(dishes)))
        self._refresh_list()

    def _refresh_list(self) -> None:
        widget = self.query_one("#chef-list", Static)
        dishes = self.store.list()
        if not dishes:
            self.cursor_index = None
            widget.update(EMPTY_CHEF_MENU_TEXT)
            return
        if self.cursor_index is not None and self.cursor_index >= len(dishes):
            self.cursor_index = len(dishes) - 1
        rows = widget.size.height if widget.size.height > 0 else 8
        widget.update(format_dish_rows(dishes, self.cursor_index, rows))
