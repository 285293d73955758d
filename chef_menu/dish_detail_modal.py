"""Customer dish detail modal: select, add to cart or close."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from chef_menu.models import Dish
from chef_menu.rendering import format_dish_detail

SELECT = "select"
ADD_TO_CART = "add_to_cart"


class DishDetailModal(ModalScreen[str | None]):
    """Shows one previewed dish. Dismisses with SELECT, ADD_TO_CART or None."""

    BINDINGS = [
        ("s", "choose('select')", "Select"),
        ("enter", "choose('select')", "Select"),
        ("a", "choose('add_to_cart')", "Add to cart"),
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = """
    DishDetailModal {
        align: center middle;
        background: $background 60%;
    }

    #detail-dialog {
        width: 60;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #detail-body {
        color: white;
        margin-bottom: 1;
    }

    #detail-help {
        color: #dddddd;
    }
    """

    def __init__(self, dish: Dish) -> None:
        super().__init__()
        self.dish = dish

    def compose(self) -> ComposeResult:
        with Container(id="detail-dialog"):
            yield Static(format_dish_detail(self.dish), id="detail-body")
            yield Static("S/Enter select. A add to cart. Esc/q close.", id="detail-help")

    def action_choose(self, choice: str) -> None:
        self.dismiss(choice)

    def action_close(self) -> None:
        self.dismiss(None)
