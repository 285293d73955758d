"""Cart modal for removing entries or clearing the cart."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from chef_menu.cart import CartLedger
from chef_menu.constant import EMPTY_CART_TEXT
from chef_menu.rendering import format_cart_bar, format_cart_line


class CartModal(ModalScreen[None]):
    """Centered modal listing cart entries with remove and clear actions."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("up", "move_cursor(-1)", "Previous"),
        ("r", "remove_current", "Remove"),
        ("x", "clear", "Clear"),
    ]

    CSS = """
    CartModal {
        align: center middle;
        background: $background 60%;
    }

    #cart-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #cart-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #cart-body {
        margin-bottom: 1;
        color: white;
    }

    #cart-help {
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, cart: CartLedger) -> None:
        super().__init__()
        self.cart = cart

    def compose(self) -> ComposeResult:
        with Container(id="cart-dialog"):
            yield Static("Your cart", id="cart-title")
            yield Static(id="cart-body")
            yield Static("J/K/↑/↓ move. R remove. X clear. Esc/q close.", id="cart-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss()

    def action_move_cursor(self, delta: int) -> None:
        entries = self.cart.entries()
        if not entries:
            return
        self.cursor_index = (self.cursor_index + delta) % len(entries)
        self._refresh_content()

    def action_remove_current(self) -> None:
        entries = self.cart.entries()
        if not entries:
            return
        self.cart.remove(entries[self.cursor_index].dish.id)
        self._refresh_content()

    def action_clear(self) -> None:
        self.cart.clear()
        self.dismiss()

    def _refresh_content(self) -> None:
        body = self.query_one("#cart-body", Static)
        entries = self.cart.entries()
        if not entries:
            self.cursor_index = 0
            body.update(EMPTY_CART_TEXT)
            return
        if self.cursor_index >= len(entries):
            self.cursor_index = len(entries) - 1

        content = Text(style="white")
        for idx, entry in enumerate(entries):
            if idx > 0:
                content.append("\n")
            content.append("➤ " if idx == self.cursor_index else "  ")
            content.append_text(format_cart_line(entry))
        content.append("\n\n")
        content.append(format_cart_bar(self.cart.total_count(), self.cart.total_price()), style="bold")
        body.update(content)
