"""Confirmation and notice collaborators used by the screens."""

from __future__ import annotations

from typing import Callable, Protocol

from chef_menu.constant import DELETE_DISH_MESSAGE
from chef_menu.menu_store import MenuStore


class ConfirmPrompt(Protocol):
    def __call__(self, message: str, on_result: Callable[[bool], None]) -> None: ...


class NoticePrompt(Protocol):
    def __call__(self, title: str, message: str) -> None: ...


def remove_with_confirmation(
    store: MenuStore,
    dish_id: str,
    confirm: ConfirmPrompt,
    on_done: Callable[[], None] | None = None,
) -> None:
    """Ask before deleting; the dish is removed only on a positive answer."""

    def handle(confirmed: bool) -> None:
        if not confirmed:
            return
        store.remove(dish_id)
        if on_done is not None:
            on_done()

    confirm(DELETE_DISH_MESSAGE, handle)
