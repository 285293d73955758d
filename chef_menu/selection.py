"""Customer browsing selection: a previewed dish and a separately confirmed dish id."""

from __future__ import annotations

from dataclasses import dataclass

from chef_menu.models import Dish


@dataclass
class SelectionState:
    previewed: Dish | None = None
    confirmed_id: str | None = None

    def preview(self, dish: Dish) -> None:
        self.previewed = dish

    def close_preview(self) -> None:
        """Dismiss the detail view; the confirmed selection is untouched."""
        self.previewed = None

    def confirm(self) -> None:
        """Confirm the previewed dish, replacing any earlier selection."""
        if self.previewed is None:
            return
        self.confirmed_id = self.previewed.id
        self.previewed = None

    def is_selected(self, dish_id: str) -> bool:
        return self.confirmed_id == dish_id
