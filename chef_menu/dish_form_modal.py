"""Add-dish form modal for the chef screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from chef_menu.constant import VALIDATION_TITLE
from chef_menu.errors import ValidationError
from chef_menu.menu_store import MenuStore
from chef_menu.models import Course, Dish
from chef_menu.prompt_modals import NoticeModal
from chef_menu.rendering import badge_style

_NAME = "name"
_DESCRIPTION = "description"
_COURSE = "course"
_PRICE = "price"

_FIELD_LABELS: dict[str, str] = {
    _NAME: "Dish name",
    _DESCRIPTION: "Description (optional)",
    _COURSE: "Course",
    _PRICE: "Price (e.g. 120.00)",
}


class DishFormModal(ModalScreen[Dish | None]):
    """Collect name, description, course and price; dismiss with the stored Dish."""

    CSS = """
    DishFormModal {
        align: center middle;
        background: $background 60%;
    }

    #form-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #form-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #form-body {
        margin-bottom: 1;
        color: white;
    }

    #form-help {
        color: #dddddd;
    }
    """

    field_index = reactive(0)
    FIELDS = (_NAME, _DESCRIPTION, _COURSE, _PRICE)
    COURSES = list(Course)

    def __init__(self, store: MenuStore) -> None:
        super().__init__()
        self.store = store
        self.values: dict[str, str] = {_NAME: "", _DESCRIPTION: "", _PRICE: ""}
        self.course_index = self.COURSES.index(Course.MAINS)

    @property
    def course(self) -> Course:
        return self.COURSES[self.course_index]

    @property
    def current_field(self) -> str:
        return self.FIELDS[self.field_index]

    def compose(self) -> ComposeResult:
        with Container(id="form-dialog"):
            yield Static("Add New Dish", id="form-title")
            yield Static(id="form-body")
            yield Static(
                "Tab/↑/↓ move. ←/→ change course. Enter save. Esc cancel.",
                id="form-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        key = event.key
        if key in {"escape", "enter"}:
            event.stop()
            if key == "escape":
                self.dismiss(None)
            else:
                self._submit()
            return

        if key in {"tab", "down"}:
            self.field_index = (self.field_index + 1) % len(self.FIELDS)
        elif key in {"shift+tab", "up"}:
            self.field_index = (self.field_index - 1) % len(self.FIELDS)
        elif self.current_field == _COURSE:
            if key == "right":
                self.course_index = (self.course_index + 1) % len(self.COURSES)
            elif key == "left":
                self.course_index = (self.course_index - 1) % len(self.COURSES)
            else:
                return
        elif key == "backspace":
            field_name = self.current_field
            self.values[field_name] = self.values[field_name][:-1]
        elif event.is_printable and event.character:
            self.values[self.current_field] += event.character
        else:
            return

        event.stop()
        self._refresh_content()

    def _submit(self) -> None:
        try:
            dish = self.store.add(
                name=self.values[_NAME],
                description=self.values[_DESCRIPTION],
                course=self.course,
                price_text=self.values[_PRICE],
            )
        except ValidationError as exc:
            self.app.push_screen(NoticeModal(VALIDATION_TITLE, exc.message))
            return
        self.dismiss(dish)

    def _refresh_content(self) -> None:
        try:
            body_widget = self.query_one("#form-body", Static)
        except NoMatches:
            return
        body = Text(style="white")
        for idx, field_name in enumerate(self.FIELDS):
            if idx > 0:
                body.append("\n")
            active = idx == self.field_index
            pointer = "➤ " if active else "  "
            body.append(f"{pointer}{_FIELD_LABELS[field_name]}: ", style="bold white" if active else "white")
            if field_name == _COURSE:
                for course in self.COURSES:
                    body.append(" ")
                    if course is self.course:
                        body.append(f" {course.value} ", style=badge_style(course))
                    else:
                        body.append(f" {course.value} ", style="dim")
                continue
            body.append(self.values[field_name])
            if active:
                body.append("|")
        body_widget.update(body)

    def watch_field_index(self, _old: int, _new: int) -> None:
        self._refresh_content()
