"""Small modal dialogs: confirmation, notices and single-line text entry."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

_DIALOG_CSS = """
    {name} {{
        align: center middle;
        background: $background 60%;
    }}

    .dialog {{
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }}

    .dialog-title {{
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }}

    .dialog-body {{
        color: white;
        margin-bottom: 1;
    }}

    .dialog-error {{
        color: #ffb3b3;
        margin-bottom: 1;
    }}

    .dialog-help {{
        color: #dddddd;
    }}
"""


class ConfirmModal(ModalScreen[bool]):
    """Yes/no question. Dismisses with True only on an explicit yes."""

    BINDINGS = [
        ("y", "answer(True)", "Yes"),
        ("enter", "answer(True)", "Yes"),
        ("n", "answer(False)", "No"),
        ("escape", "answer(False)", "No"),
        ("q", "answer(False)", "No"),
    ]

    CSS = _DIALOG_CSS.format(name="ConfirmModal")

    def __init__(self, message: str, title: str = "Please confirm") -> None:
        super().__init__()
        self.title_text = title
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(classes="dialog"):
            yield Static(self.title_text, classes="dialog-title")
            yield Static(self.message, classes="dialog-body", id="confirm-message")
            yield Static("Y/Enter confirm. N/Esc cancel.", classes="dialog-help")

    def action_answer(self, confirmed: bool) -> None:
        self.dismiss(confirmed)


class NoticeModal(ModalScreen[None]):
    """Dismissable notice with a title and message."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "Close"),
        ("q", "close", "Close"),
    ]

    CSS = _DIALOG_CSS.format(name="NoticeModal")

    def __init__(self, title: str, message: str) -> None:
        super().__init__()
        self.title_text = title
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(classes="dialog"):
            yield Static(self.title_text, classes="dialog-title", id="notice-title")
            yield Static(self.message, classes="dialog-body", id="notice-message")
            yield Static("Enter/Esc to close", classes="dialog-help")

    def action_close(self) -> None:
        self.dismiss()


class TextEntryModal(ModalScreen[str | None]):
    """Prompt for one line of text. Dismisses with the raw text, or None on cancel."""

    CSS = _DIALOG_CSS.format(name="TextEntryModal") + """
    #entry-value {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }
    """

    def __init__(self, title: str, prompt: str, secret: bool = False, max_length: int = 40) -> None:
        super().__init__()
        self.title_text = title
        self.prompt = prompt
        self.secret = secret
        self.max_length = max_length
        self.value = ""

    def compose(self) -> ComposeResult:
        with Container(classes="dialog"):
            yield Static(self.title_text, classes="dialog-title")
            yield Static(self.prompt, classes="dialog-body")
            yield Static(id="entry-value")
            yield Static("Enter confirm. Backspace delete. Esc cancel.", classes="dialog-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key == "escape":
            self.dismiss(None)
            event.stop()
            return

        if event.key == "enter":
            self.dismiss(self.value)
            event.stop()
            return

        if event.key == "backspace":
            if self.value:
                self.value = self.value[:-1]
                self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            if len(self.value) < self.max_length:
                self.value += event.character
            self._refresh_content()
            event.stop()

    def _refresh_content(self) -> None:
        shown = "•" * len(self.value) if self.secret else self.value
        self.query_one("#entry-value", Static).update(f"{shown}|")
