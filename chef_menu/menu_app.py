"""Main Textual app class."""

from __future__ import annotations

from typing import Callable

from textual.app import App

from chef_menu.access import check_chef_passcode, normalize_customer_name
from chef_menu.cart import CartLedger
from chef_menu.chef_screen import ChefScreen
from chef_menu.config import CHEF_PASSCODE, DB_PATH
from chef_menu.constant import ACCESS_DENIED_MESSAGE, ACCESS_DENIED_TITLE, VALIDATION_TITLE
from chef_menu.customer_screen import CustomerScreen
from chef_menu.errors import ValidationError
from chef_menu.logs import get_logger
from chef_menu.menu_store import MenuStore, OrderedWrites, PersistJob
from chef_menu.persistence import KeyValueStore, MenuPersistence
from chef_menu.prompt_modals import ConfirmModal, NoticeModal, TextEntryModal
from chef_menu.selection import SelectionState

log = get_logger(__name__)


class ChefMenuApp(App):
    """A Textual app for Chef Christoffel's menu: customers browse, the chef edits."""

    TITLE = "Chef Menu"
    SUB_TITLE = "Starters / Mains / Desserts"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, db_path: str = DB_PATH, passcode: str = CHEF_PASSCODE) -> None:
        super().__init__()
        self.passcode = passcode
        self.store = MenuStore(
            MenuPersistence(KeyValueStore(db_path)),
            scheduler=OrderedWrites(self._schedule_persist),
        )
        self.cart = CartLedger()
        self.selection_state = SelectionState()
        self.customer_name: str | None = None

    def on_mount(self) -> None:
        self.store.load()
        log.info("app_mounted", dishes=self.store.total())
        self._prompt_customer_name()

    def _schedule_persist(self, job: PersistJob) -> None:
        self.run_worker(job, thread=True, group="persist", exit_on_error=False)

    def confirm(self, message: str, on_result: Callable[[bool], None]) -> None:
        """Confirmation prompt backed by ConfirmModal."""
        self.push_screen(ConfirmModal(message), on_result)

    def show_notice(self, title: str, message: str) -> None:
        """Notice prompt backed by NoticeModal."""
        self.push_screen(NoticeModal(title, message))

    def _prompt_customer_name(self) -> None:
        self.push_screen(
            TextEntryModal("Welcome, Guest", "Enter your name to view the latest menu"),
            self._on_customer_name,
        )

    def _on_customer_name(self, value: str | None) -> None:
        if value is None:
            self.exit()
            return
        try:
            self.customer_name = normalize_customer_name(value)
        except ValidationError as exc:
            self._prompt_customer_name()
            self.show_notice(VALIDATION_TITLE, exc.message)
            return
        log.info("customer_entered")
        self.push_screen(
            CustomerScreen(
                self.store,
                self.cart,
                self.selection_state,
                self.customer_name,
                on_chef_login=self.open_chef_login,
            )
        )

    def open_chef_login(self) -> None:
        self.push_screen(
            TextEntryModal("Chef Login", "Chef-only access to manage the menu", secret=True),
            self._on_chef_passcode,
        )

    def _on_chef_passcode(self, value: str | None) -> None:
        if value is None:
            return
        if not check_chef_passcode(value, self.passcode):
            log.info("chef_login_denied")
            self.show_notice(ACCESS_DENIED_TITLE, ACCESS_DENIED_MESSAGE)
            return
        log.info("chef_login_granted")
        self.push_screen(ChefScreen(self.store, confirm=self.confirm))
