"""In-memory menu mirrored to the key-value store after every mutation."""

from __future__ import annotations

import threading
import time
from decimal import Decimal, InvalidOperation
from typing import Callable

from chef_menu.errors import PersistenceError, ValidationError, ValidationReason
from chef_menu.logs import get_logger
from chef_menu.models import Course, Dish
from chef_menu.persistence import MenuPersistence, deserialize_menu

log = get_logger(__name__)

PersistJob = Callable[[], None]
Scheduler = Callable[[PersistJob], None]

MAX_PRICE = Decimal("999999.99")
_CENTS = Decimal("0.01")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def _run_inline(job: PersistJob) -> None:
    job()


def parse_price(price_text: str) -> Decimal:
    """Parse user price text into an amount between 0 and MAX_PRICE with at most two decimals."""
    try:
        price = Decimal(price_text.strip())
    except InvalidOperation as exc:
        raise ValidationError(ValidationReason.INVALID_PRICE) from exc
    if not price.is_finite() or price < 0 or price > MAX_PRICE:
        raise ValidationError(ValidationReason.INVALID_PRICE)
    if price != price.quantize(_CENTS):
        raise ValidationError(ValidationReason.INVALID_PRICE)
    # "-0" parses as negative zero.
    return abs(price)


class MenuStore:
    """Ordered dish collection, newest first.

    Lifecycle is construct -> ``load()`` -> mutate. Every mutation updates memory first and
    then hands a full snapshot write to ``scheduler``. Write failures are logged and dropped;
    memory stays authoritative for the session.
    """

    def __init__(
        self,
        persistence: MenuPersistence,
        clock: Callable[[], int] = _now_ms,
        scheduler: Scheduler = _run_inline,
    ) -> None:
        self.persistence = persistence
        self.clock = clock
        self.scheduler = scheduler
        self._dishes: list[Dish] = []
        self._last_created_at = 0

    def load(self) -> None:
        """Replace memory with the persisted menu, or an empty menu on any failure."""
        self._dishes = []
        try:
            self.persistence.bootstrap()
            raw = self.persistence.load_raw()
        except PersistenceError as exc:
            log.warning("menu_load_failed", error=str(exc))
            return

        if raw is None:
            log.info("menu_load_empty", reason="missing_key")
            return
        if not raw.strip():
            log.warning("menu_load_failed", error="empty payload")
            return

        try:
            dishes = deserialize_menu(raw)
        except ValueError as exc:
            log.warning("menu_load_failed", error=str(exc))
            return

        self._dishes = dishes
        self._last_created_at = max((dish.created_at for dish in dishes), default=0)
        log.info("menu_loaded", count=len(dishes))

    def list(self) -> list[Dish]:
        return list(self._dishes)

    def total(self) -> int:
        return len(self._dishes)

    def get(self, dish_id: str) -> Dish | None:
        for dish in self._dishes:
            if dish.id == dish_id:
                return dish
        return None

    def add(self, name: str, course: Course, price_text: str, description: str | None = None) -> Dish:
        """Validate input, prepend a new dish and persist. Raises ValidationError."""
        trimmed = name.strip()
        if not trimmed:
            raise ValidationError(ValidationReason.EMPTY_NAME)
        price = parse_price(price_text)

        created_at = self._next_created_at()
        dish = Dish(
            id=self._unique_id(created_at),
            name=trimmed,
            course=Course(course),
            price=price,
            created_at=created_at,
            description=(description or "").strip(),
        )
        self._dishes = [dish, *self._dishes]
        log.info("dish_added", dish_id=dish.id, course=dish.course.value)
        self._persist()
        return dish

    def remove(self, dish_id: str) -> None:
        """Drop the dish with ``dish_id``. Unknown ids leave the menu unchanged."""
        remaining = [dish for dish in self._dishes if dish.id != dish_id]
        if len(remaining) != len(self._dishes):
            log.info("dish_removed", dish_id=dish_id)
        self._dishes = remaining
        self._persist()

    def update(self, dish: Dish) -> None:
        """Replace the dish with the same id, keeping its position."""
        self._dishes = [dish if existing.id == dish.id else existing for existing in self._dishes]
        self._persist()

    def _next_created_at(self) -> int:
        created_at = max(self.clock(), self._last_created_at + 1)
        self._last_created_at = created_at
        return created_at

    def _unique_id(self, created_at: int) -> str:
        taken = {dish.id for dish in self._dishes}
        candidate = created_at
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def _persist(self) -> None:
        snapshot = list(self._dishes)

        def write() -> None:
            try:
                self.persistence.save(snapshot)
            except PersistenceError as exc:
                log.warning("menu_save_failed", error=str(exc), count=len(snapshot))

        self.scheduler(write)


class OrderedWrites:
    """Scheduler wrapper that keeps an older snapshot from overwriting a newer one.

    Wrapped jobs may run on worker threads in any order. Each one takes the lock and is
    skipped once a later job has already been written.
    """

    def __init__(self, submit: Scheduler) -> None:
        self.submit = submit
        self._lock = threading.Lock()
        self._issued = 0
        self._written = 0

    def __call__(self, job: PersistJob) -> None:
        self._issued += 1
        sequence = self._issued

        def run() -> None:
            with self._lock:
                if sequence < self._written:
                    log.info("menu_save_skipped", sequence=sequence, written=self._written)
                    return
                job()
                self._written = sequence

        self.submit(run)
