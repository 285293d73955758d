from __future__ import annotations

import json
from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from chef_menu.constant import STORAGE_KEY
from chef_menu.errors import PersistenceError, PersistenceOperation
from chef_menu.menu_store import MAX_PRICE, parse_price
from chef_menu.models import Course, Dish
from chef_menu.persistence import KeyValueStore, MenuPersistence, deserialize_menu, serialize_menu

dish_strategy = st.builds(
    Dish,
    id=st.text(min_size=1, max_size=20),
    name=st.text(min_size=1, max_size=30).filter(lambda s: s.strip() == s and s != ""),
    course=st.sampled_from(list(Course)),
    price=st.decimals(min_value=0, max_value=MAX_PRICE, places=2, allow_nan=False, allow_infinity=False),
    created_at=st.integers(min_value=0, max_value=2**53),
    description=st.text(max_size=60),
)


@settings(max_examples=100)
@given(dishes=st.lists(dish_strategy, max_size=8))
def test_menu_json_round_trip(dishes):
    assert deserialize_menu(serialize_menu(dishes)) == dishes


def test_serialized_shape_matches_storage_format():
    dish = Dish(
        id="1700000000000",
        name="Soup",
        course=Course.STARTERS,
        price=Decimal("45.00"),
        created_at=1700000000000,
        description="Tomato",
    )

    assert json.loads(serialize_menu([dish])) == [
        {
            "id": "1700000000000",
            "name": "Soup",
            "description": "Tomato",
            "course": "Starters",
            "price": 45.0,
            "createdAt": 1700000000000,
        }
    ]


def test_deserialize_accepts_integer_price_and_missing_description():
    raw = '[{"id": "7", "name": "Tart", "course": "Desserts", "price": 60, "createdAt": 7}]'

    (dish,) = deserialize_menu(raw)

    assert dish.price == Decimal(60)
    assert dish.description == ""
    assert dish.course is Course.DESSERTS


@pytest.mark.parametrize(
    "raw",
    [
        "nope",
        "{}",
        "[1, 2]",
        '[{"id": "1", "name": "X", "course": "Mains", "price": -1, "createdAt": 1}]',
        '[{"id": "1", "name": "  ", "course": "Mains", "price": 1, "createdAt": 1}]',
        '[{"id": "1", "name": "X", "course": "Mains", "price": "abc", "createdAt": 1}]',
    ],
)
def test_deserialize_rejects_malformed_payloads(raw):
    with pytest.raises(ValueError):
        deserialize_menu(raw)


def test_key_value_store_round_trip(kv_store):
    assert kv_store.get_item("missing") is None

    kv_store.set_item("k", "one")
    kv_store.set_item("k", "two")

    assert kv_store.get_item("k") == "two"


def test_menu_persistence_uses_fixed_key(kv_store):
    dish = Dish(id="1", name="Soup", course=Course.STARTERS, price=Decimal("45"), created_at=1)
    persistence = MenuPersistence(kv_store)

    persistence.save([dish])

    assert persistence.key == STORAGE_KEY
    assert deserialize_menu(kv_store.get_item(STORAGE_KEY)) == [dish]
    assert persistence.load_raw() == kv_store.get_item(STORAGE_KEY)


def test_unusable_database_path_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = KeyValueStore(str(blocker / "menu.db"))

    with pytest.raises(PersistenceError) as excinfo:
        store.get_item("k")

    assert excinfo.value.operation is PersistenceOperation.READ


@settings(max_examples=200)
@given(price=st.decimals(min_value=0, max_value=MAX_PRICE, places=2, allow_nan=False, allow_infinity=False))
def test_accepted_prices_survive_storage_exactly(price):
    dish = Dish(id="1", name="Soup", course=Course.STARTERS, price=parse_price(str(price)), created_at=1)

    (restored,) = deserialize_menu(serialize_menu([dish]))

    assert restored.price == price


def test_non_finite_price_is_never_written(kv_store):
    persistence = MenuPersistence(kv_store)
    persistence.save([])
    dish = Dish(id="1", name="Soup", course=Course.STARTERS, price=Decimal("Infinity"), created_at=1)

    with pytest.raises(PersistenceError) as excinfo:
        persistence.save([dish])

    assert excinfo.value.operation is PersistenceOperation.WRITE
    assert kv_store.get_item(STORAGE_KEY) == "[]"
