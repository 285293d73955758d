from __future__ import annotations

import pytest

from chef_menu.access import check_chef_passcode, normalize_customer_name
from chef_menu.constant import DELETE_DISH_MESSAGE
from chef_menu.errors import ValidationError, ValidationReason
from chef_menu.models import Course
from chef_menu.prompts import remove_with_confirmation


def test_chef_passcode_default():
    assert check_chef_passcode("chef123")
    assert not check_chef_passcode("chef1234")
    assert not check_chef_passcode("")


def test_chef_passcode_custom_expected():
    assert check_chef_passcode("open sesame", expected="open sesame")


def test_customer_name_is_trimmed():
    assert normalize_customer_name("  Thandi ") == "Thandi"


def test_blank_customer_name_rejected():
    with pytest.raises(ValidationError) as excinfo:
        normalize_customer_name("   ")
    assert excinfo.value.reason is ValidationReason.EMPTY_CUSTOMER_NAME


class FakeConfirm:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.messages: list[str] = []

    def __call__(self, message, on_result) -> None:
        self.messages.append(message)
        on_result(self.answer)


def test_remove_with_confirmation_removes_on_yes(store):
    soup = store.add("Soup", Course.STARTERS, "45")
    confirm = FakeConfirm(True)
    done = []

    remove_with_confirmation(store, soup.id, confirm, on_done=lambda: done.append(True))

    assert store.list() == []
    assert confirm.messages == [DELETE_DISH_MESSAGE]
    assert done == [True]


def test_remove_with_confirmation_keeps_dish_on_no(store):
    soup = store.add("Soup", Course.STARTERS, "45")
    done = []

    remove_with_confirmation(store, soup.id, FakeConfirm(False), on_done=lambda: done.append(True))

    assert store.list() == [soup]
    assert done == []


def test_remove_waits_for_deferred_answer(store):
    soup = store.add("Soup", Course.STARTERS, "45")
    pending = []

    remove_with_confirmation(store, soup.id, lambda message, on_result: pending.append(on_result))

    assert store.list() == [soup]
    pending[0](True)
    assert store.list() == []
