"""Editable static values: storage key, course styling and user-facing messages."""

from __future__ import annotations

STORAGE_KEY = "@chef_menu_items"

CURRENCY_SYMBOL = "R"

# Keyed by the stored course value.
COURSE_BADGE_STYLES: dict[str, str] = {
    "Starters": "bold #1f1300 on #ffb86b",
    "Mains": "bold #ffffff on #2f6db5",
    "Desserts": "bold #2b0019 on #ff8acb",
}

COURSE_SHORTCUTS: dict[str, str] = {
    "0": "All",
    "1": "Starters",
    "2": "Mains",
    "3": "Desserts",
}

VALIDATION_TITLE = "Validation"
EMPTY_NAME_MESSAGE = "Please enter a dish name."
INVALID_PRICE_MESSAGE = "Please enter a valid non-negative price."
EMPTY_CUSTOMER_NAME_MESSAGE = "Please enter your name."

ACCESS_DENIED_TITLE = "Access denied"
ACCESS_DENIED_MESSAGE = "Incorrect passcode."

DELETE_DISH_MESSAGE = "Are you sure you want to delete this dish?"

EMPTY_CUSTOMER_MENU_TEXT = "No dishes yet. Come back soon."
EMPTY_CHEF_MENU_TEXT = "No dishes yet. Press A to add the first dish."
EMPTY_CART_TEXT = "Cart is empty"
