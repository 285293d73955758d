"""Entry checks for the chef and customer personas.

The chef passcode is a plain string comparison and gives no protection.
"""

from __future__ import annotations

from chef_menu.config import CHEF_PASSCODE
from chef_menu.errors import ValidationError, ValidationReason


def check_chef_passcode(passcode: str, expected: str = CHEF_PASSCODE) -> bool:
    return passcode == expected


def normalize_customer_name(name: str) -> str:
    """Return the trimmed customer name. Raises ValidationError when blank."""
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError(ValidationReason.EMPTY_CUSTOMER_NAME)
    return trimmed
