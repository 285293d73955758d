"""Runtime configuration defaults for persistence, logging and chef access."""

from __future__ import annotations

import os

_DB_PATH_ENV = "CHEF_MENU_DB_PATH"
_LOG_PATH_ENV = "CHEF_MENU_LOG_PATH"
_PASSCODE_ENV = "CHEF_MENU_PASSCODE"


def _env_or_default(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


DB_PATH = _env_or_default(_DB_PATH_ENV, "data/chef_menu.db")
LOG_PATH = _env_or_default(_LOG_PATH_ENV, "/tmp/chef-menu.log")

# Static passcode, not a security boundary.
CHEF_PASSCODE = _env_or_default(_PASSCODE_ENV, "chef123")
