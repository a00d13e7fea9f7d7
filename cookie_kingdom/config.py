"""Runtime configuration defaults for catalog loading, theme and debug logging."""

from __future__ import annotations

import os

_CATALOG_PATH_ENV = "COOKIE_KINGDOM_CATALOG"
_DEBUG_LOG_ENV = "COOKIE_KINGDOM_DEBUG_LOG"
_THEME_ENV = "COOKIE_KINGDOM_THEME"

# None means the embedded seed records in cookie_kingdom.constant.
CATALOG_PATH: str | None = os.environ.get(_CATALOG_PATH_ENV) or None

# An empty override disables the debug trace.
DEBUG_LOG_PATH: str | None = os.environ.get(_DEBUG_LOG_ENV, "/tmp/cookie-kingdom-debug.log") or None

DEFAULT_THEME_NAME = os.environ.get(_THEME_ENV, "dark").strip().lower()
if DEFAULT_THEME_NAME not in {"dark", "light"}:
    DEFAULT_THEME_NAME = "dark"

TEXTUAL_THEME_BY_THEME: dict[str, str] = {
    "dark": "textual-dark",
    "light": "textual-light",
}
