"""Entry point for the cookie-kingdom Textual app."""

from __future__ import annotations

from cookie_kingdom import config
from cookie_kingdom.cookie_app import CookieKingdomApp
from cookie_kingdom.data import default_catalog
from cookie_kingdom.models import Theme
from cookie_kingdom.state import CatalogSession


def build_app() -> CookieKingdomApp:
    """Wire the configured catalog into a fresh session and app."""
    session = CatalogSession(default_catalog(), theme=Theme(config.DEFAULT_THEME_NAME))
    return CookieKingdomApp(session)


def main() -> None:
    """Run the Textual application."""
    build_app().run()


if __name__ == "__main__":
    main()
