"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from cookie_kingdom import config
from cookie_kingdom.review_modal import ReviewModal
from cookie_kingdom.rendering import format_cart, format_item_detail, format_item_list, theme_label
from cookie_kingdom.state import CatalogSession


class CookieKingdomApp(App):
    """A Textual app for browsing cookies, filling a cart and posting reviews."""

    TITLE = "Cookie Kingdom"
    SUB_TITLE = "Browse / Cart / Review"

    CSS = """
    Screen {
        layout: vertical;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    #main-layout {
        height: 1fr;
    }

    #list-pane {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }

    #detail-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #cart-pane {
        width: 1fr;
        border: round $primary;
        padding: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")

    BINDINGS = [
        ("up", "move_selection(-1)", "Previous cookie"),
        ("down", "move_selection(1)", "Next cookie"),
        ("enter", "confirm", "Add to cart / finish search"),
        ("backspace", "backspace_search", "Delete search char"),
        ("escape", "cancel_search", "Exit search"),
        ("ctrl+c", "cancel_search", "Exit search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: CatalogSession) -> None:
        super().__init__()
        self.session = session
        self.system_status = ""
        self._debug_log_path = Path(config.DEBUG_LOG_PATH) if config.DEBUG_LOG_PATH else None
        self._log_debug(f"app_init cookies={len(session.catalog)}")

    def _log_debug(self, message: str) -> None:
        if self._debug_log_path is None:
            return
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # The trace is best-effort; the UI keeps running without it.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="search-bar")
        with Horizontal(id="main-layout"):
            with Vertical(id="list-pane"):
                yield Static("Cookies", classes="pane-title")
                yield Static(id="cookie-list")
            with Vertical(id="detail-pane"):
                yield Static(id="cookie-detail")
            with Vertical(id="cart-pane"):
                yield Static("Your Cart", classes="pane-title")
                yield Static(id="cart-list")

    def on_mount(self) -> None:
        self._apply_theme()
        self._log_debug(f"on_mount theme={self.session.theme.value!r}")
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ReviewModal):
            return

        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        if self.input_state == "search":
            self.session.set_search_text(self.session.search_text + event.character)
            self._log_debug(f"search text={self.session.search_text!r} matches={len(self.session.filtered)}")
            self._refresh_all()
            event.stop()
            return

        key = event.character.lower()
        if key == "/":
            self.input_state = "search"
            self.system_status = ""
            self._refresh_search_bar()
            event.stop()
            return

        if key.isdigit() and key != "0":
            self._select_position(int(key))
            event.stop()
            return

        handlers = {
            "j": lambda: self.action_move_selection(1),
            "k": lambda: self.action_move_selection(-1),
            "a": self.action_add_to_cart,
            "w": self.action_write_review,
            "t": self.action_toggle_theme,
            "b": self.action_buy_now,
        }
        handler = handlers.get(key)
        if handler is None:
            return
        handler()
        event.stop()

    def action_move_selection(self, delta: int) -> None:
        if isinstance(self.screen, ReviewModal):
            return
        if not self.session.move_selection(delta):
            return
        self._refresh_all()

    def action_confirm(self) -> None:
        if isinstance(self.screen, ReviewModal):
            return
        if self.input_state == "search":
            self.input_state = "normal"
            self._refresh_search_bar()
            return
        self.action_add_to_cart()

    def action_backspace_search(self) -> None:
        if isinstance(self.screen, ReviewModal):
            return
        if self.input_state != "search":
            return

        if not self.session.search_text:
            return
        self.session.set_search_text(self.session.search_text[:-1])
        self._refresh_all()

    def action_cancel_search(self) -> None:
        if isinstance(self.screen, ReviewModal):
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self._refresh_search_bar()

    def action_add_to_cart(self) -> None:
        item = self.session.selected_item
        if item is None:
            self.system_status = "No cookie selected"
        elif self.session.add_selected_to_cart():
            self.system_status = f"Added {item.name} to cart"
        else:
            self.system_status = f"{item.name} is already in the cart"
        self._log_debug(f"add_to_cart cart={list(self.session.cart)!r}")
        self._refresh_all()

    def action_write_review(self) -> None:
        item = self.session.selected_item
        if item is None:
            self.system_status = "Select a cookie to review"
            self._refresh_search_bar()
            return
        self._log_debug(f"review_open item={item.name!r}")
        self.push_screen(ReviewModal(self.session, item), self._review_closed)

    def _review_closed(self, posted: bool | None) -> None:
        if posted:
            item = self.session.selected_item
            self.system_status = "Review posted"
            self._log_debug(f"review_posted item={item.name if item else None!r}")
        self._refresh_all()

    def action_toggle_theme(self) -> None:
        theme = self.session.toggle_theme()
        self._apply_theme()
        self._log_debug(f"toggle_theme theme={theme.value!r}")
        self._refresh_search_bar()

    def action_buy_now(self) -> None:
        cart = self.session.checkout()
        if not cart:
            self.system_status = "Cart is empty"
        else:
            self.system_status = "Checkout is not available yet"
        self._log_debug(f"buy_now cart={list(cart)!r}")
        self._refresh_search_bar()

    def _select_position(self, position: int) -> None:
        if not self.session.select(position - 1):
            return
        self._refresh_all()

    def _apply_theme(self) -> None:
        self.theme = config.TEXTUAL_THEME_BY_THEME[self.session.theme.value]

    def _refresh_all(self) -> None:
        try:
            self.query_one("#cookie-list", Static).update(
                format_item_list(self.session.filtered, self.session.selected_index)
            )
            self.query_one("#cookie-detail", Static).update(format_item_detail(self.session.selected_item))
            self.query_one("#cart-list", Static).update(format_cart(self.session.cart))
        except NoMatches:
            return
        self._refresh_search_bar()

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return

        text = Text()
        if self.input_state == "search":
            text.append("Search", style="bold #ffffff on #8b5a2b")
            text.append(f": {self.session.search_text}|")
            text.append("\nEnter/Esc done. Backspace delete.", style="dim")
            bar.update(text)
            return

        text.append("/ search  j/k move  a add  w review  b buy  ")
        text.append(f"t {theme_label(self.session.theme)}")
        if self.session.search_text:
            text.append(f"  [filter: {self.session.search_text}]", style="dim")
        text.append(f"\n{self.system_status or 'Ready'}")
        bar.update(text)
