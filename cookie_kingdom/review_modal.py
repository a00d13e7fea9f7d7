"""Review composer modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from cookie_kingdom.models import Item
from cookie_kingdom.state import CatalogSession


class ReviewModal(ModalScreen[bool]):
    """Centered modal that edits the session draft and posts it to one cookie.

    Dismisses with True when a review was posted, False when closed without
    posting. The draft survives closing so the user can come back to it.
    """

    CSS = """
    ReviewModal {
        align: center middle;
        background: $background 60%;
    }

    #review-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #review-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #review-body {
        margin-bottom: 1;
    }

    #review-draft {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
    }

    #review-error {
        color: #ffb3b3;
    }

    #review-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, session: CatalogSession, item: Item) -> None:
        super().__init__()
        self.session = session
        self.item = item
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="review-dialog"):
            yield Static(f"Review: {self.item.name}", id="review-title")
            yield Static(id="review-body")
            yield Static(id="review-draft")
            yield Static(id="review-error")
            yield Static("Type your review. Enter post. Backspace delete. Esc close.", id="review-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "ctrl+c"}:
            self.dismiss(False)
            event.stop()
            return

        if event.key == "enter":
            self._post()
            event.stop()
            return

        if event.key == "backspace":
            draft = self.session.draft_review
            if draft:
                self.session.set_draft_review(draft[:-1])
            self.error = ""
            self._refresh_content()
            event.stop()
            return

        if event.is_printable and event.character:
            self.session.set_draft_review(self.session.draft_review + event.character)
            self.error = ""
            self._refresh_content()
            event.stop()
            return

        # Ignore all non-text keys while typing.
        event.stop()

    def _post(self) -> None:
        if self.session.selected_item is not self.item:
            self.error = "This cookie is no longer selected."
            self._refresh_content()
            return

        if not self.session.post_review():
            self.error = "Review is empty."
            self._refresh_content()
            return

        self.dismiss(True)

    def _refresh_content(self) -> None:
        body = self.query_one("#review-body", Static)
        draft = self.query_one("#review-draft", Static)
        error = self.query_one("#review-error", Static)

        content = Text()
        if not self.item.reviews:
            content.append("(no reviews yet)", style="dim")
        for idx, review in enumerate(self.item.reviews):
            if idx > 0:
                content.append("\n")
            content.append(f"“{review}”", style="italic")

        body.update(content)
        draft.update(f"{self.session.draft_review}|")
        error.update(self.error)
