"""View-state reducer: search filtering, selection, cart, reviews and theme."""

from __future__ import annotations

from collections.abc import Sequence

from cookie_kingdom.models import Item, Theme, ViewState


def filter_catalog(catalog: Sequence[Item], search_text: str) -> tuple[Item, ...]:
    """Return catalog items whose name contains search_text, case-insensitively, in catalog order."""
    if not search_text:
        return tuple(catalog)
    q = search_text.lower()
    return tuple(item for item in catalog if q in item.name.lower())


def select(filtered: Sequence[Item], index: int) -> Item | None:
    """Resolve an index against the current filtered sequence; out of range means no selection."""
    if not (0 <= index < len(filtered)):
        return None
    return filtered[index]


def add_to_cart(cart: tuple[str, ...], name: str) -> tuple[str, ...]:
    """Append name unless it is already in the cart."""
    if name in cart:
        return cart
    return (*cart, name)


def post_review(item: Item, draft_text: str) -> bool:
    """Append draft_text to item's reviews. Blank drafts are ignored."""
    if not draft_text.strip():
        return False
    item.reviews.append(draft_text)
    return True


def toggle_theme(theme: Theme) -> Theme:
    """Flip between the dark and light display modes."""
    if theme is Theme.DARK:
        return Theme.LIGHT
    return Theme.DARK


class CatalogSession:
    """Owns the ViewState of one browsing session.

    The methods below are the only mutation entry points. Every read of the
    selection is revalidated against the freshly filtered catalog, so a search
    that filters out the selected cookie leaves no selection rather than
    silently pointing at another cookie.
    """

    def __init__(self, catalog: Sequence[Item], theme: Theme = Theme.DARK) -> None:
        self.state = ViewState(catalog=tuple(catalog), theme=theme)

    @property
    def catalog(self) -> tuple[Item, ...]:
        return self.state.catalog

    @property
    def search_text(self) -> str:
        return self.state.search_text

    @property
    def selected_index(self) -> int:
        return self.state.selected_index

    @property
    def cart(self) -> tuple[str, ...]:
        return self.state.cart

    @property
    def theme(self) -> Theme:
        return self.state.theme

    @property
    def draft_review(self) -> str:
        return self.state.draft_review

    @property
    def filtered(self) -> tuple[Item, ...]:
        return filter_catalog(self.state.catalog, self.state.search_text)

    @property
    def selected_item(self) -> Item | None:
        return select(self.filtered, self.state.selected_index)

    def set_search_text(self, text: str) -> None:
        # The selected index is kept as-is and revalidated on read.
        self.state.search_text = text

    def select(self, index: int) -> bool:
        if select(self.filtered, index) is None:
            return False
        self.state.selected_index = index
        return True

    def move_selection(self, delta: int) -> bool:
        filtered = self.filtered
        if not filtered:
            return False

        if self.selected_item is None:
            self.state.selected_index = 0 if delta > 0 else len(filtered) - 1
        else:
            self.state.selected_index = (self.state.selected_index + delta) % len(filtered)
        return True

    def add_to_cart(self, name: str) -> bool:
        before = self.state.cart
        self.state.cart = add_to_cart(before, name)
        return self.state.cart is not before

    def add_selected_to_cart(self) -> bool:
        item = self.selected_item
        if item is None:
            return False
        return self.add_to_cart(item.name)

    def set_draft_review(self, text: str) -> None:
        self.state.draft_review = text

    def post_review(self) -> bool:
        """Post the draft to the currently selected cookie and clear the draft on success."""
        item = self.selected_item
        if item is None:
            return False
        if not post_review(item, self.state.draft_review):
            return False
        self.state.draft_review = ""
        return True

    def toggle_theme(self) -> Theme:
        self.state.theme = toggle_theme(self.state.theme)
        return self.state.theme

    def checkout(self) -> tuple[str, ...]:
        """Buy Now placeholder: reports the cart and changes nothing."""
        return self.state.cart
