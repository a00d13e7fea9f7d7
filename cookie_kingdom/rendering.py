"""Rendering helpers for the cookie list, detail card and cart."""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text

from cookie_kingdom.models import Item, Theme


def theme_label(theme: Theme) -> str:
    """Label for the theme toggle: names the mode it switches to."""
    if theme is Theme.DARK:
        return "☀ Light"
    return "☾ Dark"


def rating_style(rating: float) -> str:
    if rating >= 4.5:
        return "bold #f5c518"
    if rating >= 3.0:
        return "#f5c518"
    return "#c8a951"


def format_rating(rating: float) -> Text:
    """Render a rating as a star badge out of 5."""
    return Text(f"★ {rating:g}/5", style=rating_style(rating))


def format_item_row(item: Item, selected: bool, position: int | None = None) -> Text:
    """Render one row of the cookie list."""
    text = Text()
    text.append("➤ " if selected else "  ")
    if position is not None:
        text.append(f"{position}. ", style="dim")
    text.append(item.name, style="bold" if selected else "")
    return text


def format_item_list(items: Sequence[Item], selected_index: int) -> Text:
    """Render the filtered cookie list with the current selection marked."""
    if not items:
        return Text("No cookies found 🍪", style="dim")

    lines = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            lines.append("\n")
        lines.append_text(format_item_row(item, idx == selected_index, idx + 1))
    return lines


def format_item_detail(item: Item | None) -> Text:
    """Render the detail card for the selected cookie."""
    if item is None:
        return Text("Select a cookie", style="dim")

    text = Text()
    text.append(item.name, style="bold underline")
    text.append("  ")
    text.append_text(format_rating(item.rating))

    text.append("\n\nIngredients\n", style="bold")
    for ingredient in item.ingredients:
        text.append(f"  • {ingredient}\n")

    text.append("\nProcess\n", style="bold")
    text.append(f"  {item.process}\n")

    if item.substitutions:
        text.append("\nSubstitutions\n", style="bold")
        for ingredient, substitution in item.substitutions.items():
            text.append(f"  {ingredient.capitalize()}: ", style="bold")
            text.append(f"{substitution}\n")

    text.append("\nReviews\n", style="bold")
    if not item.reviews:
        text.append("  (no reviews yet)", style="dim")
    for idx, review in enumerate(item.reviews):
        if idx > 0:
            text.append("\n")
        text.append(f"  “{review}”", style="italic")
    return text


def format_cart(cart: Sequence[str]) -> Text:
    """Render cart contents in first-added order."""
    if not cart:
        return Text("(cart is empty)", style="dim")

    text = Text()
    for idx, name in enumerate(cart):
        if idx > 0:
            text.append("\n")
        text.append(f"{idx + 1}. {name}")
    return text
