"""Domain models for cookie-kingdom."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, eq=False)
class Item:
    """A catalog cookie. Only its review ledger changes after load."""

    name: str
    ingredients: tuple[str, ...]
    substitutions: Mapping[str, str]
    process: str
    rating: float
    reviews: list[str] = field(default_factory=list)


class Theme(str, Enum):
    """Display mode."""

    DARK = "dark"
    LIGHT = "light"


@dataclass
class ViewState:
    """Everything the browser tracks for one session."""

    catalog: tuple[Item, ...]
    search_text: str = ""
    selected_index: int = 0
    cart: tuple[str, ...] = ()
    theme: Theme = Theme.DARK
    draft_review: str = ""
