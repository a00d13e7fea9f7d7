from __future__ import annotations

import pytest

from cookie_kingdom import config
from cookie_kingdom.constant import COOKIE_RECORDS
from cookie_kingdom.data import load_catalog
from cookie_kingdom.models import Item
from cookie_kingdom.state import CatalogSession


def make_item(name: str, rating: float = 4.0, reviews: list[str] | None = None) -> Item:
    return Item(
        name=name,
        ingredients=("flour",),
        substitutions={},
        process="Bake.",
        rating=rating,
        reviews=list(reviews or []),
    )


@pytest.fixture
def catalog() -> tuple[Item, ...]:
    return load_catalog(COOKIE_RECORDS)


@pytest.fixture
def session(catalog: tuple[Item, ...]) -> CatalogSession:
    return CatalogSession(catalog)


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(path))
    return path
