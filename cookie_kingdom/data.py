"""Static catalog loading and load-time validation."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from cookie_kingdom import config
from cookie_kingdom.constant import (
    COOKIE_RECORDS,
    MAX_RATING,
    MIN_RATING,
    REQUIRED_RECORD_KEYS,
    SUBSTITUTION_KEY_ALIASES,
)
from cookie_kingdom.models import Item


class CatalogError(ValueError):
    """Raised when seed records cannot be turned into a catalog."""


def _string_list(record_name: str, field_name: str, value: object) -> list[str]:
    # Mappings and sets would lose quantities or order.
    if not isinstance(value, (list, tuple)):
        raise CatalogError(f"{record_name!r}: {field_name} must be a list of strings")
    values = list(value)
    for entry in values:
        if not isinstance(entry, str):
            raise CatalogError(f"{record_name!r}: {field_name} entries must be strings, got {entry!r}")
    return values


def _substitutions(record_name: str, raw: Mapping[str, object]) -> Mapping[str, str]:
    present = [key for key in SUBSTITUTION_KEY_ALIASES if key in raw]
    if len(present) > 1:
        raise CatalogError(f"{record_name!r}: use only one of {', '.join(present)}")
    if not present:
        return MappingProxyType({})

    value = raw[present[0]]
    if not isinstance(value, Mapping):
        raise CatalogError(f"{record_name!r}: {present[0]} must be a mapping")

    substitutions: dict[str, str] = {}
    for ingredient, text in value.items():
        if not isinstance(ingredient, str) or not ingredient.strip():
            raise CatalogError(f"{record_name!r}: substitution keys must be non-empty strings")
        if not isinstance(text, str):
            raise CatalogError(f"{record_name!r}: substitution for {ingredient!r} must be a string")
        substitutions[ingredient] = text
    return MappingProxyType(substitutions)


def _rating(record_name: str, value: object) -> float:
    # bool is an int subclass but never a rating.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f"{record_name!r}: rating must be a number")
    rating = float(value)
    if not (MIN_RATING <= rating <= MAX_RATING):
        raise CatalogError(f"{record_name!r}: rating must be between {MIN_RATING:g} and {MAX_RATING:g}")
    return rating


def item_from_record(raw: Mapping[str, object]) -> Item:
    """Validate one raw record and build an Item."""
    if not isinstance(raw, Mapping):
        raise CatalogError(f"catalog records must be mappings, got {type(raw).__name__}")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"record name must be a non-empty string, got {name!r}")

    missing = [key for key in REQUIRED_RECORD_KEYS if key not in raw]
    if missing:
        raise CatalogError(f"{name!r}: missing {', '.join(missing)}")

    process = raw["process"]
    if not isinstance(process, str):
        raise CatalogError(f"{name!r}: process must be a string")

    return Item(
        name=name,
        ingredients=tuple(_string_list(name, "ingredients", raw["ingredients"])),
        substitutions=_substitutions(name, raw),
        process=process,
        rating=_rating(name, raw["rating"]),
        reviews=_string_list(name, "reviews", raw.get("reviews", [])),
    )


def load_catalog(records: Iterable[Mapping[str, object]]) -> tuple[Item, ...]:
    """Build an ordered catalog, rejecting duplicate names."""
    items: list[Item] = []
    seen: set[str] = set()
    for raw in records:
        item = item_from_record(raw)
        if item.name in seen:
            raise CatalogError(f"duplicate cookie name {item.name!r}")
        seen.add(item.name)
        items.append(item)
    return tuple(items)


def load_catalog_file(path: str | Path) -> tuple[Item, ...]:
    """Load a catalog from a JSON array of records."""
    catalog_file = Path(path)
    try:
        payload = json.loads(catalog_file.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise CatalogError(f"{catalog_file}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"{catalog_file}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(payload, list):
        raise CatalogError(f"{catalog_file}: expected a JSON array of cookie records")
    return load_catalog(payload)


def default_catalog() -> tuple[Item, ...]:
    """Return a fresh catalog from the configured file or the embedded seed."""
    if config.CATALOG_PATH:
        return load_catalog_file(config.CATALOG_PATH)
    return load_catalog(COOKIE_RECORDS)
