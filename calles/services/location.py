"""Shareable location (``?calle=<name>``) for the current selection."""

from __future__ import annotations

from urllib.parse import parse_qs, urlencode, urlsplit

from calles.services.street_catalog import StreetCatalog

DEFAULT_PARAM = "calle"


def encode_location(name: str | None, param: str = DEFAULT_PARAM) -> str:
    """Query string that persists ``name``; empty string when nothing is selected."""

    if not name:
        return ""
    return "?" + urlencode({param: name})


def decode_location(location: str | None, param: str = DEFAULT_PARAM) -> str | None:
    """Extract the persisted street name from a URL or query string."""

    if not location:
        return None
    value = location.strip()
    if "://" in value or value.startswith("/"):
        value = urlsplit(value).query
    value = value.lstrip("?")
    if "=" not in value:
        return None
    names = parse_qs(value, keep_blank_values=False).get(param)
    if not names:
        return None
    name = names[0].strip()
    return name or None


def resolve_location(
    catalog: StreetCatalog, location: str | None, param: str = DEFAULT_PARAM
) -> str | None:
    """Catalog name persisted in ``location``, matched case-insensitively."""

    name = decode_location(location, param)
    if name is None:
        return None
    return catalog.find_name_casefold(name)
