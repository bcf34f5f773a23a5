from __future__ import annotations

from typing import NamedTuple

from calles.services.normalizer import normalize_street_name
from calles.services.street_catalog import StreetCatalog

DEFAULT_SEARCH_LIMIT = 10


class SearchResult(NamedTuple):
    name: str
    has_history: bool


def search_streets(
    query: str, catalog: StreetCatalog, limit: int = DEFAULT_SEARCH_LIMIT
) -> list[SearchResult]:
    """Substring search over normalized catalog names.

    Results keep the catalog's lexicographic order and are truncated to ``limit``.
    The minimum query length is the caller's concern. A blank query matches
    nothing; any other query whose key normalizes to empty (".", " ,. ") is a
    substring of every name and returns the first ``limit`` of them.
    """

    if limit <= 0 or not (query or "").strip():
        return []
    needle = normalize_street_name(query)

    results: list[SearchResult] = []
    for entry in catalog.entries():
        if needle in entry.key:
            results.append(SearchResult(entry.name, entry.has_history))
            if len(results) >= limit:
                break
    return results
