"""Lookup table from canonical key to historical record."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from calles.schemas.history import HistoricalRecord
from calles.services.variants import name_variants

logger = structlog.get_logger(__name__)


class HistoryIndex:
    """Canonical key -> HistoricalRecord, first writer wins.

    When several records share a variant key, the one that appears first in the
    source dataset owns it and later ones are unreachable through that key. This
    keeps lookups deterministic for content that already depends on the current
    resolution. Lookups are exact on a single key and never fall back to fuzzy
    matching.
    """

    def __init__(self) -> None:
        self._by_key: dict[str, HistoricalRecord] = {}
        self._record_count = 0
        self._shadowed = 0

    @classmethod
    def build(cls, records: Iterable[HistoricalRecord]) -> HistoryIndex:
        index = cls()
        for record in records:
            index._register(record)
        logger.info(
            "history_index_built",
            records=index._record_count,
            keys=len(index._by_key),
            shadowed_keys=index._shadowed,
        )
        return index

    def _register(self, record: HistoricalRecord) -> None:
        self._record_count += 1
        for key in sorted(name_variants(record.current_name)):
            if not key:
                continue
            if key in self._by_key:
                if self._by_key[key] is not record:
                    self._shadowed += 1
                continue
            self._by_key[key] = record

    def lookup(self, key: str) -> HistoricalRecord | None:
        return self._by_key.get(key)

    @property
    def record_count(self) -> int:
        return self._record_count

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key
