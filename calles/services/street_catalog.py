"""Distinct geometry street names with their segments and resolved history."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass

import structlog

from calles.schemas.history import HistoricalRecord
from calles.services.history_index import HistoryIndex
from calles.services.normalizer import normalize_street_name

logger = structlog.get_logger(__name__)

# Segment handles belong to the rendering side; the catalog only passes them through.
Segment = Hashable


@dataclass(frozen=True)
class GeometryFeature:
    display_name: str | None
    segment: Segment


@dataclass(frozen=True)
class StreetEntry:
    name: str
    key: str
    segments: tuple[Segment, ...]
    history: HistoricalRecord | None

    @property
    def has_history(self) -> bool:
        return self.history is not None


class StreetCatalog:
    """Read-only catalog built once per dataset load.

    Features are grouped by their exact display name; each group is normalized
    once and resolved with a single HistoryIndex lookup. Names without a match
    stay in the catalog with ``history=None``.
    """

    def __init__(self, entries: Iterable[StreetEntry] = ()) -> None:
        self._entries: dict[str, StreetEntry] = {entry.name: entry for entry in entries}
        self._names: tuple[str, ...] = tuple(sorted(self._entries))
        self._by_casefold: dict[str, str] = {}
        for name in self._names:
            self._by_casefold.setdefault(name.casefold(), name)

    @classmethod
    def build(cls, features: Iterable[GeometryFeature], index: HistoryIndex) -> StreetCatalog:
        grouped: dict[str, list[Segment]] = {}
        skipped = 0
        for feature in features:
            if not feature.display_name:
                skipped += 1
                continue
            grouped.setdefault(feature.display_name, []).append(feature.segment)

        entries = []
        for name, segments in grouped.items():
            key = normalize_street_name(name)
            entries.append(
                StreetEntry(
                    name=name,
                    key=key,
                    segments=tuple(segments),
                    history=index.lookup(key),
                )
            )

        catalog = cls(entries)
        logger.info(
            "street_catalog_built",
            names=len(catalog),
            with_history=catalog.history_count,
            unnamed_features=skipped,
        )
        return catalog

    @classmethod
    def empty(cls) -> StreetCatalog:
        return cls()

    def all_names(self) -> Sequence[str]:
        return self._names

    def entries(self) -> Iterator[StreetEntry]:
        for name in self._names:
            yield self._entries[name]

    def entry_for(self, name: str) -> StreetEntry | None:
        return self._entries.get(name)

    def segments_for(self, name: str) -> tuple[Segment, ...]:
        entry = self._entries.get(name)
        return entry.segments if entry else ()

    def history_for(self, name: str) -> HistoricalRecord | None:
        entry = self._entries.get(name)
        return entry.history if entry else None

    def has_history(self, name: str) -> bool:
        return self.history_for(name) is not None

    def find_name_casefold(self, value: str) -> str | None:
        """Exact, case-insensitive match against raw display names."""

        if not value:
            return None
        return self._by_casefold.get(value.casefold())

    @property
    def history_count(self) -> int:
        return sum(1 for entry in self._entries.values() if entry.history is not None)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries
