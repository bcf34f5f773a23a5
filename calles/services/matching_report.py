"""Coverage of historical names against geometry street names."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from calles.schemas.history import HistoricalRecord
from calles.services.history_index import HistoryIndex
from calles.services.normalizer import normalize_street_name
from calles.services.variants import name_variants

DEFAULT_SAMPLE_SIZE = 20


@dataclass
class MatchingReport:
    historical_total: int = 0
    geometry_names: int = 0
    exact_matches: int = 0
    normalized_matches: int = 0
    unmatched: list[str] = field(default_factory=list)
    geometry_with_history: int = 0

    @property
    def matched(self) -> int:
        return self.exact_matches + self.normalized_matches

    @property
    def match_rate(self) -> float:
        if not self.historical_total:
            return 0.0
        return self.matched / self.historical_total

    def unmatched_sample(self, size: int = DEFAULT_SAMPLE_SIZE) -> list[str]:
        return self.unmatched[:size]


def analyze_matching(
    records: Iterable[HistoricalRecord], geometry_names: Iterable[str]
) -> MatchingReport:
    """Count how historical records reach geometry names.

    A record is an exact match when its raw name appears among the geometry
    names, a normalized match when any of its variant keys equals a normalized
    geometry name, and unmatched otherwise.
    """

    records = list(records)
    names = {name for name in geometry_names if name}
    normalized = {normalize_street_name(name) for name in names}

    report = MatchingReport(historical_total=len(records), geometry_names=len(names))
    for record in records:
        if record.current_name in names:
            report.exact_matches += 1
        elif name_variants(record.current_name) & normalized:
            report.normalized_matches += 1
        else:
            report.unmatched.append(record.current_name)

    index = HistoryIndex.build(records)
    report.geometry_with_history = sum(
        1 for name in names if index.lookup(normalize_street_name(name)) is not None
    )
    return report
