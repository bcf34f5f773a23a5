"""Detail panel content shown when a street is selected."""

from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlsplit

from calles.schemas.history import HistoricalRecord, PreviousName
from calles.schemas.panel import DetailPanel, PanelPreviousName, PanelWikipedia

NO_HISTORY_MESSAGE = "Sin información histórica disponible para esta calle."


def is_allowed_wikipedia_url(url: str | None, allowed_domains: Sequence[str]) -> bool:
    """Accept only https URLs whose host is an allowed domain or one of its subdomains."""

    if not url:
        return False
    try:
        parts = urlsplit(url)
        host = (parts.hostname or "").lower()
    except ValueError:
        return False
    if parts.scheme != "https" or not host:
        return False
    for domain in allowed_domains:
        domain = domain.lower().lstrip(".")
        if host == domain or host.endswith("." + domain):
            return True
    return False


def _previous_name(item: str | PreviousName) -> PanelPreviousName | None:
    if isinstance(item, str):
        return PanelPreviousName(name=item) if item else None
    if not item.name:
        return None
    return PanelPreviousName(name=item.name, description=item.description)


def build_panel(
    street_name: str,
    record: HistoricalRecord | None,
    allowed_domains: Sequence[str] = ("wikipedia.org",),
) -> DetailPanel:
    if record is None:
        return DetailPanel(
            title=street_name,
            street_name=street_name,
            has_history=False,
            message=NO_HISTORY_MESSAGE,
        )

    previous = [p for p in (_previous_name(item) for item in record.previous_names) if p]

    wikipedia = None
    if record.wikipedia and is_allowed_wikipedia_url(record.wikipedia.url, allowed_domains):
        wikipedia = PanelWikipedia(summary=record.wikipedia.summary, url=record.wikipedia.url)

    return DetailPanel(
        title=record.current_name,
        street_name=street_name,
        has_history=True,
        description=record.description or None,
        legal_basis=record.legal_basis or None,
        previous_names=previous,
        wikipedia=wikipedia,
    )
