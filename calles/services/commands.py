"""Typed UI commands consumed synchronously by a map session."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from calles.core.config import Settings
from calles.services.loader import StreetMap, segment_bounds
from calles.services.location import decode_location, resolve_location
from calles.services.selection import (
    Directive,
    SelectionController,
    SelectionResult,
    SelectionState,
)
from calles.services.street_search import SearchResult, search_streets

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SelectStreet:
    name: str
    persist: bool = True


@dataclass(frozen=True)
class ClearSelection:
    persist: bool = True


@dataclass(frozen=True)
class SearchStreets:
    query: str


@dataclass(frozen=True)
class RestoreLocation:
    """Selection coming from a shared link or a back/forward navigation."""

    location: str | None


Command = SelectStreet | ClearSelection | SearchStreets | RestoreLocation


@dataclass(frozen=True)
class CommandResult:
    state: SelectionState
    found: bool = True
    directives: tuple[Directive, ...] = field(default_factory=tuple)
    results: tuple[SearchResult, ...] = field(default_factory=tuple)


class StreetMapSession:
    """One user's view of a loaded StreetMap."""

    def __init__(
        self,
        street_map: StreetMap,
        settings: Settings,
        state: SelectionState | None = None,
    ) -> None:
        self._street_map = street_map
        self._settings = settings
        self._controller = SelectionController(
            street_map.catalog,
            segment_bounds,
            frame_padding=settings.frame_padding,
            frame_max_zoom=settings.frame_max_zoom,
            state=state,
        )

    @property
    def state(self) -> SelectionState:
        return self._controller.state

    def dispatch(self, command: Command) -> CommandResult:
        if isinstance(command, SearchStreets):
            return CommandResult(state=self.state, results=tuple(self.search(command.query)))
        if isinstance(command, SelectStreet):
            result = self._controller.select(command.name, persist=command.persist)
            return self._from_selection(result)
        if isinstance(command, ClearSelection):
            return self._from_selection(self._controller.clear(persist=command.persist))
        if isinstance(command, RestoreLocation):
            return self._restore(command.location)
        raise TypeError(f"unsupported command: {type(command).__name__}")

    def search(self, query: str) -> list[SearchResult]:
        query = (query or "").strip()
        if len(query) < self._settings.search_min_query_length:
            return []
        return search_streets(query, self._street_map.catalog, self._settings.search_limit)

    def _restore(self, location: str | None) -> CommandResult:
        param = self._settings.location_param
        if decode_location(location, param) is None:
            # Navigated back to a location without a selection.
            return self._from_selection(self._controller.clear(persist=False))

        name = resolve_location(self._street_map.catalog, location, param)
        if name is None:
            logger.info("location_restore_unresolved", location=location)
            return CommandResult(state=self.state, found=False)
        return self._from_selection(self._controller.select(name, persist=False))

    @staticmethod
    def _from_selection(result: SelectionResult) -> CommandResult:
        return CommandResult(state=result.state, found=result.found, directives=result.directives)
