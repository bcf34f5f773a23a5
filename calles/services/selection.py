"""Selection state machine for the street map.

The controller never touches a rendering API. Each transition returns directive
values (segment styles, viewport framing, persistence and panel payloads) that
the UI collaborator applies in order.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from calles.schemas.history import HistoricalRecord
from calles.services.street_catalog import Segment, StreetCatalog
from calles.utils.geo import Bounds, union_bounds

logger = structlog.get_logger(__name__)

BoundsFn = Callable[[Segment], Bounds | None]


class StyleTier(str, enum.Enum):
    default = "default"
    has_history = "has_history"
    highlighted = "highlighted"


@dataclass(frozen=True)
class TierStyle:
    color: str
    weight: int


STYLE_PALETTE: dict[StyleTier, TierStyle] = {
    StyleTier.default: TierStyle(color="#3182ce", weight=2),
    StyleTier.has_history: TierStyle(color="#38a169", weight=3),
    StyleTier.highlighted: TierStyle(color="#e53e3e", weight=5),
}


@dataclass(frozen=True)
class SegmentStyle:
    segment: Segment
    tier: StyleTier

    @property
    def style(self) -> TierStyle:
        return STYLE_PALETTE[self.tier]


@dataclass(frozen=True)
class FrameViewport:
    bounds: Bounds
    padding: int
    max_zoom: int


@dataclass(frozen=True)
class PersistSelection:
    name: str


@dataclass(frozen=True)
class ClearPersistedSelection:
    pass


@dataclass(frozen=True)
class ShowPanel:
    name: str
    history: HistoricalRecord | None


Directive = SegmentStyle | FrameViewport | PersistSelection | ClearPersistedSelection | ShowPanel


@dataclass(frozen=True)
class SelectionState:
    selected_name: str | None = None
    previous_name: str | None = None

    @property
    def is_idle(self) -> bool:
        return self.selected_name is None


@dataclass(frozen=True)
class SelectionResult:
    found: bool
    state: SelectionState
    directives: tuple[Directive, ...] = field(default_factory=tuple)


def baseline_tier(catalog: StreetCatalog, name: str) -> StyleTier:
    return StyleTier.has_history if catalog.has_history(name) else StyleTier.default


def baseline_styles(catalog: StreetCatalog) -> list[SegmentStyle]:
    """Initial style of every segment right after a dataset load."""

    styles: list[SegmentStyle] = []
    for entry in catalog.entries():
        tier = StyleTier.has_history if entry.has_history else StyleTier.default
        styles.extend(SegmentStyle(segment, tier) for segment in entry.segments)
    return styles


class SelectionController:
    """Idle / Selected(name) state machine.

    Unknown names (or names without segments) are ignored: the state stays as it
    was and the result reports ``found=False`` so callers can log it.
    """

    def __init__(
        self,
        catalog: StreetCatalog,
        bounds_of: BoundsFn,
        *,
        frame_padding: int = 50,
        frame_max_zoom: int = 16,
        state: SelectionState | None = None,
    ) -> None:
        self._catalog = catalog
        self._bounds_of = bounds_of
        self._frame_padding = frame_padding
        self._frame_max_zoom = frame_max_zoom
        self._state = self._sanitize(state or SelectionState())

    def _sanitize(self, state: SelectionState) -> SelectionState:
        # A state handed back by a client may refer to a name this catalog lacks.
        if state.selected_name is not None and not self._catalog.segments_for(
            state.selected_name
        ):
            return SelectionState(selected_name=None, previous_name=state.previous_name)
        return state

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected_name(self) -> str | None:
        return self._state.selected_name

    def _restore(self, name: str) -> list[Directive]:
        tier = baseline_tier(self._catalog, name)
        return [SegmentStyle(segment, tier) for segment in self._catalog.segments_for(name)]

    def select(self, name: str, *, persist: bool = True) -> SelectionResult:
        segments = self._catalog.segments_for(name) if name else ()
        if not segments:
            logger.debug("street_select_ignored", street=name)
            return SelectionResult(found=False, state=self._state)

        directives: list[Directive] = []
        previous = self._state.selected_name
        if previous is not None:
            directives.extend(self._restore(previous))

        directives.extend(SegmentStyle(segment, StyleTier.highlighted) for segment in segments)
        self._state = SelectionState(selected_name=name, previous_name=previous)

        bounds = union_bounds(self._bounds_of(segment) for segment in segments)
        if bounds is not None:
            directives.append(
                FrameViewport(
                    bounds=bounds, padding=self._frame_padding, max_zoom=self._frame_max_zoom
                )
            )
        if persist:
            directives.append(PersistSelection(name))
        directives.append(ShowPanel(name=name, history=self._catalog.history_for(name)))

        logger.debug("street_selected", street=name, previous=previous, segments=len(segments))
        return SelectionResult(found=True, state=self._state, directives=tuple(directives))

    def clear(self, *, persist: bool = True) -> SelectionResult:
        if self._state.is_idle:
            return SelectionResult(found=True, state=self._state)

        current = self._state.selected_name

        directives: list[Directive] = self._restore(current)
        self._state = SelectionState(selected_name=None, previous_name=current)
        if persist:
            directives.append(ClearPersistedSelection())

        logger.debug("street_selection_cleared", street=current)
        return SelectionResult(found=True, state=self._state, directives=tuple(directives))


__all__ = [
    "STYLE_PALETTE",
    "BoundsFn",
    "ClearPersistedSelection",
    "Directive",
    "FrameViewport",
    "PersistSelection",
    "SegmentStyle",
    "SelectionController",
    "SelectionResult",
    "SelectionState",
    "ShowPanel",
    "StyleTier",
    "TierStyle",
    "baseline_styles",
    "baseline_tier",
]
