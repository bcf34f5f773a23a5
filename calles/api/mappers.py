"""Utilities to map core values (directives, results) into API schemas."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from calles.schemas.streets import DirectiveItem, SelectionStateModel, StreetListItem
from calles.services.location import encode_location
from calles.services.panel import build_panel
from calles.services.selection import (
    ClearPersistedSelection,
    Directive,
    FrameViewport,
    PersistSelection,
    SegmentStyle,
    SelectionState,
    ShowPanel,
)
from calles.services.street_search import SearchResult


def _segment_id(segment: object) -> str:
    return str(getattr(segment, "id", segment))


def map_state(state: SelectionState) -> SelectionStateModel:
    return SelectionStateModel(
        selected_name=state.selected_name, previous_name=state.previous_name
    )


def map_results(results: Iterable[SearchResult]) -> list[StreetListItem]:
    return [StreetListItem(name=r.name, has_history=r.has_history) for r in results]


def map_directive(
    directive: Directive, *, allowed_domains: Sequence[str], location_param: str
) -> DirectiveItem:
    if isinstance(directive, SegmentStyle):
        style = directive.style
        return DirectiveItem(
            type="segment_style",
            segment_id=_segment_id(directive.segment),
            tier=directive.tier.value,
            color=style.color,
            weight=style.weight,
        )
    if isinstance(directive, FrameViewport):
        return DirectiveItem(
            type="frame_viewport",
            bounds=directive.bounds.as_list(),
            padding=directive.padding,
            max_zoom=directive.max_zoom,
        )
    if isinstance(directive, PersistSelection):
        return DirectiveItem(
            type="persist", location=encode_location(directive.name, location_param)
        )
    if isinstance(directive, ClearPersistedSelection):
        return DirectiveItem(type="clear_persisted")
    if isinstance(directive, ShowPanel):
        return DirectiveItem(
            type="show_panel",
            panel=build_panel(directive.name, directive.history, allowed_domains),
        )
    raise TypeError(f"unsupported directive: {type(directive).__name__}")


def map_directives(
    directives: Iterable[Directive], *, allowed_domains: Sequence[str], location_param: str
) -> list[DirectiveItem]:
    return [
        map_directive(d, allowed_domains=allowed_domains, location_param=location_param)
        for d in directives
    ]
