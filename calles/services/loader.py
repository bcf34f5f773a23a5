"""Dataset loading: historical records and street geometries from local files."""

from __future__ import annotations

import asyncio
import enum
import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError as PydanticValidationError

from calles.core.config import Settings
from calles.core.exceptions import DataLoadError
from calles.schemas.history import HistoricalRecord
from calles.services.history_index import HistoryIndex
from calles.services.street_catalog import GeometryFeature, StreetCatalog
from calles.utils.geo import Bounds, LngLat

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StreetSegment:
    """Drawable line geometry handle handed to the rendering side."""

    id: str
    coordinates: tuple[tuple[LngLat, ...], ...]

    def bounds(self) -> Bounds | None:
        return Bounds.from_coordinates(point for line in self.coordinates for point in line)


def segment_bounds(segment: Any) -> Bounds | None:
    bounds = getattr(segment, "bounds", None)
    return bounds() if callable(bounds) else None


@dataclass(frozen=True)
class StreetMap:
    """Everything built from one dataset load."""

    index: HistoryIndex
    catalog: StreetCatalog
    load_error: str | None = None

    @classmethod
    def empty(cls, load_error: str | None = None) -> StreetMap:
        return cls(index=HistoryIndex(), catalog=StreetCatalog.empty(), load_error=load_error)

    @classmethod
    def build(
        cls, records: Iterable[HistoricalRecord], features: Iterable[GeometryFeature]
    ) -> StreetMap:
        index = HistoryIndex.build(records)
        return cls(index=index, catalog=StreetCatalog.build(features, index))


def read_json(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise DataLoadError(f"dataset file not found: {path}", path=str(path)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"cannot read dataset file: {path}", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"invalid JSON in {path}: {exc.msg}", path=str(path)) from exc


def parse_history(payload: Any) -> list[HistoricalRecord]:
    """Accept ``{"streets": [...]}`` or a bare list; skip invalid records."""

    raw = payload.get("streets") if isinstance(payload, dict) else payload
    if not isinstance(raw, list):
        raise DataLoadError("historical dataset must contain a list of streets")

    records: list[HistoricalRecord] = []
    for position, item in enumerate(raw):
        try:
            records.append(HistoricalRecord.model_validate(item))
        except PydanticValidationError as exc:
            logger.warning(
                "history_record_skipped", position=position, errors=exc.error_count()
            )
    return records


def _lines(geometry: dict[str, Any]) -> tuple[tuple[LngLat, ...], ...]:
    kind = geometry.get("type")
    coords = geometry.get("coordinates") or []
    if not isinstance(coords, list):
        return ()
    if kind == "LineString":
        lines = [coords]
    elif kind == "MultiLineString":
        lines = coords
    else:
        return ()
    return tuple(
        tuple((float(point[0]), float(point[1])) for point in line) for line in lines if line
    )


def iter_geometry_features(payload: Any) -> Iterator[GeometryFeature]:
    if not isinstance(payload, dict) or payload.get("type") != "FeatureCollection":
        raise DataLoadError("geometry dataset must be a GeoJSON FeatureCollection")

    features = payload.get("features") or []
    if not isinstance(features, list):
        raise DataLoadError("geometry dataset features must be a list")

    for position, feature in enumerate(features):
        if not isinstance(feature, dict):
            continue
        properties = feature.get("properties") or {}
        geometry = feature.get("geometry") or {}
        if not isinstance(properties, dict) or not isinstance(geometry, dict):
            logger.warning("geometry_feature_skipped", position=position)
            continue
        try:
            lines = _lines(geometry)
        except (TypeError, ValueError, IndexError, KeyError, AttributeError):
            logger.warning("geometry_feature_skipped", position=position)
            continue
        if not lines:
            continue
        segment_id = properties.get("id")
        segment = StreetSegment(
            id=str(segment_id) if segment_id is not None else f"feature-{position}",
            coordinates=lines,
        )
        name = properties.get("name")
        if not isinstance(name, str):
            name = None
        yield GeometryFeature(display_name=name, segment=segment)


def _load_sync(history_path: Path, geometry_path: Path) -> StreetMap:
    records = parse_history(read_json(history_path))
    features = list(iter_geometry_features(read_json(geometry_path)))
    return StreetMap.build(records, features)


async def load_street_map(settings: Settings) -> StreetMap:
    """Read and build both datasets without blocking the event loop."""

    return await asyncio.to_thread(_load_sync, settings.history_path, settings.geometry_path)


class DatasetStatus(str, enum.Enum):
    loading = "loading"
    ready = "ready"
    failed = "failed"


class DatasetHolder:
    """Owns the current StreetMap for an application instance.

    Until the load task finishes the holder exposes an empty map, so search
    returns nothing and selection is a no-op. A failed load keeps the empty map
    and records the user-facing message.
    """

    def __init__(self, street_map: StreetMap | None = None) -> None:
        if street_map is None:
            self.street_map = StreetMap.empty()
            self.status = DatasetStatus.loading
        else:
            self.street_map = street_map
            self.status = DatasetStatus.failed if street_map.load_error else DatasetStatus.ready
        self.error_detail: str | None = None

    def _fail(self, settings: Settings, detail: str) -> StreetMap:
        self.street_map = StreetMap.empty(load_error=settings.load_error_message)
        self.status = DatasetStatus.failed
        self.error_detail = detail
        return self.street_map

    async def load(self, settings: Settings) -> StreetMap:
        self.status = DatasetStatus.loading
        try:
            street_map = await load_street_map(settings)
        except DataLoadError as exc:
            logger.error("dataset_load_failed", path=exc.path, error=str(exc))
            return self._fail(settings, str(exc))
        except Exception as exc:
            logger.exception("dataset_load_failed", error=repr(exc))
            return self._fail(settings, f"unexpected error while loading datasets: {exc!r}")

        self.street_map = street_map
        self.status = DatasetStatus.ready
        self.error_detail = None
        logger.info(
            "dataset_loaded",
            records=street_map.index.record_count,
            lookup_keys=len(street_map.index),
            streets=len(street_map.catalog),
            streets_with_history=street_map.catalog.history_count,
        )
        return street_map


__all__ = [
    "DatasetHolder",
    "DatasetStatus",
    "StreetMap",
    "StreetSegment",
    "iter_geometry_features",
    "load_street_map",
    "parse_history",
    "read_json",
    "segment_bounds",
]
