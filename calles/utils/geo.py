"""Geospatial helpers for framing street segments."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

# GeoJSON order: (longitude, latitude)
LngLat = tuple[float, float]


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding region in degrees."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[LngLat]) -> Bounds | None:
        """Bounds of a coordinate sequence, or None when it is empty."""

        points = list(coordinates)
        if not points:
            return None
        lngs = [float(lng) for lng, _ in points]
        lats = [float(lat) for _, lat in points]
        return cls(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))

    def extend(self, other: Bounds) -> Bounds:
        return Bounds(
            south=min(self.south, other.south),
            west=min(self.west, other.west),
            north=max(self.north, other.north),
            east=max(self.east, other.east),
        )

    def as_list(self) -> list[list[float]]:
        """``[[south, west], [north, east]]`` as map libraries expect for fitBounds."""

        return [[self.south, self.west], [self.north, self.east]]


def union_bounds(parts: Iterable[Bounds | None]) -> Bounds | None:
    result: Bounds | None = None
    for part in parts:
        if part is None:
            continue
        result = part if result is None else result.extend(part)
    return result


__all__ = ["Bounds", "LngLat", "union_bounds"]
