# -*- coding: utf-8 -*-
"""Map geometry: coordinates, camera regions and the Web Mercator projection
used to convert between view-local pixels and geographic coordinates.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

# Web Mercator cannot represent the poles
MAX_LATITUDE = 85.05112878
MIN_SPAN = 1e-5


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


@dataclass(frozen=True)
class Span:
    latitude_delta: float
    longitude_delta: float


@dataclass(frozen=True)
class Region:
    center: Coordinate
    span: Span

    @property
    def north(self) -> float:
        return clamp_latitude(self.center.latitude + self.span.latitude_delta / 2.0)

    @property
    def south(self) -> float:
        return clamp_latitude(self.center.latitude - self.span.latitude_delta / 2.0)

    @property
    def west(self) -> float:
        return self.center.longitude - self.span.longitude_delta / 2.0

    @property
    def east(self) -> float:
        return self.center.longitude + self.span.longitude_delta / 2.0

    @classmethod
    def around(cls, center: Coordinate, span: Span) -> 'Region':
        """Region of ``span`` around ``center``, pulled back inside the Mercator limit."""
        limit = max(MAX_LATITUDE - span.latitude_delta / 2.0, 0.0)
        lat = max(-limit, min(limit, center.latitude))
        if lat != center.latitude:
            center = Coordinate(lat, center.longitude)
        return cls(center, span)

    @classmethod
    def fitting(cls, coordinates: Iterable[Coordinate], padding: float = 1.5,
                min_span: float = 0.01) -> 'Region':
        """Smallest region framing all coordinates, enlarged by ``padding``."""
        coords = list(coordinates)
        if not coords:
            raise ValueError('Cannot fit a region to no coordinates')
        lats = [c.latitude for c in coords]
        lons = [c.longitude for c in coords]
        center = Coordinate((min(lats) + max(lats)) / 2.0, (min(lons) + max(lons)) / 2.0)
        span = Span(
            max((max(lats) - min(lats)) * padding, min_span),
            max((max(lons) - min(lons)) * padding, min_span),
        )
        return cls.around(center, span)

    def __str__(self) -> str:
        return (f"center={self.center} span=({self.span.latitude_delta:.6f}, "
                f"{self.span.longitude_delta:.6f})")


def clamp_latitude(lat: float) -> float:
    return max(-MAX_LATITUDE, min(MAX_LATITUDE, lat))


def mercator_y(lat: float) -> float:
    rad = math.radians(clamp_latitude(lat))
    return math.log(math.tan(math.pi / 4.0 + rad / 2.0))


def inverse_mercator_y(y: float) -> float:
    return math.degrees(2.0 * math.atan(math.exp(y)) - math.pi / 2.0)


# ---- projection ----
def local_to_coordinate(region: Region, size: Tuple[float, float], x: float, y: float) -> Optional[Coordinate]:
    """Convert a view-local position (origin top-left) into a coordinate.

    Returns None when the viewport is empty or the position lies outside it.
    """
    width, height = size
    if width <= 0 or height <= 0:
        return None
    if not (0 <= x <= width and 0 <= y <= height):
        return None
    lon = region.west + (x / width) * region.span.longitude_delta
    top = mercator_y(region.north)
    bottom = mercator_y(region.south)
    my = top - (y / height) * (top - bottom)
    return Coordinate(inverse_mercator_y(my), lon)


def coordinate_to_local(region: Region, size: Tuple[float, float], coordinate: Coordinate) -> Tuple[float, float]:
    """Inverse of :func:`local_to_coordinate`; may fall outside the viewport."""
    width, height = size
    x = (coordinate.longitude - region.west) / region.span.longitude_delta * width
    top = mercator_y(region.north)
    bottom = mercator_y(region.south)
    if top == bottom:
        return x, height / 2.0
    y = (top - mercator_y(coordinate.latitude)) / (top - bottom) * height
    return x, y


# ---- camera gestures ----
def pan(region: Region, size: Tuple[float, float], dx: float, dy: float) -> Region:
    """Region after dragging the map content by (dx, dy) pixels."""
    width, height = size
    if width <= 0 or height <= 0:
        return region
    lon = region.center.longitude - dx / width * region.span.longitude_delta
    # wrap into [-180, 180)
    lon = (lon + 180.0) % 360.0 - 180.0
    top = mercator_y(region.north)
    bottom = mercator_y(region.south)
    my = mercator_y(region.center.latitude) + dy / height * (top - bottom)
    return Region.around(Coordinate(inverse_mercator_y(my), lon), region.span)


def zoom(region: Region, factor: float) -> Region:
    """Scale the span by ``factor`` (<1 zooms in) around the same center."""
    lat_delta = min(max(region.span.latitude_delta * factor, MIN_SPAN), 2 * MAX_LATITUDE)
    lon_delta = min(max(region.span.longitude_delta * factor, MIN_SPAN), 360.0)
    return Region.around(region.center, Span(lat_delta, lon_delta))
