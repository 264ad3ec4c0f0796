"""What a panel asks the map to draw: camera region, markers and annotations."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .map_geometry import Coordinate, Region
from .map_styles import MapStyle


@dataclass(frozen=True)
class Marker:
    title: str
    coordinate: Coordinate


@dataclass(frozen=True)
class Annotation:
    title: str
    coordinate: Coordinate
    hide_title: bool = True


@dataclass
class MapContent:
    region: Region
    markers: List[Marker] = field(default_factory=list)
    annotations: List[Annotation] = field(default_factory=list)
    style: MapStyle = field(default_factory=lambda: MapStyle("standard"))
