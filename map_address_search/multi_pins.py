"""Multi-pin panel: a fixed set of named places drawn as markers and labels."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .map_content import Annotation, MapContent, Marker
from .map_geometry import Coordinate, Region, local_to_coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PinLocation:
    name: str
    coordinate: Coordinate


PIN_LOCATIONS = (
    PinLocation("Buckingham Palace", Coordinate(51.501, -0.141)),
    PinLocation("Tower of London", Coordinate(51.508, -0.076)),
)


class MultiPinController:
    def __init__(self, pins=PIN_LOCATIONS):
        self.pins = tuple(pins)
        self.region = Region.fitting(p.coordinate for p in self.pins)

    def map_content(self) -> MapContent:
        return MapContent(
            self.region,
            markers=[Marker(p.name, p.coordinate) for p in self.pins],
            annotations=[Annotation(p.name, p.coordinate) for p in self.pins],
        )

    def handle_tap(self, x: float, y: float, viewport: Tuple[float, float],
                   region: Optional[Region] = None) -> Optional[Coordinate]:
        """Coordinate under a view-local tap position, or None outside the map."""
        coordinate = local_to_coordinate(region or self.region, viewport, x, y)
        if coordinate is not None:
            logger.info('Tapped map at %s', coordinate)
        return coordinate
