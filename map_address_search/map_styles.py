"""Map style registry: picker order, display names and style resolution."""
from __future__ import annotations

from dataclasses import dataclass

# Ordered list of (internal_id, display_name); the picker index is the position
MAP_STYLES = [
    ("standard", "Standard"),
    ("hybrid", "Hybrid"),
    ("imagery", "Imagery"),
]

# styles that can draw a traffic overlay
_TRAFFIC_CAPABLE = {"standard", "hybrid"}


@dataclass(frozen=True)
class MapStyle:
    style_id: str
    shows_traffic: bool = False

    @property
    def display_name(self) -> str:
        return dict(MAP_STYLES)[self.style_id]


def style_id_at(index: int) -> str:
    if 0 <= index < len(MAP_STYLES):
        return MAP_STYLES[index][0]
    return MAP_STYLES[0][0]


def resolve_style(index: int, traffic_on: bool) -> MapStyle:
    """Effective style for a picker index and the stored traffic flag.

    Out-of-range indexes resolve to Standard. Imagery never shows traffic,
    whatever the flag says.
    """
    sid = style_id_at(index)
    return MapStyle(sid, shows_traffic=traffic_on and sid in _TRAFFIC_CAPABLE)


def traffic_toggle_enabled(index: int) -> bool:
    return style_id_at(index) in _TRAFFIC_CAPABLE
