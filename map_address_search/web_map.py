"""Export a panel's map content as an interactive Leaflet map (folium)."""
from __future__ import annotations

import html
import logging
import math
import os
import tempfile
from typing import Optional

import folium

from .map_content import MapContent
from .map_geometry import Span

logger = logging.getLogger(__name__)

ESRI_IMAGERY = 'https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}'
ESRI_LABELS = ('https://server.arcgisonline.com/ArcGIS/rest/services/Reference/'
               'World_Boundaries_and_Places/MapServer/tile/{z}/{y}/{x}')
ESRI_ATTR = 'Tiles &copy; Esri'

ANNOTATION_HTML = (
    '<div style="display:inline-block;white-space:nowrap;padding:4px 10px;'
    'border-radius:12px;background:#1e6fd9;color:#fff;font-weight:bold;">{title}</div>'
)


def zoom_for_span(span: Span) -> int:
    """Leaflet zoom level showing roughly ``span`` across the viewport."""
    delta = max(span.longitude_delta, span.latitude_delta, 1e-6)
    return int(min(18, max(1, round(math.log2(360.0 / delta)))))


def _add_tiles(m: folium.Map, style_id: str):
    if style_id == 'standard':
        folium.TileLayer('OpenStreetMap').add_to(m)
        return
    folium.TileLayer(tiles=ESRI_IMAGERY, attr=ESRI_ATTR, name='Imagery').add_to(m)
    if style_id == 'hybrid':
        folium.TileLayer(tiles=ESRI_LABELS, attr=ESRI_ATTR, name='Labels', overlay=True).add_to(m)


def build_web_map(content: MapContent) -> folium.Map:
    center = content.region.center
    m = folium.Map(
        location=[center.latitude, center.longitude],
        zoom_start=zoom_for_span(content.region.span),
        tiles=None,
    )
    _add_tiles(m, content.style.style_id)
    for marker in content.markers:
        c = marker.coordinate
        folium.Marker([c.latitude, c.longitude], tooltip=marker.title, popup=marker.title).add_to(m)
    for ann in content.annotations:
        c = ann.coordinate
        folium.Marker(
            [c.latitude, c.longitude],
            icon=folium.DivIcon(html=ANNOTATION_HTML.format(title=html.escape(ann.title))),
            tooltip=None if ann.hide_title else ann.title,
        ).add_to(m)
    return m


def export_web_map(content: MapContent, path: Optional[str] = None) -> str:
    """Write the map as a standalone HTML file and return its path."""
    if path is None:
        fd, path = tempfile.mkstemp(prefix='map_address_search_', suffix='.html')
        os.close(fd)
    build_web_map(content).save(path)
    logger.info('Web map written to %s', path)
    return path
