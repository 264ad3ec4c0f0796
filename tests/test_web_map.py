"""Tests for the folium web map export."""

import os

from map_address_search.map_content import MapContent
from map_address_search.map_geometry import Span
from map_address_search.map_styles import MapStyle
from map_address_search.multi_pins import MultiPinController
from map_address_search.web_map import ESRI_IMAGERY, build_web_map, export_web_map, zoom_for_span


def test_zoom_for_span():
    assert zoom_for_span(Span(0.009, 0.009)) == 15
    assert zoom_for_span(Span(1.0, 1.0)) == 8
    assert zoom_for_span(Span(170.0, 360.0)) == 1


def test_pins_and_labels_are_rendered():
    html = build_web_map(MultiPinController().map_content()).get_root().render()
    assert 'Buckingham Palace' in html
    assert 'Tower of London' in html


def test_standard_style_uses_openstreetmap():
    content = MultiPinController().map_content()
    html = build_web_map(content).get_root().render()
    assert 'openstreetmap' in html.lower()


def test_imagery_style_uses_esri_tiles():
    base = MultiPinController().map_content()
    content = MapContent(base.region, base.markers, base.annotations, MapStyle('imagery'))
    html = build_web_map(content).get_root().render()
    assert ESRI_IMAGERY in html
    assert 'World_Boundaries_and_Places' not in html


def test_hybrid_style_adds_labels():
    base = MultiPinController().map_content()
    content = MapContent(base.region, style=MapStyle('hybrid'))
    html = build_web_map(content).get_root().render()
    assert 'World_Boundaries_and_Places' in html


def test_export_writes_html(tmp_path):
    path = export_web_map(MultiPinController().map_content(), str(tmp_path / 'pins.html'))
    assert os.path.exists(path)
    with open(path, encoding='utf-8') as f:
        assert 'Tower of London' in f.read()
