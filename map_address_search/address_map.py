# -*- coding: utf-8 -*-
"""Single-address map panel: geocodes an address and centres the camera on it."""
from __future__ import annotations
import logging
from typing import Callable, Optional
from .app_state import AppState
from .geocode_task import RequestSequencer, SearchRunner
from .geocoding_base import GeocodeResult, IGeocoder
from .map_content import MapContent, Marker
from .map_geometry import Coordinate, Region, Span
from .map_styles import MapStyle, resolve_style, traffic_toggle_enabled

logger = logging.getLogger(__name__)

INITIAL_REGION = Region(Coordinate(51.507222, -0.1275), Span(1.0, 1.0))
SEARCH_SPAN = Span(0.009, 0.009)
MARKER_TITLE = 'Location'


class AddressMapController:
    def __init__(
        self,
        state: AppState,
        geocoder: IGeocoder,
        runner: SearchRunner,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.state = state
        self.geocoder = geocoder
        self.runner = runner
        self.on_change = on_change
        self.camera: Region = INITIAL_REGION
        # bumped whenever a search sets the camera, even to the same region
        self.camera_serial = 0
        self.marker: Optional[Marker] = None
        self.sequencer = RequestSequencer()

    def set_query(self, text: str):
        self.state.address_to_search = text

    def search(self) -> int:
        token = self.sequencer.next_token()
        query = self.state.address_to_search
        logger.debug("Address search #%d for '%s'", token, query)
        self.runner.submit(query, self.geocoder.geocode, lambda res: self._apply(token, res))
        return token

    def _apply(self, token: int, result: GeocodeResult):
        if not self.sequencer.is_latest(token):
            logger.info('Discarding stale address search result #%d', token)
            return
        if not result.ok:
            logger.info('Address search failed: %s', result.error)
            return
        if result.coordinate is None:
            logger.warning('Address search result has no coordinate; camera unchanged')
            return
        self.camera = Region.around(result.coordinate, SEARCH_SPAN)
        self.camera_serial += 1
        self.marker = Marker(MARKER_TITLE, result.coordinate)
        logger.info('Camera moved to %s', self.camera)
        self._changed()

    # ---- style picker / traffic toggle ----
    def select_style(self, index: int):
        self.state.selected_map_style_index = index
        self._changed()

    def set_traffic(self, on: bool):
        self.state.is_traffic_on = on
        self._changed()

    def traffic_toggle_enabled(self) -> bool:
        return traffic_toggle_enabled(self.state.selected_map_style_index)

    def current_style(self) -> MapStyle:
        return resolve_style(self.state.selected_map_style_index, self.state.is_traffic_on)

    def map_content(self) -> MapContent:
        markers = [self.marker] if self.marker else []
        return MapContent(self.camera, markers=markers, style=self.current_style())

    def on_camera_changed(self, region: Region):
        # observer only, the requested camera stays as the last search set it
        logger.info('Map camera changed: %s', region)

    def _changed(self):
        if self.on_change:
            self.on_change()
