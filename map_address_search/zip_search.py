# -*- coding: utf-8 -*-
"""Zip code search panel: looks up a zip code and shows the place it belongs to."""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional
from .app_state import AppState
from .geocode_task import RequestSequencer, SearchRunner
from .geocoding_base import GeocodeResult, IGeocoder

logger = logging.getLogger(__name__)

MIN_ZIP_LENGTH = 5


@dataclass
class PlaceDisplay:
    city: str = ''
    county: str = ''
    state: str = ''
    country_code: str = ''


class ZipSearchController:
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
        self.display = PlaceDisplay()
        self.sequencer = RequestSequencer()

    @property
    def query(self) -> str:
        return self.state.zip_code_to_search

    def set_query(self, text: str):
        self.state.zip_code_to_search = text

    def can_search(self) -> bool:
        return len(self.state.zip_code_to_search) >= MIN_ZIP_LENGTH

    def search(self) -> Optional[int]:
        """Start a lookup of the current query; returns its request token."""
        if not self.can_search():
            return None
        token = self.sequencer.next_token()
        query = self.state.zip_code_to_search
        logger.debug("Zip search #%d for '%s'", token, query)
        self.runner.submit(query, self.geocoder.geocode, lambda res: self._apply(token, res))
        return token

    def _apply(self, token: int, result: GeocodeResult):
        if not self.sequencer.is_latest(token):
            logger.info('Discarding stale zip search result #%d', token)
            return
        if not result.ok:
            logger.info('Zip search failed: %s', result.error)
            return
        missing = result.missing_place_fields()
        if missing:
            logger.warning('Zip search result is missing %s; keeping previous values', ', '.join(missing))
            return
        self.display = PlaceDisplay(
            city=result.locality,
            county=result.sub_region,
            state=result.region,
            country_code=result.country_code,
        )
        logger.info('Zip search result: %s', self.display)
        if self.on_change:
            self.on_change()
