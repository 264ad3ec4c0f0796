# -*- coding: utf-8 -*-
"""Google Geocoding API implementation.
Uses API key from settings. No fallback to other providers.
Place fields come from address_components (first component of each type wins).
"""
from __future__ import annotations
import json
import logging
import threading
import time
import urllib.parse
import urllib.request
from typing import Dict, Optional
from .geocoding_base import GeocodeResult, IGeocoder, STATUS_OK
from .map_geometry import Coordinate

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    'ZERO_RESULTS': 'Zero results',
    'OVER_QUERY_LIMIT': 'Over query limit',
    'REQUEST_DENIED': 'Request denied',
    'INVALID_REQUEST': 'Invalid request',
}


def _components_by_type(components: list) -> Dict[str, dict]:
    type_map: Dict[str, dict] = {}
    for c in components:
        if not isinstance(c, dict):
            continue
        for t in c.get('types') or []:
            type_map.setdefault(t, c)
    return type_map


def parse_place(item: dict) -> GeocodeResult:
    try:
        loc = item['geometry']['location']
        coordinate = Coordinate(float(loc['lat']), float(loc['lng']))
    except (KeyError, TypeError, ValueError):
        return GeocodeResult.failure('Parse error', raw=item)
    comps = _components_by_type(item.get('address_components') or [])

    def long_name(*types: str) -> Optional[str]:
        for t in types:
            if t in comps:
                return comps[t].get('long_name') or None
        return None

    def short_name(t: str) -> Optional[str]:
        if t not in comps:
            return None
        return comps[t].get('short_name') or None

    return GeocodeResult(
        status=STATUS_OK,
        raw=item,
        locality=long_name('locality', 'postal_town', 'sublocality'),
        sub_region=long_name('administrative_area_level_2'),
        region=short_name('administrative_area_level_1'),
        country_code=short_name('country'),
        coordinate=coordinate,
    )


class GoogleGeocoder(IGeocoder):
    BASE_URL = 'https://maps.googleapis.com/maps/api/geocode/json'

    def __init__(self, api_key: str, timeout: float = 20):
        self.api_key = api_key
        self.timeout = timeout
        self._last_ts = 0.0
        self._lock = threading.Lock()
        # small courtesy pause to avoid hammering (not official rate control)
        self._min_interval = 0.05

    def _throttle(self):
        with self._lock:
            now = time.monotonic()
            wait = self._last_ts + self._min_interval - now
            if wait > 0:
                time.sleep(wait)
            self._last_ts = time.monotonic()

    def geocode(self, address: str) -> GeocodeResult:  # type: ignore[override]
        addr = address.strip()
        if not addr:
            return GeocodeResult.failure('Empty address')
        if not self.api_key:
            return GeocodeResult.failure('Missing Google API key')
        self._throttle()
        params = {'address': addr, 'key': self.api_key}
        url = self.BASE_URL + '?' + urllib.parse.urlencode(params)
        req = urllib.request.Request(url)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                data = resp.read().decode('utf-8', 'replace')
            js = json.loads(data)
        except Exception as e:
            logger.warning("Google geocoding request failed for '%s': %s", addr, e)
            return GeocodeResult.failure(str(e))
        status = js.get('status')
        if status != 'OK':
            msg = STATUS_MESSAGES.get(status, status or 'Unknown status')
            logger.info("Google geocoding returned %s for '%s'", status, addr)
            return GeocodeResult.failure(msg, raw=js)
        results = js.get('results') or []
        if not results:
            return GeocodeResult.failure('Empty results', raw=js)
        return parse_place(results[0])
