# -*- coding: utf-8 -*-
"""Nominatim geocoder implementation with simple in-memory cache and rate limiting.
Respect usage policy: one request per second (fixed).
"""
from __future__ import annotations
import json
import logging
import threading
import time
import urllib.parse
import urllib.request
from collections import OrderedDict
from typing import Optional
from .geocoding_base import GeocodeResult, IGeocoder, STATUS_OK
from .map_geometry import Coordinate

logger = logging.getLogger(__name__)

# first key present wins
LOCALITY_KEYS = ('city', 'town', 'village', 'hamlet', 'municipality', 'suburb')
# oldest entries are evicted past this many cached results
CACHE_SIZE = 256


def parse_place(item: dict) -> GeocodeResult:
    """Build a result from one jsonv2 search item requested with addressdetails=1."""
    try:
        coordinate = Coordinate(float(item['lat']), float(item['lon']))
    except (KeyError, TypeError, ValueError):
        return GeocodeResult.failure('Parse error', raw=item)
    address = item.get('address') or {}
    locality = next((address[k] for k in LOCALITY_KEYS if address.get(k)), None)
    # ISO3166-2-lvl4 looks like "US-CA"; prefer the short subdivision code
    region = None
    iso = address.get('ISO3166-2-lvl4') or ''
    if '-' in iso:
        region = iso.split('-', 1)[1]
    if not region:
        region = address.get('state')
    country_code = address.get('country_code')
    return GeocodeResult(
        status=STATUS_OK,
        raw=item,
        locality=locality,
        sub_region=address.get('county'),
        region=region,
        country_code=country_code.upper() if country_code else None,
        coordinate=coordinate,
    )


class NominatimGeocoder(IGeocoder):
    BASE_URL = 'https://nominatim.openstreetmap.org/search'

    def __init__(self, user_agent: str, timeout: float = 15):
        self.rate = 1.0
        self.user_agent = user_agent
        self.timeout = timeout
        self._last_request_ts = 0.0
        self._lock = threading.Lock()
        self.cache_size = CACHE_SIZE
        self._cache: "OrderedDict[str, GeocodeResult]" = OrderedDict()

    def _throttle(self):
        if self.rate <= 0:
            return
        min_interval = 1.0 / self.rate
        with self._lock:
            now = time.monotonic()
            wait = self._last_request_ts + min_interval - now
            if wait > 0:
                time.sleep(wait)
            self._last_request_ts = time.monotonic()

    def geocode(self, address: str) -> GeocodeResult:
        key = address.strip()
        if not key:
            return GeocodeResult.failure('Empty address')
        cached: Optional[GeocodeResult] = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return cached
        # the placeholder user agent is rejected by the usage policy, fail early
        if 'set your email' in self.user_agent.lower():
            logger.warning('Nominatim user agent is not configured; set a contact e-mail in settings')
            return GeocodeResult.failure('User-Agent (email) not configured')
        self._throttle()
        params = {
            'q': key,
            'format': 'jsonv2',
            'limit': 1,
            'addressdetails': 1,
        }
        url = self.BASE_URL + '?' + urllib.parse.urlencode(params)
        headers = {
            'User-Agent': self.user_agent,
            'Accept-Language': 'en',
        }
        req = urllib.request.Request(url, headers=headers)
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                data = resp.read().decode('utf-8', 'replace')
            parsed = json.loads(data)
        except Exception as e:
            logger.warning("Nominatim request failed for '%s': %s", key, e)
            return GeocodeResult.failure(str(e))
        if not parsed:
            return GeocodeResult.failure('No result')
        res = parse_place(parsed[0])
        # failures may be transient, only successes are cached
        if res.ok:
            self._cache[key] = res
            while len(self._cache) > self.cache_size:
                self._cache.popitem(last=False)
        return res
