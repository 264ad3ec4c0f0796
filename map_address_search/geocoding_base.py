# -*- coding: utf-8 -*-
"""Geocoding base interfaces.
Defines the geocoder protocol and the place result shared by all providers.
Providers never raise for lookup problems; they return a FAIL result instead.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .map_geometry import Coordinate

STATUS_OK = 'OK'
STATUS_FAIL = 'FAIL'


@dataclass
class GeocodeResult:
    status: str  # OK / FAIL
    raw: dict = field(default_factory=dict)
    locality: Optional[str] = None
    sub_region: Optional[str] = None
    region: Optional[str] = None
    country_code: Optional[str] = None
    coordinate: Optional[Coordinate] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK

    def missing_place_fields(self) -> list[str]:
        """Names of the place fields the provider did not return."""
        names = ('locality', 'sub_region', 'region', 'country_code')
        return [n for n in names if not getattr(self, n)]

    @classmethod
    def failure(cls, error: str, raw: Optional[dict] = None) -> 'GeocodeResult':
        return cls(status=STATUS_FAIL, raw=raw or {}, error=error)


class IGeocoder(Protocol):
    def geocode(self, address: str) -> GeocodeResult: ...
