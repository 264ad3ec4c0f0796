import os
import sys

import pytest

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from map_address_search.app_state import AppState  # noqa: E402
from map_address_search.geocoding_base import GeocodeResult, STATUS_OK  # noqa: E402
from map_address_search.map_geometry import Coordinate  # noqa: E402
from map_address_search.settings_store import SettingsStore  # noqa: E402


class SyncRunner:
    """Runs the lookup inline and calls back immediately."""

    def __init__(self):
        self.submitted = []

    def submit(self, query, geocode_fn, callback):
        self.submitted.append(query)
        callback(geocode_fn(query))


class DeferredRunner:
    """Holds searches until the test completes them, in any order."""

    def __init__(self):
        self.pending = []

    def submit(self, query, geocode_fn, callback):
        self.pending.append((query, geocode_fn, callback))

    def complete(self, index):
        query, geocode_fn, callback = self.pending[index]
        callback(geocode_fn(query))


class FakeGeocoder:
    def __init__(self, results=None):
        self.results = dict(results or {})
        self.queries = []

    def geocode(self, address):
        self.queries.append(address)
        return self.results.get(address, GeocodeResult.failure('No result'))


def place(locality='Beverly Hills', sub_region='Los Angeles County', region='CA',
          country_code='US', coordinate=Coordinate(34.0901, -118.4065)):
    return GeocodeResult(
        status=STATUS_OK,
        locality=locality,
        sub_region=sub_region,
        region=region,
        country_code=country_code,
        coordinate=coordinate,
    )


@pytest.fixture
def store(tmp_path):
    return SettingsStore.from_file(str(tmp_path / 'prefs.ini'))


@pytest.fixture
def state():
    return AppState()


@pytest.fixture
def sync_runner():
    return SyncRunner()


@pytest.fixture
def deferred_runner():
    return DeferredRunner()
