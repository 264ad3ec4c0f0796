"""Tests for the zip code search panel."""

import logging

import pytest

from map_address_search.geocoding_base import GeocodeResult
from map_address_search.zip_search import PlaceDisplay, ZipSearchController

from conftest import FakeGeocoder, place


@pytest.fixture
def geocoder():
    return FakeGeocoder({
        '90210': place(),
        '10001': place('New York', 'New York County', 'NY', 'US'),
        '99999': place(sub_region=None),
    })


class TestAvailability:
    @pytest.mark.parametrize('text', ['', '9', '90', '902', '9021'])
    def test_short_queries_cannot_search(self, state, sync_runner, geocoder, text):
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query(text)
        assert not ctl.can_search()
        assert ctl.search() is None
        assert sync_runner.submitted == []

    @pytest.mark.parametrize('text', ['90210', '90210-1234', 'SW1A 1AA'])
    def test_five_or_more_characters_can_search(self, state, sync_runner, geocoder, text):
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query(text)
        assert ctl.can_search()

    def test_query_is_kept_in_app_state(self, state, sync_runner, geocoder):
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query('90210')
        assert state.zip_code_to_search == '90210'


class TestResults:
    def test_beverly_hills_end_to_end(self, state, sync_runner, geocoder):
        changes = []
        ctl = ZipSearchController(state, geocoder, sync_runner, on_change=lambda: changes.append(1))
        ctl.set_query('90210')
        ctl.search()
        assert geocoder.queries == ['90210']
        assert ctl.display == PlaceDisplay(
            city='Beverly Hills',
            county='Los Angeles County',
            state='CA',
            country_code='US',
        )
        assert changes == [1]

    def test_next_search_overwrites_display(self, state, sync_runner, geocoder):
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query('90210')
        ctl.search()
        ctl.set_query('10001')
        ctl.search()
        assert ctl.display.city == 'New York'
        assert ctl.display.state == 'NY'

    def test_missing_field_keeps_previous_display(self, state, sync_runner, geocoder, caplog):
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query('90210')
        ctl.search()
        before = ctl.display
        ctl.set_query('99999')
        with caplog.at_level(logging.WARNING):
            ctl.search()
        assert ctl.display == before
        assert 'sub_region' in caplog.text

    def test_missing_fields_on_first_search_keep_empty_display(self, state, sync_runner):
        geocoder = FakeGeocoder({'00000': place(locality=None, region=None, country_code=None)})
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query('00000')
        ctl.search()
        assert ctl.display == PlaceDisplay()

    def test_failed_lookup_keeps_previous_display(self, state, sync_runner, geocoder):
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query('90210')
        ctl.search()
        ctl.set_query('12345')
        ctl.search()
        assert ctl.display.city == 'Beverly Hills'

    def test_stale_result_does_not_overwrite_later_search(self, state, deferred_runner, geocoder):
        ctl = ZipSearchController(state, geocoder, deferred_runner)
        ctl.set_query('90210')
        first = ctl.search()
        ctl.set_query('10001')
        second = ctl.search()
        assert second > first
        deferred_runner.complete(1)
        deferred_runner.complete(0)
        assert ctl.display.city == 'New York'

    def test_query_edit_keeps_displayed_result(self, state, sync_runner, geocoder):
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query('90210')
        ctl.search()
        ctl.set_query('1')
        assert ctl.display.city == 'Beverly Hills'

    def test_ok_result_without_fields_keeps_empty_display(self, state, sync_runner):
        geocoder = FakeGeocoder({'55555': GeocodeResult(status='OK')})
        ctl = ZipSearchController(state, geocoder, sync_runner)
        ctl.set_query('55555')
        ctl.search()
        assert ctl.display == PlaceDisplay()
