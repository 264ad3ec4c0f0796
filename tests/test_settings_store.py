"""Tests for preference persistence through SettingsStore and AppState."""

from map_address_search.app_state import AppState, TAB_TAGS
from map_address_search.settings_store import SettingsStore


class TestSettingsStore:
    def test_defaults_on_empty_store(self, store):
        assert store.get_zip_code_to_search() == ''
        assert store.get_address_to_open() == ''
        assert store.get_address_to_search() == ''
        assert store.get_selected_tab() == 'ZipSearch'
        assert store.get_selected_map_style_index() == 0
        assert store.get_is_traffic_on() is False
        assert store.get_provider() == 'nominatim'
        assert store.get_user_agent() == SettingsStore.DEFAULT_USER_AGENT
        assert store.get_api_key() == ''
        assert store.get_maps_base_url() == 'http://maps.apple.com/'

    def test_values_survive_reopening(self, tmp_path):
        path = str(tmp_path / 'prefs.ini')
        first = SettingsStore.from_file(path)
        first.set_zip_code_to_search('90210')
        first.set_selected_map_style_index(2)
        first.set_is_traffic_on(True)
        first.set_provider('google')
        first.set_api_key('secret')
        first.sync()

        second = SettingsStore.from_file(path)
        assert second.get_zip_code_to_search() == '90210'
        assert second.get_selected_map_style_index() == 2
        assert second.get_is_traffic_on() is True
        assert second.get_provider() == 'google'
        assert second.get_api_key() == 'secret'

    def test_empty_value_restores_default(self, store):
        store.set_user_agent('MapAddressSearch (me@example.com)')
        assert store.get_user_agent() == 'MapAddressSearch (me@example.com)'
        store.set_user_agent('')
        assert store.get_user_agent() == SettingsStore.DEFAULT_USER_AGENT

    def test_garbage_style_index_reads_as_zero(self, store):
        store.qs.setValue(SettingsStore.KEY_SELECTED_MAP_STYLE_INDEX, 'hybrid')
        assert store.get_selected_map_style_index() == 0


class TestAppState:
    def test_round_trip(self, tmp_path):
        path = str(tmp_path / 'prefs.ini')
        state = AppState(
            zip_code_to_search='10001',
            address_to_open='1 Infinite Loop',
            address_to_search='Tower Bridge',
            selected_tab='SearchAddress',
            selected_map_style_index=1,
            is_traffic_on=True,
        )
        state.save(SettingsStore.from_file(path))
        assert AppState.load(SettingsStore.from_file(path)) == state

    def test_defaults(self, store):
        assert AppState.load(store) == AppState()

    def test_unknown_tab_falls_back_to_zip_search(self, store):
        store.set_selected_tab('Settings')
        assert AppState.load(store).selected_tab == 'ZipSearch'

    def test_every_tab_tag_is_restored(self, store):
        for tag in TAB_TAGS:
            store.set_selected_tab(tag)
            assert AppState.load(store).selected_tab == tag
