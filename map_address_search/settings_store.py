# -*- coding: utf-8 -*-
"""Key-value preference store backed by QSettings."""
from __future__ import annotations
from typing import Optional
from PyQt5.QtCore import QSettings

ORG = 'MapAddressSearch'
APP = 'MapAddressSearch'


class SettingsStore:
    def __init__(self, qs: Optional[QSettings] = None):
        self.qs = qs if qs is not None else QSettings(ORG, APP)

    @classmethod
    def from_file(cls, path: str) -> 'SettingsStore':
        return cls(QSettings(path, QSettings.IniFormat))

    # Preference keys
    KEY_ZIP_CODE_TO_SEARCH = 'zipCodeToSearch'
    KEY_ADDRESS_TO_OPEN = 'addressToOpen'
    KEY_ADDRESS_TO_SEARCH = 'addressToSearch'
    KEY_SELECTED_TAB = 'selectedTab'
    KEY_SELECTED_MAP_STYLE_INDEX = 'selectedMapStyleIndex'
    KEY_IS_TRAFFIC_ON = 'isTrafficOn'
    # Provider configuration
    KEY_PROVIDER = 'geocode/provider'
    KEY_USER_AGENT = 'geocode/user_agent'
    KEY_API_KEY = 'geocode/api_key'
    KEY_MAPS_BASE_URL = 'link/maps_base_url'

    DEFAULT_SELECTED_TAB = 'ZipSearch'
    DEFAULT_PROVIDER = 'nominatim'
    DEFAULT_USER_AGENT = 'MapAddressSearch/0.1 (set your email)'
    DEFAULT_MAPS_BASE_URL = 'http://maps.apple.com/'

    def sync(self):
        self.qs.sync()

    # ---- preferences ----
    def get_zip_code_to_search(self) -> str:
        return self.qs.value(self.KEY_ZIP_CODE_TO_SEARCH, '', type=str)

    def set_zip_code_to_search(self, val: str):
        self.qs.setValue(self.KEY_ZIP_CODE_TO_SEARCH, val)

    def get_address_to_open(self) -> str:
        return self.qs.value(self.KEY_ADDRESS_TO_OPEN, '', type=str)

    def set_address_to_open(self, val: str):
        self.qs.setValue(self.KEY_ADDRESS_TO_OPEN, val)

    def get_address_to_search(self) -> str:
        return self.qs.value(self.KEY_ADDRESS_TO_SEARCH, '', type=str)

    def set_address_to_search(self, val: str):
        self.qs.setValue(self.KEY_ADDRESS_TO_SEARCH, val)

    def get_selected_tab(self) -> str:
        return self.qs.value(self.KEY_SELECTED_TAB, self.DEFAULT_SELECTED_TAB, type=str)

    def set_selected_tab(self, val: str):
        self.qs.setValue(self.KEY_SELECTED_TAB, val)

    def get_selected_map_style_index(self) -> int:
        try:
            return int(self.qs.value(self.KEY_SELECTED_MAP_STYLE_INDEX, 0))
        except (TypeError, ValueError):
            return 0

    def set_selected_map_style_index(self, val: int):
        self.qs.setValue(self.KEY_SELECTED_MAP_STYLE_INDEX, int(val))

    def get_is_traffic_on(self) -> bool:
        try:
            return bool(int(self.qs.value(self.KEY_IS_TRAFFIC_ON, 0)))
        except (TypeError, ValueError):
            return False

    def set_is_traffic_on(self, flag: bool):
        self.qs.setValue(self.KEY_IS_TRAFFIC_ON, 1 if flag else 0)

    # ---- provider configuration ----
    def get_provider(self) -> str:
        return self.qs.value(self.KEY_PROVIDER, self.DEFAULT_PROVIDER, type=str)

    def set_provider(self, val: str):
        self._set_or_remove(self.KEY_PROVIDER, val)

    def get_user_agent(self) -> str:
        return self.qs.value(self.KEY_USER_AGENT, self.DEFAULT_USER_AGENT, type=str)

    def set_user_agent(self, val: str):
        self._set_or_remove(self.KEY_USER_AGENT, val)

    def get_api_key(self) -> str:
        return self.qs.value(self.KEY_API_KEY, '', type=str)

    def set_api_key(self, val: str):
        self._set_or_remove(self.KEY_API_KEY, val)

    def get_maps_base_url(self) -> str:
        return self.qs.value(self.KEY_MAPS_BASE_URL, self.DEFAULT_MAPS_BASE_URL, type=str)

    def set_maps_base_url(self, val: str):
        self._set_or_remove(self.KEY_MAPS_BASE_URL, val)

    def _set_or_remove(self, key: str, val: str):
        # an empty value drops the key so the default applies again
        if not val:
            self.qs.remove(key)
        else:
            self.qs.setValue(key, val)

