# -*- coding: utf-8 -*-
"""Application state shared by the panels.

Loaded from the settings store once at startup and written back once at
shutdown; panels only ever mutate this object.
"""
from __future__ import annotations

from dataclasses import dataclass

from .settings_store import SettingsStore

# Ordered list of (tag, tab label)
TABS = [
    ("ZipSearch", "Zip Search"),
    ("OpenAppleMaps", "Apple Maps"),
    ("SearchAddress", "MapView Search"),
    ("MultipleLocations", "Multiple Pins"),
]

TAB_TAGS = [tag for tag, _ in TABS]


@dataclass
class AppState:
    zip_code_to_search: str = ""
    address_to_open: str = ""
    address_to_search: str = ""
    selected_tab: str = SettingsStore.DEFAULT_SELECTED_TAB
    selected_map_style_index: int = 0
    is_traffic_on: bool = False

    @classmethod
    def load(cls, store: SettingsStore) -> 'AppState':
        tab = store.get_selected_tab()
        if tab not in TAB_TAGS:
            tab = SettingsStore.DEFAULT_SELECTED_TAB
        return cls(
            zip_code_to_search=store.get_zip_code_to_search(),
            address_to_open=store.get_address_to_open(),
            address_to_search=store.get_address_to_search(),
            selected_tab=tab,
            selected_map_style_index=store.get_selected_map_style_index(),
            is_traffic_on=store.get_is_traffic_on(),
        )

    def save(self, store: SettingsStore) -> None:
        store.set_zip_code_to_search(self.zip_code_to_search)
        store.set_address_to_open(self.address_to_open)
        store.set_address_to_search(self.address_to_search)
        store.set_selected_tab(self.selected_tab)
        store.set_selected_map_style_index(self.selected_map_style_index)
        store.set_is_traffic_on(self.is_traffic_on)
        store.sync()
