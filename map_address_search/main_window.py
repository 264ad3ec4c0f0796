# -*- coding: utf-8 -*-
"""Main window: four tabs selected by tag, plus the settings action."""
from __future__ import annotations
import logging
from PyQt5.QtWidgets import QAction, QMainWindow, QTabWidget
from .address_map import AddressMapController
from .app_state import AppState, TAB_TAGS, TABS
from .geocode_task import SearchRunner
from .link_launcher import LinkLauncherController
from .multi_pins import MultiPinController
from .provider_registry import build_geocoder, get_display_name
from .settings_dialog import SettingsDialog
from .settings_store import SettingsStore
from .tab_widgets import AddressMapTab, LinkLauncherTab, MultiPinTab, ZipSearchTab, open_url
from .zip_search import ZipSearchController

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: AppState, store: SettingsStore, runner: SearchRunner, parent=None):
        super().__init__(parent)
        self.state = state
        self.store = store
        self.setWindowTitle(self.tr('Map Address Search'))
        self.resize(520, 720)

        geocoder = build_geocoder(store)
        self.zip_search = ZipSearchController(state, geocoder, runner)
        self.link_launcher = LinkLauncherController(state, open_url, store.get_maps_base_url())
        self.address_map = AddressMapController(state, geocoder, runner)
        self.multi_pins = MultiPinController()

        self.tabs = QTabWidget()
        pages = {
            'ZipSearch': ZipSearchTab(self.zip_search),
            'OpenAppleMaps': LinkLauncherTab(self.link_launcher),
            'SearchAddress': AddressMapTab(self.address_map),
            'MultipleLocations': MultiPinTab(self.multi_pins),
        }
        for tag, label in TABS:
            self.tabs.addTab(pages[tag], self.tr(label))
        self.tabs.setCurrentIndex(TAB_TAGS.index(state.selected_tab))
        self.tabs.currentChanged.connect(self._on_tab_changed)
        self.setCentralWidget(self.tabs)

        settings_action = QAction(self.tr('Settings…'), self)
        settings_action.triggered.connect(self._open_settings)
        self.menuBar().addMenu(self.tr('&File')).addAction(settings_action)
        self._show_provider()

    def _on_tab_changed(self, index: int):
        self.state.selected_tab = TAB_TAGS[index]

    def _open_settings(self):
        dlg = SettingsDialog(self.store, self)
        if dlg.exec_():
            # providers read their credentials at construction
            geocoder = build_geocoder(self.store)
            self.zip_search.geocoder = geocoder
            self.address_map.geocoder = geocoder
            self.link_launcher.base_url = self.store.get_maps_base_url()
            self._show_provider()

    def _show_provider(self):
        name = get_display_name(self.store.get_provider())
        self.statusBar().showMessage(self.tr('Geocoding: {name}').format(name=name))

    def closeEvent(self, event):  # type: ignore
        self.state.save(self.store)
        logger.info('Preferences saved')
        super().closeEvent(event)
