"""Settings dialog: provider selection + credentials + maps link base URL."""
from __future__ import annotations

import os
import re
from PyQt5 import uic
from PyQt5.QtWidgets import QDialog
from .settings_store import SettingsStore
from .provider_registry import iter_providers


FORM_CLASS, _ = uic.loadUiType(os.path.join(
    os.path.dirname(__file__), 'settings_dialog.ui'))

# stacked page per provider id
_PAGES = {
    'nominatim': 0,
    'google': 1,
}


def clean_text(txt: str) -> str:
    """Strip whitespace and zero-width characters pasted along with keys."""
    if txt is None:
        return ''
    return re.sub('[\u200B\u200C\u200D\uFEFF]', '', txt.strip())


class SettingsDialog(QDialog, FORM_CLASS):
    def __init__(self, store: SettingsStore, parent=None):
        super().__init__(parent)
        self.setupUi(self)
        self.setWindowTitle(self.tr('Map Address Search settings'))
        self.store = store

        self.provider_combo.clear()
        for pid, disp in iter_providers():
            self.provider_combo.addItem(disp, pid)
        current_provider = self.store.get_provider()
        idx = self.provider_combo.findData(current_provider)
        self.provider_combo.setCurrentIndex(idx if idx >= 0 else 0)

        # the placeholder agent is shown as an empty field
        ua_val = self.store.get_user_agent()
        if ua_val == self.store.DEFAULT_USER_AGENT:
            ua_val = ''
        self.user_agent_edit.setText(ua_val)
        self.user_agent_edit.setPlaceholderText(self.tr('e.g. MapAddressSearch (you@example.com)'))
        self.api_key_edit.setText(self.store.get_api_key())
        self.maps_base_url_edit.setText(self.store.get_maps_base_url())
        self.maps_base_url_edit.setPlaceholderText(self.store.DEFAULT_MAPS_BASE_URL)

        self.provider_combo.currentIndexChanged.connect(self._on_provider_changed)
        self._on_provider_changed(self.provider_combo.currentIndex())

    def _on_provider_changed(self, index: int):
        pid = self.provider_combo.itemData(index)
        self.stack.setCurrentIndex(_PAGES.get(pid, 0))

    def accept(self):
        s = self.store
        s.set_provider(clean_text(self.provider_combo.currentData()))
        s.set_user_agent(clean_text(self.user_agent_edit.text()))
        s.set_api_key(clean_text(self.api_key_edit.text()))
        s.set_maps_base_url(clean_text(self.maps_base_url_edit.text()))
        s.sync()
        super().accept()
