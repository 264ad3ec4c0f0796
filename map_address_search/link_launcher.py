"""External maps link panel: builds a deep link for an address and hands it off."""
from __future__ import annotations

import logging
import urllib.parse
from typing import Callable

from .app_state import AppState
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

UrlOpener = Callable[[str], bool]


def build_maps_url(address: str, base_url: str = SettingsStore.DEFAULT_MAPS_BASE_URL) -> str:
    """Deep link ``<base_url>?address=<address>``.

    The address is not validated, only percent-encoded so any text gives a
    well-formed URL.
    """
    return f"{base_url}?address={urllib.parse.quote(address, safe='')}"


class LinkLauncherController:
    def __init__(self, state: AppState, opener: UrlOpener,
                 base_url: str = SettingsStore.DEFAULT_MAPS_BASE_URL):
        self.state = state
        self.opener = opener
        self.base_url = base_url

    def set_address(self, text: str):
        self.state.address_to_open = text

    def url(self) -> str:
        return build_maps_url(self.state.address_to_open, self.base_url)

    def open(self) -> bool:
        url = self.url()
        accepted = bool(self.opener(url))
        if accepted:
            logger.info('Opened %s', url)
        else:
            logger.warning('Platform refused to open %s', url)
        return accepted
