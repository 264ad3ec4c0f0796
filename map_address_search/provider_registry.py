"""Central provider registry: internal IDs and display names.
Modify here to reflect across UI (settings dialog, main window status)."""
from __future__ import annotations

import logging

from .geocoding_base import IGeocoder
from .google_geocoder import GoogleGeocoder
from .nominatim_geocoder import NominatimGeocoder
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

# Ordered list of (internal_id, display_name)
PROVIDERS = [
    ("nominatim", "Nominatim"),
    ("google", "Google"),
]


# Fast lookup dict
_ID_TO_DISPLAY = {pid: disp for pid, disp in PROVIDERS}


def get_display_name(provider_id: str | None) -> str:
    if not provider_id:
        return ""
    return _ID_TO_DISPLAY.get(provider_id, provider_id or "")


def iter_providers():
    """Yield (internal_id, display_name) preserving order."""
    yield from PROVIDERS


def build_geocoder(store: SettingsStore) -> IGeocoder:
    """Geocoder for the provider selected in settings.

    Unknown provider ids fall back to the default provider.
    """
    pid = store.get_provider()
    if pid not in _ID_TO_DISPLAY:
        logger.warning("Unknown geocoding provider '%s', using %s", pid, store.DEFAULT_PROVIDER)
        pid = store.DEFAULT_PROVIDER
    if pid == "google":
        return GoogleGeocoder(store.get_api_key())
    return NominatimGeocoder(store.get_user_agent())
