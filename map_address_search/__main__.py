"""Entry point: ``python -m map_address_search``."""
from __future__ import annotations

import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication

from .app_state import AppState
from .geocode_task import GeocodeTaskRunner
from .main_window import MainWindow
from .settings_store import APP, ORG, SettingsStore


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Zip code lookup, map search and pins demo')
    parser.add_argument('--settings-file', help='INI file to keep preferences in instead of the native store')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging verbosity (default: INFO)')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')
    app = QApplication(sys.argv[:1])
    app.setOrganizationName(ORG)
    app.setApplicationName(APP)

    store = SettingsStore.from_file(args.settings_file) if args.settings_file else SettingsStore()
    state = AppState.load(store)
    runner = GeocodeTaskRunner()
    window = MainWindow(state, store, runner)
    window.show()
    return app.exec_()


if __name__ == '__main__':
    sys.exit(main())
