# -*- coding: utf-8 -*-
"""Widgets for the four tabs. Each one renders its controller and forwards input."""
from __future__ import annotations
from PyQt5.QtCore import QUrl
from PyQt5.QtGui import QDesktopServices, QFont
from PyQt5.QtWidgets import (
    QButtonGroup, QCheckBox, QFormLayout, QFrame, QGroupBox, QHBoxLayout, QLabel,
    QLineEdit, QPushButton, QVBoxLayout, QWidget,
)
from .address_map import AddressMapController
from .link_launcher import LinkLauncherController
from .map_canvas import MapCanvas
from .map_styles import MAP_STYLES
from .multi_pins import MultiPinController
from .web_map import export_web_map
from .zip_search import ZipSearchController


def open_url(url: str) -> bool:
    return QDesktopServices.openUrl(QUrl(url))


def _header(text: str, layout: QVBoxLayout):
    title = QLabel(text)
    font = QFont(title.font())
    font.setPointSize(font.pointSize() + 8)
    font.setBold(True)
    title.setFont(font)
    layout.addWidget(title)
    line = QFrame()
    line.setFrameShape(QFrame.HLine)
    line.setFrameShadow(QFrame.Sunken)
    layout.addWidget(line)


def _open_in_browser(content) -> bool:
    path = export_web_map(content)
    return QDesktopServices.openUrl(QUrl.fromLocalFile(path))


class ZipSearchTab(QWidget):
    def __init__(self, controller: ZipSearchController, parent=None):
        super().__init__(parent)
        self.controller = controller
        controller.on_change = self.refresh
        root = QVBoxLayout(self)
        _header(self.tr('Zip Code Search'), root)
        row = QHBoxLayout()
        self.zip_edit = QLineEdit(controller.query)
        self.zip_edit.setPlaceholderText(self.tr('Zip'))
        self.search_btn = QPushButton(self.tr('Search'))
        row.addWidget(self.zip_edit)
        row.addWidget(self.search_btn)
        root.addLayout(row)
        results = QGroupBox(self.tr('Results:'))
        form = QFormLayout(results)
        self.county_label = QLabel()
        self.city_label = QLabel()
        self.state_label = QLabel()
        self.country_label = QLabel()
        form.addRow(self.tr('County:'), self.county_label)
        form.addRow(self.tr('City:'), self.city_label)
        form.addRow(self.tr('State:'), self.state_label)
        form.addRow(self.tr('Country:'), self.country_label)
        root.addWidget(results)
        root.addStretch(1)

        self.zip_edit.textChanged.connect(self._on_text_changed)
        self.zip_edit.returnPressed.connect(self._on_search)
        self.search_btn.clicked.connect(self._on_search)
        self.refresh()

    def _on_text_changed(self, text: str):
        self.controller.set_query(text)
        self.search_btn.setEnabled(self.controller.can_search())

    def _on_search(self):
        self.controller.search()

    def refresh(self):
        d = self.controller.display
        self.county_label.setText(d.county)
        self.city_label.setText(d.city)
        self.state_label.setText(d.state)
        self.country_label.setText(d.country_code)
        self.search_btn.setEnabled(self.controller.can_search())


class LinkLauncherTab(QWidget):
    def __init__(self, controller: LinkLauncherController, parent=None):
        super().__init__(parent)
        self.controller = controller
        root = QVBoxLayout(self)
        _header(self.tr('Open Address in Maps'), root)
        row = QHBoxLayout()
        self.address_edit = QLineEdit(controller.state.address_to_open)
        self.address_edit.setPlaceholderText(self.tr('Address to open in Maps'))
        self.open_btn = QPushButton(self.tr('Open'))
        row.addWidget(self.address_edit)
        row.addWidget(self.open_btn)
        root.addLayout(row)
        root.addStretch(1)

        self.address_edit.textChanged.connect(controller.set_address)
        self.address_edit.returnPressed.connect(controller.open)
        self.open_btn.clicked.connect(controller.open)


class AddressMapTab(QWidget):
    def __init__(self, controller: AddressMapController, parent=None):
        super().__init__(parent)
        self.controller = controller
        self._shown_serial = -1
        controller.on_change = self.refresh
        root = QVBoxLayout(self)
        _header(self.tr('MapView Search'), root)

        row = QHBoxLayout()
        self.address_edit = QLineEdit(controller.state.address_to_search)
        self.address_edit.setPlaceholderText(self.tr('Address to display above'))
        self.search_btn = QPushButton(self.tr('Search'))
        row.addWidget(self.address_edit)
        row.addWidget(self.search_btn)
        root.addLayout(row)

        # exclusive checkable buttons act as a segmented style picker
        picker = QHBoxLayout()
        self._style_group = QButtonGroup(self)
        self._style_group.setExclusive(True)
        for index, (_, name) in enumerate(MAP_STYLES):
            btn = QPushButton(self.tr(name))
            btn.setCheckable(True)
            self._style_group.addButton(btn, index)
            picker.addWidget(btn)
        self.traffic_check = QCheckBox(self.tr('Traffic'))
        self.traffic_check.setChecked(controller.state.is_traffic_on)
        picker.addWidget(self.traffic_check)
        root.addLayout(picker)

        self.canvas = MapCanvas()
        root.addWidget(self.canvas, 1)
        self.browser_btn = QPushButton(self.tr('Open in browser'))
        root.addWidget(self.browser_btn)

        self.address_edit.textChanged.connect(controller.set_query)
        self.address_edit.returnPressed.connect(controller.search)
        self.search_btn.clicked.connect(controller.search)
        self._style_group.buttonClicked[int].connect(controller.select_style)
        self.traffic_check.toggled.connect(controller.set_traffic)
        self.canvas.cameraChanged.connect(controller.on_camera_changed)
        self.browser_btn.clicked.connect(self._on_open_browser)
        self.refresh()

    def _on_open_browser(self):
        content = self.controller.map_content()
        # export what is on screen, including pans and zooms
        if self.canvas.region() is not None:
            content.region = self.canvas.region()
        _open_in_browser(content)

    def refresh(self):
        c = self.controller
        btn = self._style_group.button(c.state.selected_map_style_index)
        if btn is None:
            btn = self._style_group.button(0)
        btn.setChecked(True)
        self.traffic_check.setEnabled(c.traffic_toggle_enabled())
        reset = c.camera_serial != self._shown_serial
        self._shown_serial = c.camera_serial
        self.canvas.set_content(c.map_content(), reset_camera=reset)


class MultiPinTab(QWidget):
    def __init__(self, controller: MultiPinController, parent=None):
        super().__init__(parent)
        self.controller = controller
        root = QVBoxLayout(self)
        _header(self.tr('Multiple Locations'), root)
        self.canvas = MapCanvas()
        self.canvas.set_content(controller.map_content())
        root.addWidget(self.canvas, 1)
        self.browser_btn = QPushButton(self.tr('Open in browser'))
        root.addWidget(self.browser_btn)

        self.canvas.tapped.connect(self._on_tapped)
        self.browser_btn.clicked.connect(lambda: _open_in_browser(controller.map_content()))

    def _on_tapped(self, x: float, y: float):
        self.controller.handle_tap(x, y, self.canvas.viewport_size(), self.canvas.region())
