# -*- coding: utf-8 -*-
"""Map canvas widget.
Draws markers and label annotations for a camera region. Drag pans, wheel
zooms; the camera change is reported once the gesture ends. A press/release
without movement is reported as a tap at the view-local position.
"""
from __future__ import annotations
from typing import Optional, Tuple
from PyQt5.QtCore import QPoint, QRectF, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QFont, QPainter, QPen
from PyQt5.QtWidgets import QWidget
from .map_content import MapContent
from .map_geometry import Region, coordinate_to_local, pan, zoom

BACKGROUNDS = {
    'standard': QColor('#efe9dc'),
    'hybrid': QColor('#3d5a3a'),
    'imagery': QColor('#2e4429'),
}
MARKER_COLOR = QColor('#e0413a')
ANNOTATION_COLOR = QColor('#1e6fd9')
TRAFFIC_COLOR = QColor('#f0a020')


class MapCanvas(QWidget):
    cameraChanged = pyqtSignal(object)  # Region
    tapped = pyqtSignal(float, float)  # view-local x, y

    TAP_SLOP = 4
    ZOOM_STEP = 0.8

    def __init__(self, parent=None):
        super().__init__(parent)
        self._content: Optional[MapContent] = None
        self._region: Optional[Region] = None
        self._press_pos: Optional[QPoint] = None
        self._last_pos: Optional[QPoint] = None
        self._dragging = False
        self.setMinimumSize(240, 200)

    def set_content(self, content: MapContent, reset_camera: bool = True):
        self._content = content
        if reset_camera or self._region is None:
            self._region = content.region
        self.update()

    def region(self) -> Optional[Region]:
        return self._region

    def viewport_size(self) -> Tuple[float, float]:
        return float(self.width()), float(self.height())

    # ---- painting ----
    def paintEvent(self, event):  # type: ignore
        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing)
        style_id = self._content.style.style_id if self._content else 'standard'
        p.fillRect(self.rect(), BACKGROUNDS.get(style_id, BACKGROUNDS['standard']))
        if self._content is None or self._region is None:
            p.end()
            return
        size = self.viewport_size()
        text_color = QColor('#222222') if style_id == 'standard' else QColor('#ffffff')
        for marker in self._content.markers:
            x, y = coordinate_to_local(self._region, size, marker.coordinate)
            p.setPen(QPen(Qt.white, 2))
            p.setBrush(MARKER_COLOR)
            p.drawEllipse(QRectF(x - 7, y - 7, 14, 14))
            p.setPen(text_color)
            p.drawText(QRectF(x - 80, y + 9, 160, 18), Qt.AlignHCenter | Qt.AlignTop, marker.title)
        bold = QFont(self.font())
        bold.setBold(True)
        p.setFont(bold)
        fm = p.fontMetrics()
        for ann in self._content.annotations:
            x, y = coordinate_to_local(self._region, size, ann.coordinate)
            w = fm.horizontalAdvance(ann.title) + 20
            h = fm.height() + 10
            rect = QRectF(x - w / 2, y - h - 12, w, h)
            p.setPen(Qt.NoPen)
            p.setBrush(ANNOTATION_COLOR)
            p.drawRoundedRect(rect, h / 2, h / 2)
            p.setPen(Qt.white)
            p.drawText(rect, Qt.AlignCenter, ann.title)
        if self._content.style.shows_traffic:
            badge = QRectF(self.width() - 78, 8, 70, 22)
            p.setPen(Qt.NoPen)
            p.setBrush(TRAFFIC_COLOR)
            p.drawRoundedRect(badge, 6, 6)
            p.setPen(Qt.black)
            p.drawText(badge, Qt.AlignCenter, self.tr('Traffic'))
        p.end()

    # ---- gestures ----
    def mousePressEvent(self, event):  # type: ignore
        if event.button() != Qt.LeftButton:
            return
        self._press_pos = event.pos()
        self._last_pos = event.pos()
        self._dragging = False

    def mouseMoveEvent(self, event):  # type: ignore
        if self._press_pos is None or self._region is None:
            return
        if not self._dragging and (event.pos() - self._press_pos).manhattanLength() > self.TAP_SLOP:
            self._dragging = True
        if self._dragging:
            delta = event.pos() - self._last_pos
            self._region = pan(self._region, self.viewport_size(), delta.x(), delta.y())
            self._last_pos = event.pos()
            self.update()

    def mouseReleaseEvent(self, event):  # type: ignore
        if self._press_pos is None:
            return
        if self._dragging:
            self.cameraChanged.emit(self._region)
        else:
            self.tapped.emit(float(event.pos().x()), float(event.pos().y()))
        self._press_pos = None
        self._last_pos = None
        self._dragging = False

    def wheelEvent(self, event):  # type: ignore
        if self._region is None:
            return
        steps = event.angleDelta().y() / 120.0
        if not steps:
            return
        self._region = zoom(self._region, self.ZOOM_STEP ** steps)
        self.update()
        self.cameraChanged.emit(self._region)
