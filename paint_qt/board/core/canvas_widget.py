from __future__ import annotations
from PySide6 import QtCore, QtGui, QtWidgets
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QPainter

from paint_qt.board.core.renderer import BoardRenderer
from paint_qt.board.state.interaction import InteractionState


def _event_point(e: QtGui.QMouseEvent):
    pos = e.position().toPoint()
    return pos.x(), pos.y()


class CanvasWidget(QtWidgets.QWidget):
    """Canvas trung lập: nền trắng + các hình, chuyển sự kiện chuột cho InteractionState."""
    changed = QtCore.Signal()

    def __init__(self, interaction: InteractionState, renderer: BoardRenderer, parent=None):
        super().__init__(parent)
        self.interaction = interaction
        self.renderer = renderer
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setCursor(Qt.CrossCursor)

    def sizeHint(self) -> QtCore.QSize: return QSize(900, 600)

    # ---- paint ----
    def paintEvent(self, e: QtGui.QPaintEvent):
        p = QPainter(self)
        p.fillRect(self.rect(), Qt.white)
        self.renderer.render(p)
        p.end()

    def export_image(self) -> QtGui.QImage:
        return self.renderer.export_bitmap(self.width(), self.height())

    # ---- events -> state machine ----
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != Qt.LeftButton: return
        self.interaction.pointer_down(_event_point(e))
        self._refresh()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if not (e.buttons() & Qt.LeftButton): return
        self.interaction.pointer_drag(_event_point(e))
        self.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() != Qt.LeftButton: return
        self.interaction.pointer_up(_event_point(e))
        self._refresh()

    def _refresh(self):
        self.update()
        self.changed.emit()
