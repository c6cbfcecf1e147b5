from __future__ import annotations
import logging
import os

from PySide6 import QtWidgets

from paint_qt.board.core.canvas_widget import CanvasWidget
from paint_qt.board.core.data_models import DrawingMode
from paint_qt.board.core.renderer import BoardRenderer
from paint_qt.board.state.interaction import InteractionState
from paint_qt.board.ui.toolbar import BoardToolbar

logger = logging.getLogger(__name__)


class PaintBrushWindow(QtWidgets.QMainWindow):
    """Cửa sổ chính – điều phối state/canvas/toolbar & thông báo. Không lưu trạng thái giữa các lần chạy."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Paint Brush")
        self.resize(900, 650)

        # ---- state ----
        self.interaction = InteractionState()
        self.renderer = BoardRenderer(self.interaction)
        # thư mục gợi ý cho hộp thoại lưu, chỉ nhớ trong phiên
        self.last_export_dir = os.path.expanduser("~")

        # ---- UI ----
        self._build_ui()
        self._sync_history()

    # ========== UI ==========
    def _build_ui(self):
        cfg = self.interaction.config
        self.toolbar = BoardToolbar(self, init_mode=cfg.mode, init_dotted=cfg.dotted,
                                    init_filled=cfg.filled, init_color=cfg.color)
        self.addToolBar(self.toolbar)

        self.toolbar.modeChanged.connect(self._on_mode_changed)
        self.toolbar.dottedToggled.connect(self._on_dotted)
        self.toolbar.fillToggled.connect(self._on_fill)
        self.toolbar.eraseToggled.connect(self._on_erase)
        self.toolbar.colorPicked.connect(self._on_color_picked)
        self.toolbar.requestUndo.connect(self.undo)
        self.toolbar.requestRedo.connect(self.redo)
        self.toolbar.requestClear.connect(self.clear)
        self.toolbar.requestSave.connect(self.save_dialog)

        self.canvas = CanvasWidget(self.interaction, self.renderer, self)
        self.canvas.changed.connect(self._sync_history)
        self.setCentralWidget(self.canvas)
        self.statusBar()

    # ========== toolbar slots ==========
    def _on_mode_changed(self, value: str):
        self.interaction.set_mode(DrawingMode(value))
        logger.debug("Đổi mode: %s", value)

    def _on_dotted(self, on: bool):
        self.interaction.set_dotted(on)

    def _on_fill(self, on: bool):
        self.interaction.set_filled(on)

    def _on_erase(self, on: bool):
        self.interaction.set_erasing(on)
        self.statusBar().showMessage("Chế độ tẩy: bấm vào hình để xóa" if on else "", 3000)
        self.canvas.update()

    def _on_color_picked(self, rgb: tuple):
        self.interaction.set_color(rgb)

    # ========== history ==========
    def undo(self):
        if self.interaction.undo(): self._changed()

    def redo(self):
        if self.interaction.redo(): self._changed()

    def clear(self):
        self.interaction.clear(); self._changed()

    def _changed(self):
        self.canvas.update()
        self._sync_history()

    def _sync_history(self):
        board = self.interaction.board
        self.toolbar.reflect_history(board.can_undo(), board.can_redo())

    # ========== save ==========
    def export_to(self, path: str):
        ok, msg = self.renderer.save_png(path, self.canvas.width(), self.canvas.height())
        self.statusBar().showMessage(msg, 5000)
        if ok:
            self.last_export_dir = os.path.dirname(os.path.abspath(path))
        return ok, msg

    def save_dialog(self):
        start = os.path.join(self.last_export_dir, "drawing.png")
        path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Save Image", start, "PNG (*.png)")
        if not path: return
        ok, msg = self.export_to(path)
        if ok:
            QtWidgets.QMessageBox.information(self, "Success", "Image saved successfully!")
        else:
            QtWidgets.QMessageBox.critical(self, "Error", msg)
