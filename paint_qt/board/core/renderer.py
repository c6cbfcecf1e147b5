from __future__ import annotations
import logging
from typing import Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPainter

from paint_qt.board.io import file_io
from paint_qt.board.state.interaction import InteractionState

logger = logging.getLogger(__name__)


class BoardRenderer:
    """Vẽ stack + preview lên QPainter, xuất ảnh PNG."""

    def __init__(self, interaction: InteractionState):
        self.interaction = interaction

    def render(self, p: QPainter, preview: bool = True):
        for shape in self.interaction.board.shapes():
            shape.draw(p)
        if not preview:
            return
        # hình tạm của thao tác đang kéo (None nếu đang tẩy / không kéo)
        shape = self.interaction.preview_shape()
        if shape is not None:
            shape.draw(p)

    def export_bitmap(self, width: int, height: int) -> QImage:
        img = QImage(max(1, int(width)), max(1, int(height)), QImage.Format_ARGB32)
        img.fill(Qt.white)
        p = QPainter(img)
        try:
            self.render(p, preview=False)
        finally:
            p.end()
        return img

    def save_png(self, path: str, width: int, height: int) -> Tuple[bool, str]:
        """Xuất ảnh ra PNG; lỗi I/O trả về (False, thông báo) thay vì ném tiếp."""
        img = self.export_bitmap(width, height)
        try:
            written = file_io.write_png(img, path)
        except OSError as e:
            logger.exception("Lưu ảnh thất bại: %s", path)
            return False, f"Lỗi lưu ảnh: {e}"
        logger.info("Đã lưu ảnh %dx%d vào %s", img.width(), img.height(), written)
        return True, f"Đã lưu ảnh: {written}"
