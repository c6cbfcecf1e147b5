from __future__ import annotations
import logging
from typing import List, Tuple

from paint_qt.board.core.data_models import Point, Shape

logger = logging.getLogger(__name__)


class BoardState:
    """Quản lý dữ liệu bảng vẽ: danh sách hình đã chốt + ngăn redo."""

    def __init__(self):
        self._shapes: List[Shape] = []      # thứ tự chèn = thứ tự vẽ (z-order)
        self._redo: List[Shape] = []

    def __len__(self) -> int:
        return len(self._shapes)

    def shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._shapes)

    def redo_shapes(self) -> Tuple[Shape, ...]:
        return tuple(self._redo)

    def can_undo(self) -> bool:
        return len(self._shapes) > 0

    def can_redo(self) -> bool:
        return len(self._redo) > 0

    def commit(self, shape: Shape):
        """Chốt hình mới lên cuối stack, xóa redo"""
        self._shapes.append(shape)
        self._redo.clear()
        logger.debug("commit %s (tổng %d)", shape.kind, len(self._shapes))

    def undo(self) -> bool:
        """Hoàn tác hình cuối cùng"""
        if not self.can_undo():
            return False
        self._redo.append(self._shapes.pop())
        logger.debug("undo -> %d hình, redo %d", len(self._shapes), len(self._redo))
        return True

    def redo(self) -> bool:
        """Làm lại hình vừa hoàn tác"""
        if not self.can_redo():
            return False
        self._shapes.append(self._redo.pop())
        logger.debug("redo -> %d hình, redo %d", len(self._shapes), len(self._redo))
        return True

    def clear(self):
        self._shapes.clear()
        self._redo.clear()

    def erase_at(self, point: Point) -> int:
        """Xóa mọi hình chứa điểm. Không đụng tới redo, hình đã tẩy không lấy lại được.

        Trả về số hình bị xóa.
        """
        kept = [s for s in self._shapes if not s.contains_point(point)]
        removed = len(self._shapes) - len(kept)
        if removed:
            self._shapes[:] = kept
            logger.debug("erase_at %s: xóa %d hình", point, removed)
        return removed
