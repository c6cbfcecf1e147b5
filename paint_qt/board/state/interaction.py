from __future__ import annotations
import dataclasses
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from paint_qt.board.core.data_models import (
    DrawingMode, Freehand, Point, RGB, Shape, build_shape, check_color,
)
from paint_qt.board.state.board_state import BoardState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InteractionConfig:
    """Ảnh chụp cấu hình vẽ hiện tại, đọc lúc nhả chuột."""
    mode: DrawingMode = DrawingMode.LINE
    color: RGB = (0, 0, 0)
    dotted: bool = False
    filled: bool = False


@dataclass
class Gesture:
    mode: DrawingMode
    start: Point
    end: Point
    points: List[Point] = field(default_factory=list)   # chỉ dùng cho PEN


class InteractionState:
    """Máy trạng thái thao tác chuột: Idle <-> Gesturing, cờ tẩy độc lập với mode."""

    def __init__(self, board: Optional[BoardState] = None, config: Optional[InteractionConfig] = None):
        self.board = board if board is not None else BoardState()
        self.config = config or InteractionConfig()
        self.erasing = False
        self._gesture: Optional[Gesture] = None

    @property
    def is_gesturing(self) -> bool:
        return self._gesture is not None

    @property
    def gesture(self) -> Optional[Gesture]:
        return self._gesture

    # ---- config ----
    def _update(self, **changes):
        self.config = dataclasses.replace(self.config, **changes)

    def set_mode(self, mode: DrawingMode):
        self._update(mode=DrawingMode(mode))

    def set_color(self, color: RGB):
        color = tuple(int(c) for c in color)
        check_color(color)
        self._update(color=color)

    def set_dotted(self, on: bool):
        self._update(dotted=bool(on))

    def set_filled(self, on: bool):
        self._update(filled=bool(on))

    def toggle_dotted(self) -> bool:
        self.set_dotted(not self.config.dotted)
        return self.config.dotted

    def toggle_fill(self) -> bool:
        self.set_filled(not self.config.filled)
        return self.config.filled

    def set_erasing(self, on: bool):
        self.erasing = bool(on)
        if self.erasing and self._gesture is not None:
            # tẩy và vẽ không chạy song song
            self._gesture = None

    def toggle_erase(self) -> bool:
        self.set_erasing(not self.erasing)
        return self.erasing

    # ---- pointer ----
    def pointer_down(self, p: Point):
        p = (int(p[0]), int(p[1]))
        if self.erasing:
            self.board.erase_at(p)
            return
        # mode chốt lúc nhấn chuột; màu/dotted/filled đọc lúc nhả
        mode = self.config.mode
        self._gesture = Gesture(mode=mode, start=p, end=p,
                                points=[p] if mode == DrawingMode.PEN else [])

    def pointer_drag(self, p: Point):
        g = self._gesture
        if g is None or self.erasing:
            return
        p = (int(p[0]), int(p[1]))
        if g.mode == DrawingMode.PEN:
            g.points.append(p)
        else:
            g.end = p

    def pointer_up(self, p: Point) -> Optional[Shape]:
        g = self._gesture
        if g is None or self.erasing:
            return None
        self._gesture = None
        if g.mode != DrawingMode.PEN:
            g.end = (int(p[0]), int(p[1]))
        shape = self._shape_from(g)
        if shape is not None:
            self.board.commit(shape)
        return shape

    def _shape_from(self, g: Gesture) -> Optional[Shape]:
        cfg = self.config
        if g.mode == DrawingMode.PEN:
            return Freehand(points=tuple(g.points), color=cfg.color, dotted=cfg.dotted)
        return build_shape(g.mode, g.start, g.end, cfg.color, cfg.dotted, cfg.filled)

    def preview_shape(self) -> Optional[Shape]:
        """Hình tạm của thao tác đang kéo, không ghi vào stack."""
        if self._gesture is None or self.erasing:
            return None
        return self._shape_from(self._gesture)

    # ---- history ----
    def undo(self) -> bool:
        return self.board.undo()

    def redo(self) -> bool:
        return self.board.redo()

    def clear(self):
        self._gesture = None
        self.board.clear()
        logger.info("Đã xóa toàn bộ bảng vẽ")
