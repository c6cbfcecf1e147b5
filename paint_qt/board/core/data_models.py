from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPolygon

Point = Tuple[int, int]
RGB = Tuple[int, int, int]

DASH_PATTERN = [5.0, 5.0]


class DrawingMode(Enum):
    PEN = "pen"
    LINE = "line"
    RECTANGLE = "rect"
    OVAL = "oval"
    TRIANGLE = "triangle"
    NONE = "none"


def check_color(color: RGB):
    if len(color) != 3 or any(not 0 <= int(c) <= 255 for c in color):
        raise ValueError(f"Màu không hợp lệ: {color!r}")


def normalized_box(start: Point, end: Point) -> Tuple[int, int, int, int]:
    """(x, y, w, h) của hình chữ nhật căn trục tạo bởi 2 góc bất kỳ."""
    x0, y0 = min(start[0], end[0]), min(start[1], end[1])
    return x0, y0, abs(start[0] - end[0]), abs(start[1] - end[1])


def _half(d: int) -> int:
    # chia 2 làm tròn về 0, -5 -> -2
    return d // 2 if d >= 0 else -((-d) // 2)


def make_pen(color: RGB, dotted: bool) -> QPen:
    if dotted:
        pen = QPen(QColor(*color), 1, Qt.CustomDashLine, Qt.FlatCap, Qt.BevelJoin)
        pen.setDashPattern(DASH_PATTERN)
        return pen
    return QPen(QColor(*color), 1)


class Shape:
    """Hình đã chốt trên bảng vẽ. Bất biến sau khi tạo."""
    kind: ClassVar[str] = "shape"

    color: RGB
    dotted: bool
    filled: bool

    def draw(self, p: QPainter) -> None:
        raise NotImplementedError

    def contains_point(self, pt: Point) -> bool:
        return False

    def _apply_style(self, p: QPainter, fill: bool = False):
        if fill:
            p.setPen(Qt.NoPen)
            p.setBrush(QColor(*self.color))
        else:
            p.setPen(make_pen(self.color, self.dotted))
            p.setBrush(Qt.NoBrush)


@dataclass(frozen=True)
class _TwoPointShape(Shape):
    start: Point
    end: Point
    color: RGB = (0, 0, 0)
    dotted: bool = False
    filled: bool = False

    def __post_init__(self):
        check_color(self.color)

    def box(self) -> Tuple[int, int, int, int]:
        return normalized_box(self.start, self.end)


@dataclass(frozen=True)
class Line(_TwoPointShape):
    kind: ClassVar[str] = "line"

    def draw(self, p: QPainter) -> None:
        self._apply_style(p)
        p.drawLine(QPoint(*self.start), QPoint(*self.end))


@dataclass(frozen=True)
class Rectangle(_TwoPointShape):
    kind: ClassVar[str] = "rect"

    def draw(self, p: QPainter) -> None:
        self._apply_style(p, fill=self.filled)
        p.drawRect(*self.box())

    def contains_point(self, pt: Point) -> bool:
        x0, y0, w, h = self.box()
        if w <= 0 or h <= 0:
            return False
        return x0 <= pt[0] < x0 + w and y0 <= pt[1] < y0 + h


@dataclass(frozen=True)
class Oval(_TwoPointShape):
    kind: ClassVar[str] = "oval"

    def draw(self, p: QPainter) -> None:
        self._apply_style(p, fill=self.filled)
        p.drawEllipse(*self.box())

    def contains_point(self, pt: Point) -> bool:
        """Điểm nằm trong elip nội tiếp hộp chuẩn hóa."""
        x0, y0, w, h = self.box()
        if w <= 0 or h <= 0:
            return False
        nx = (pt[0] - x0) / w - 0.5
        ny = (pt[1] - y0) / h - 0.5
        return nx * nx + ny * ny < 0.25


@dataclass(frozen=True)
class Triangle(_TwoPointShape):
    kind: ClassVar[str] = "triangle"

    def vertices(self) -> Tuple[Point, Point, Point]:
        """Đỉnh ở giữa cạnh trên, đáy nằm ở y của điểm cuối."""
        (x1, y1), (x2, y2) = self.start, self.end
        return (x1 + _half(x2 - x1), y1), (x1, y2), (x2, y2)

    def draw(self, p: QPainter) -> None:
        self._apply_style(p, fill=self.filled)
        p.drawPolygon(QPolygon([QPoint(*v) for v in self.vertices()]))


@dataclass(frozen=True)
class Freehand(Shape):
    points: Tuple[Point, ...]
    color: RGB = (0, 0, 0)
    dotted: bool = False
    filled: bool = False

    kind: ClassVar[str] = "freehand"

    def __post_init__(self):
        if not self.points:
            raise ValueError("Nét tự do phải có ít nhất 1 điểm")
        # list -> tuple để nét không bị sửa sau khi chốt
        object.__setattr__(self, "points", tuple(tuple(pt) for pt in self.points))
        check_color(self.color)

    def draw(self, p: QPainter) -> None:
        self._apply_style(p)
        for a, b in zip(self.points, self.points[1:]):
            p.drawLine(QPoint(*a), QPoint(*b))


_FACTORIES = {
    DrawingMode.LINE: Line,
    DrawingMode.RECTANGLE: Rectangle,
    DrawingMode.OVAL: Oval,
    DrawingMode.TRIANGLE: Triangle,
}


def build_shape(mode: DrawingMode, start: Point, end: Point,
                color: RGB = (0, 0, 0), dotted: bool = False, filled: bool = False) -> Optional[Shape]:
    """Tạo hình 2 điểm theo mode. PEN/NONE -> None."""
    factory = _FACTORIES.get(mode)
    if factory is None:
        return None
    return factory(start=tuple(start), end=tuple(end), color=tuple(color), dotted=dotted, filled=filled)
