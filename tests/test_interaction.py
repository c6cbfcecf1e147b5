"""Tests for the pointer-driven interaction state machine."""

from __future__ import annotations

import pytest

from paint_qt.board.core.data_models import DrawingMode, Freehand, Line, Oval, Rectangle, Triangle
from paint_qt.board.state.interaction import InteractionConfig, InteractionState


def _gesture(state: InteractionState, *points):
    state.pointer_down(points[0])
    for p in points[1:-1]:
        state.pointer_drag(p)
    return state.pointer_up(points[-1])


def test_default_config() -> None:
    cfg = InteractionConfig()
    assert cfg.mode == DrawingMode.LINE
    assert cfg.color == (0, 0, 0)
    assert not cfg.dotted and not cfg.filled


@pytest.mark.parametrize(
    ("mode", "cls"),
    [
        (DrawingMode.LINE, Line),
        (DrawingMode.RECTANGLE, Rectangle),
        (DrawingMode.OVAL, Oval),
        (DrawingMode.TRIANGLE, Triangle),
    ],
)
def test_two_point_gesture_commits_shape(interaction: InteractionState, mode, cls) -> None:
    interaction.set_mode(mode)
    shape = _gesture(interaction, (1, 2), (5, 5), (10, 20))

    assert isinstance(shape, cls)
    assert shape.start == (1, 2)
    assert shape.end == (10, 20)
    assert interaction.board.shapes() == (shape,)
    assert not interaction.is_gesturing


def test_pen_gesture_commits_recorded_points(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.PEN)
    shape = _gesture(interaction, (0, 0), (1, 1), (2, 3), (9, 9))

    assert isinstance(shape, Freehand)
    # the release point is not appended
    assert shape.points == ((0, 0), (1, 1), (2, 3))


def test_pen_click_commits_single_point(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.PEN)
    interaction.pointer_down((4, 4))
    shape = interaction.pointer_up((4, 4))
    assert shape.points == ((4, 4),)


def test_zero_length_gesture_is_committed(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.RECTANGLE)
    shape = _gesture(interaction, (7, 7), (7, 7))
    assert shape.box() == (7, 7, 0, 0)
    assert len(interaction.board) == 1


def test_none_mode_commits_nothing(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.NONE)
    assert _gesture(interaction, (0, 0), (10, 10)) is None
    assert len(interaction.board) == 0
    assert not interaction.is_gesturing


def test_toggles_read_at_pointer_up(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.OVAL)
    interaction.pointer_down((0, 0))
    interaction.pointer_drag((5, 5))
    interaction.set_color((10, 20, 30))
    interaction.toggle_dotted()
    interaction.toggle_fill()
    shape = interaction.pointer_up((10, 10))

    assert shape.color == (10, 20, 30)
    assert shape.dotted and shape.filled


def test_freehand_ignores_fill(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.PEN)
    interaction.set_filled(True)
    shape = _gesture(interaction, (0, 0), (3, 3), (3, 3))
    assert shape.filled is False


def test_config_snapshot_is_replaced(interaction: InteractionState) -> None:
    old = interaction.config
    assert interaction.toggle_dotted() is True
    assert interaction.config is not old
    assert old.dotted is False


def test_invalid_color_rejected(interaction: InteractionState) -> None:
    with pytest.raises(ValueError):
        interaction.set_color((300, 0, 0))
    assert interaction.config.color == (0, 0, 0)


def test_erasing_suppresses_gestures(interaction: InteractionState) -> None:
    interaction.board.commit(Rectangle(start=(0, 0), end=(20, 20)))
    interaction.set_mode(DrawingMode.LINE)
    interaction.toggle_erase()

    interaction.pointer_down((50, 50))
    assert not interaction.is_gesturing
    interaction.pointer_drag((60, 60))
    assert interaction.pointer_up((70, 70)) is None
    assert len(interaction.board) == 1


def test_pointer_down_while_erasing_erases(interaction: InteractionState) -> None:
    keep = Line(start=(0, 0), end=(20, 20))
    interaction.board.commit(keep)
    interaction.board.commit(Rectangle(start=(0, 0), end=(20, 20)))
    interaction.set_erasing(True)

    interaction.pointer_down((10, 10))

    assert interaction.board.shapes() == (keep,)
    assert interaction.board.redo_shapes() == ()


def test_enabling_erase_cancels_gesture(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.RECTANGLE)
    interaction.pointer_down((0, 0))
    interaction.pointer_drag((10, 10))
    interaction.set_erasing(True)

    assert not interaction.is_gesturing
    assert interaction.preview_shape() is None
    interaction.set_erasing(False)
    assert interaction.pointer_up((10, 10)) is None
    assert len(interaction.board) == 0


def test_drag_without_gesture_is_ignored(interaction: InteractionState) -> None:
    interaction.pointer_drag((5, 5))
    assert interaction.pointer_up((5, 5)) is None
    assert len(interaction.board) == 0


def test_preview_does_not_mutate_stack(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.TRIANGLE)
    assert interaction.preview_shape() is None

    interaction.pointer_down((0, 0))
    interaction.pointer_drag((10, 20))
    preview = interaction.preview_shape()

    assert preview == Triangle(start=(0, 0), end=(10, 20))
    assert len(interaction.board) == 0


def test_pen_preview_tracks_points(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.PEN)
    interaction.pointer_down((0, 0))
    interaction.pointer_drag((1, 0))
    assert interaction.preview_shape().points == ((0, 0), (1, 0))


def test_history_delegates_to_board(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.RECTANGLE)
    a = _gesture(interaction, (0, 0), (5, 5))
    b = _gesture(interaction, (10, 10), (20, 20))

    assert interaction.undo()
    assert interaction.board.shapes() == (a,)
    assert interaction.redo()
    assert interaction.board.shapes() == (a, b)

    interaction.pointer_down((30, 30))
    interaction.clear()
    assert not interaction.is_gesturing
    assert interaction.board.shapes() == ()
    assert interaction.undo() is False


def test_mode_is_fixed_at_pointer_down(interaction: InteractionState) -> None:
    interaction.set_mode(DrawingMode.RECTANGLE)
    interaction.pointer_down((0, 0))
    interaction.set_mode(DrawingMode.OVAL)
    shape = interaction.pointer_up((10, 10))

    assert isinstance(shape, Rectangle)
    assert interaction.config.mode == DrawingMode.OVAL
