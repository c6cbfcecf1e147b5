"""Pytest configuration and fixtures for paint-brush tests."""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from paint_qt.board.core.data_models import Line, Oval, Rectangle
from paint_qt.board.state.board_state import BoardState
from paint_qt.board.state.interaction import InteractionState


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """One QApplication for the whole session (offscreen platform)."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def board() -> BoardState:
    """Create a fresh, empty BoardState."""
    return BoardState()


@pytest.fixture
def interaction(board: BoardState) -> InteractionState:
    """Create an interaction state machine bound to the board fixture."""
    return InteractionState(board)


@pytest.fixture
def line_a() -> Line:
    return Line(start=(0, 0), end=(50, 50))


@pytest.fixture
def rect_b() -> Rectangle:
    return Rectangle(start=(10, 10), end=(40, 30), color=(255, 0, 0))


@pytest.fixture
def oval_c() -> Oval:
    return Oval(start=(100, 100), end=(60, 80))
