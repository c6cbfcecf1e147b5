from __future__ import annotations
from PySide6 import QtGui, QtWidgets
from PySide6.QtCore import Signal
from PySide6.QtGui import QAction, QActionGroup, QKeySequence

from paint_qt.board.core.data_models import DrawingMode

MODE_ACTIONS = [
    (DrawingMode.PEN, "✏️ Pen"),
    (DrawingMode.LINE, "— Line"),
    (DrawingMode.RECTANGLE, "▭ Rectangle"),
    (DrawingMode.OVAL, "◯ Oval"),
    (DrawingMode.TRIANGLE, "△ Triangle"),
]


class BoardToolbar(QtWidgets.QToolBar):
    # ==== Signals (Window sẽ connect) ====
    modeChanged = Signal(str)               # giá trị DrawingMode
    dottedToggled = Signal(bool)
    fillToggled = Signal(bool)
    eraseToggled = Signal(bool)
    colorPicked = Signal(tuple)             # (r,g,b)

    requestUndo = Signal()
    requestRedo = Signal()
    requestClear = Signal()
    requestSave = Signal()

    def __init__(self, parent=None, init_mode=DrawingMode.LINE, init_dotted=False, init_filled=False,
                 init_color=(0, 0, 0)):
        super().__init__("Tools", parent)
        self.setMovable(False)
        self._color = tuple(init_color)

        # Mode (exclusive)
        group = QActionGroup(self); group.setExclusive(True)
        self._mode_actions = {}
        for mode, text in MODE_ACTIONS:
            act = QAction(text, self, checkable=True)
            act.triggered.connect(lambda _=False, m=mode: self.modeChanged.emit(m.value))
            group.addAction(act); self.addAction(act)
            self._mode_actions[mode] = act
        self.reflect_mode(init_mode)

        self.addSeparator()

        # Toggles
        self.act_dotted = QAction("┄ Dotted", self, checkable=True)
        self.act_dotted.setChecked(init_dotted)
        self.act_dotted.toggled.connect(self.dottedToggled.emit)
        self.addAction(self.act_dotted)

        self.act_fill = QAction("■ Fill", self, checkable=True)
        self.act_fill.setChecked(init_filled)
        self.act_fill.toggled.connect(self.fillToggled.emit)
        self.addAction(self.act_fill)

        self.act_erase = QAction("🧽 Erase", self, checkable=True)
        self.act_erase.toggled.connect(self.eraseToggled.emit)
        self.addAction(self.act_erase)

        # Color picker
        self.btn_color = QtWidgets.QToolButton(self); self.btn_color.setText("🎨 Color")
        self.btn_color.clicked.connect(self._pick_color); self.addWidget(self.btn_color)
        self._sync_color_button()

        self.addSeparator()

        # History
        self.act_undo = self._act("↶ Undo", self.requestUndo.emit); self.act_undo.setShortcut(QKeySequence.Undo)
        self.act_redo = self._act("↷ Redo", self.requestRedo.emit)
        self.act_redo.setShortcuts([QKeySequence("Ctrl+Y"), QKeySequence("Ctrl+Shift+Z")])
        for a in (self.act_undo, self.act_redo): self.addAction(a)
        self.addAction(self._act("🗑 Clear", self.requestClear.emit))

        self.addSeparator()

        a_save = self._act("💾 Save", self.requestSave.emit); a_save.setShortcut(QKeySequence.Save); self.addAction(a_save)

    # ---- helpers ----
    def _act(self, text, slot):
        a = QAction(text, self); a.triggered.connect(slot); return a

    def _pick_color(self):
        c = QtWidgets.QColorDialog.getColor(QtGui.QColor(*self._color), self, "Choose a Color")
        if c.isValid():
            self._color = (c.red(), c.green(), c.blue())
            self._sync_color_button()
            self.colorPicked.emit(self._color)

    def _sync_color_button(self):
        pm = QtGui.QPixmap(12, 12); pm.fill(QtGui.QColor(*self._color))
        self.btn_color.setIcon(QtGui.QIcon(pm))

    # Cho Window đồng bộ lại trạng thái nút khi đổi từ ngoài:
    def reflect_mode(self, mode: DrawingMode):
        for m, act in self._mode_actions.items():
            act.setChecked(m == mode)

    def reflect_history(self, can_undo: bool, can_redo: bool):
        self.act_undo.setEnabled(can_undo)
        self.act_redo.setEnabled(can_redo)
