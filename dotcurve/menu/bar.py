from PySide6 import QtCore, QtWidgets

from dotcurve.widgets import CanvasWidget


class ControlBar(QtWidgets.QWidget):
    """
    Button column next to the canvas:
      - Clear: drop every point and reset the modes
      - Straight: toggle straight connectors
      - Curve: cycle the curve algorithm (disabled below the minimum point count)
      - Delete: toggle delete-on-click
    Hidden while the canvas holds no points.
    """

    def __init__(self, canvas: CanvasWidget, parent=None):
        super().__init__(parent)
        self.canvas = canvas
        self.setObjectName("ControlBar")

        self.clear_button = QtWidgets.QPushButton("Clear")
        self.straight_button = QtWidgets.QPushButton()
        self.curve_button = QtWidgets.QPushButton()
        self.delete_button = QtWidgets.QPushButton()
        self.clear_button.setObjectName("danger")

        self.buttons = QtWidgets.QWidget(self)
        outer = QtWidgets.QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(self.buttons)

        lay = QtWidgets.QVBoxLayout(self.buttons)
        lay.setContentsMargins(10, 10, 10, 10)
        lay.setSpacing(10)
        for button in (self.clear_button, self.straight_button, self.curve_button, self.delete_button):
            lay.addWidget(button)
        lay.addStretch(1)

        self.clear_button.clicked.connect(self._clear)
        self.straight_button.clicked.connect(self._toggle_straight)
        self.curve_button.clicked.connect(self._cycle_curve)
        self.delete_button.clicked.connect(self._toggle_delete)
        self.canvas.pointsChanged.connect(self.refresh)

        self.refresh()

    @property
    def session(self):
        return self.canvas.session

    def refresh(self, /):
        modes = self.session.modes
        count = len(self.session.points)
        self.straight_button.setText(modes.straight_label())
        self.curve_button.setText(modes.curve_label(count))
        self.curve_button.setEnabled(modes.curve_enabled(count))
        self.delete_button.setText(modes.delete_label())
        self.buttons.setHidden(count == 0)

    @QtCore.Slot()
    def _clear(self):
        self.session.clear()

    @QtCore.Slot()
    def _toggle_straight(self):
        self.session.toggle_straight()

    @QtCore.Slot()
    def _cycle_curve(self):
        self.session.cycle_curve()

    @QtCore.Slot()
    def _toggle_delete(self):
        self.session.toggle_delete()
