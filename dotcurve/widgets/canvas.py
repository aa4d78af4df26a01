from PySide6 import QtCore, QtGui, QtWidgets

from dotcurve.core import EditorSession, Point, RenderOutput


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return p.x(), p.y()


def point_to_qpoint(p: Point) -> QtCore.QPointF:
    x, y = p
    return QtCore.QPointF(x, y)


class CanvasWidget(QtWidgets.QWidget):
    """
    View/controller for an EditorSession.
    Left clicks become session clicks (add, or remove in delete mode); the
    geometry comes from `session.render`, which is cached until the next edit.
    """

    pointsChanged = QtCore.Signal()  # emitted after any session mutation

    GRID_COLORS = (QtGui.QColor.fromRgbF(0.23, 0.25, 0.18), QtGui.QColor.fromRgbF(0.21, 0.23, 0.19))
    BORDER_COLOR = QtGui.QColor.fromRgbF(0.23, 0.37, 0.80)
    DOT_COLOR = QtGui.QColor(111, 50, 0)
    LINE_COLOR = QtGui.QColor(205, 214, 244)

    def __init__(self, session: EditorSession, parent=None):
        super().__init__(parent)
        self._session = session
        self._session.subscribe(self._on_session_changed)
        self.setMouseTracking(True)
        self.setCursor(QtCore.Qt.CursorShape.CrossCursor)

    # --- public API -------------------------
    @property
    def session(self) -> EditorSession:
        return self._session

    def geometry_output(self) -> RenderOutput:
        return self._session.render(self.width(), self.height())

    # ---------- size hints ----------
    def sizeHint(self):
        w, h = self._session.config.canvas_size
        return QtCore.QSize(w, h)

    def minimumSizeHint(self):
        return QtCore.QSize(200, 200)

    # ---------- Qt events ----------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            return super().mousePressEvent(e)
        pos = QtCore.QPointF(e.position())
        if not self.rect().contains(pos.toPoint()):
            return
        self._session.click(qpoint_to_point(pos))

    def _on_session_changed(self):
        self.pointsChanged.emit()
        self.update()

    # ---------- painting ----------
    def _draw_grid(self, painter: QtGui.QPainter):
        spacing = self._session.config.grid_spacing
        vertical, horizontal = self.GRID_COLORS
        painter.setPen(QtGui.QPen(vertical, 1.0))
        for x in range(0, self.width(), spacing):
            painter.drawLine(QtCore.QPointF(x, 0), QtCore.QPointF(x, self.height()))
        painter.setPen(QtGui.QPen(horizontal, 1.0))
        for y in range(0, self.height(), spacing):
            painter.drawLine(QtCore.QPointF(0, y), QtCore.QPointF(self.width(), y))

        painter.setPen(QtGui.QPen(self.BORDER_COLOR, 4.0))
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawRect(self.rect())

    def _draw_dots(self, painter: QtGui.QPainter, output: RenderOutput):
        r = self._session.config.dot_radius
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(self.DOT_COLOR)
        for pt in output.dots:
            painter.drawEllipse(point_to_qpoint(pt), r, r)

    def _draw_segments(self, painter: QtGui.QPainter, output: RenderOutput):
        painter.setPen(QtGui.QPen(self.LINE_COLOR, self._session.config.stroke_width))
        for a, b in output.straight_segments:
            painter.drawLine(point_to_qpoint(a), point_to_qpoint(b))

    def _draw_curve(self, painter: QtGui.QPainter, output: RenderOutput):
        if len(output.curve) < 2:
            return
        path = QtGui.QPainterPath(point_to_qpoint(output.curve[0]))
        for pt in output.curve[1:]:
            path.lineTo(point_to_qpoint(pt))
        painter.setPen(QtGui.QPen(self.LINE_COLOR, self._session.config.stroke_width))
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

    def paintEvent(self, _):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        output = self.geometry_output()

        self._draw_grid(p)
        self._draw_dots(p, output)
        self._draw_segments(p, output)
        self._draw_curve(p, output)

        p.end()
