import argparse
import logging
import sys

from PySide6 import QtCore, QtWidgets

from dotcurve.config import EditorConfig, DEFAULT_EDITOR
from dotcurve.core import EditorSession
from dotcurve.logging_config import setup_logging
from dotcurve.menu import ControlBar
from dotcurve.widgets import CanvasWidget

logger = logging.getLogger(__name__)


class EditorWindow(QtWidgets.QWidget):
    def __init__(self, config: EditorConfig = DEFAULT_EDITOR, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Point and Curve Editor")

        self.session = EditorSession(config)
        self.canvas = CanvasWidget(self.session, parent=self)
        self.control_bar = ControlBar(self.canvas, parent=self)

        self.main_layout = QtWidgets.QHBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.addWidget(self.canvas, stretch=1)
        self.main_layout.addWidget(self.control_bar, alignment=QtCore.Qt.AlignmentFlag.AlignTop)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dotcurve", description="Interactive point and curve editor.")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    app = QtWidgets.QApplication(sys.argv[:1])
    app.setApplicationName("dotcurve")

    widget = EditorWindow()
    widget.resize(*DEFAULT_EDITOR.canvas_size)
    widget.show()
    logger.info("Editor window shown")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
