# wdidash/gui/app.py
from __future__ import annotations
import sys
from PyQt6 import QtWidgets

from econ.io import DEFAULT_SOURCE

from .view import MainWindow
from .controller import Controller


def run_gui(source: str = DEFAULT_SOURCE):
    app = QtWidgets.QApplication(sys.argv)
    app.setStyle("Fusion")
    win = MainWindow(source)
    # IMPORTANT: keep a strong reference so signals/slots stay connected
    win.controller = Controller(win)
    win.show()
    win.controller.on_refresh()
    sys.exit(app.exec())
