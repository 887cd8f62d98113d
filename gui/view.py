# wdidash/gui/view.py
from __future__ import annotations
from typing import List
import os

from PyQt6 import QtCore, QtGui, QtWidgets
import pandas as pd

from econ.aggregate import RankedEntry
from econ.formatting import NA_MARKER, format_compact, format_currency, short_label
from econ.io import DEFAULT_SOURCE
from econ.table import ALL_REGIONS

# project root = folder containing this 'gui' package's parent directory
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))

DEFAULT_SOURCE_PATH = os.path.join(PROJECT_ROOT, DEFAULT_SOURCE)

DISPLAY_COLS = ["country", "region", "income_group", "gdp_2019", "pop_2019", "delta"]

HEADER_LABELS = {
    "country": "Country",
    "region": "Region",
    "income_group": "Income group",
    "gdp_2019": "GDP 2019",
    "pop_2019": "Population 2019",
    "delta": "GDP change since 1993",
}

CURRENCY_COLS = ("gdp_2019", "delta")


class DataFrameModel(QtCore.QAbstractTableModel):
    def __init__(self, df: pd.DataFrame = pd.DataFrame(), parent=None):
        super().__init__(parent)
        self._df = df.copy()

    def setDataFrame(self, df: pd.DataFrame):
        self.beginResetModel()
        self._df = df.copy()
        self.endResetModel()

    def rowCount(self, parent=QtCore.QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._df)

    def columnCount(self, parent=QtCore.QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._df.columns)

    def data(self, index, role=QtCore.Qt.ItemDataRole.DisplayRole):
        if not index.isValid():
            return None
        col = self._df.columns[index.column()]
        if role == QtCore.Qt.ItemDataRole.TextAlignmentRole:
            if col in CURRENCY_COLS or col == "pop_2019":
                return QtCore.Qt.AlignmentFlag.AlignRight | QtCore.Qt.AlignmentFlag.AlignVCenter
            return None
        if role == QtCore.Qt.ItemDataRole.DisplayRole:
            val = self._df.iat[index.row(), index.column()]
            if col in CURRENCY_COLS:
                return NA_MARKER if pd.isna(val) else format_currency(float(val))
            if col == "pop_2019":
                return NA_MARKER if pd.isna(val) else format_compact(float(val))
            return "" if pd.isna(val) else str(val)
        return None

    def headerData(self, section, orientation, role=QtCore.Qt.ItemDataRole.DisplayRole):
        if role != QtCore.Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == QtCore.Qt.Orientation.Horizontal:
            name = str(self._df.columns[section])
            return HEADER_LABELS.get(name, name)
        return str(section + 1)


class BarChart(QtWidgets.QWidget):
    """Painted vertical bar chart for up to ten label/value pairs."""

    def __init__(self, title: str, color: str, parent=None):
        super().__init__(parent)
        self.setMinimumHeight(240)
        self._title = title
        self._color = QtGui.QColor(color)
        self._data: List[RankedEntry] = []

    def setData(self, data: List[RankedEntry]):
        self._data = list(data)
        self.update()

    def paintEvent(self, event):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        rect = self.rect().adjusted(8, 8, -8, -8)
        p.drawText(rect.left(), rect.top() + 12, self._title)
        if not self._data:
            p.end()
            return

        top = rect.top() + 24
        bottom = rect.bottom() - 28
        plot_h = max(1, bottom - top)
        step = rect.width() / len(self._data)
        bar_w = max(16.0, step - 12.0)
        vmax = max(max(d.value for d in self._data), 1.0)

        for idx, d in enumerate(self._data):
            x = rect.left() + idx * step + 6
            h = (d.value / vmax) * plot_h
            bar = QtCore.QRectF(x, bottom - h, bar_w, h)
            path = QtGui.QPainterPath()
            path.addRoundedRect(bar, 4, 4)
            p.fillPath(path, QtGui.QBrush(self._color))
            p.drawText(QtCore.QPointF(x, bottom + 18), short_label(d.label))
        p.end()


class MainWindow(QtWidgets.QMainWindow):
    refreshRequested = QtCore.pyqtSignal()
    exportRequested = QtCore.pyqtSignal()
    regionChanged = QtCore.pyqtSignal(str)

    def __init__(self, source: str = DEFAULT_SOURCE_PATH):
        super().__init__()
        self.setWindowTitle("World Development Indicators — Dashboard")
        self.resize(1280, 860)

        central = QtWidgets.QWidget(self)
        self.setCentralWidget(central)
        root = QtWidgets.QVBoxLayout(central)

        # Source + actions
        self.source_edit = QtWidgets.QLineEdit(source)
        self.refresh_btn = QtWidgets.QPushButton("Refresh")
        self.export_btn = QtWidgets.QPushButton("Export CSV")
        self.export_btn.setEnabled(False)
        top = QtWidgets.QHBoxLayout()
        top.addWidget(QtWidgets.QLabel("Source:"))
        top.addWidget(self._with_browse(self.source_edit, "CSV Files (*.csv)"), 1)
        top.addWidget(self.refresh_btn)
        top.addWidget(self.export_btn)
        root.addLayout(top)

        # KPIs
        self.kpi_countries = self._kpi_label()
        self.kpi_population = self._kpi_label()
        self.kpi_avg_gdp = self._kpi_label()
        self.kpi_growth = self._kpi_label()
        kpis = QtWidgets.QHBoxLayout()
        for title, lbl in (
            ("Countries", self.kpi_countries),
            ("Population (2019)", self.kpi_population),
            ("Average GDP (2019)", self.kpi_avg_gdp),
            ("Grew since 1993", self.kpi_growth),
        ):
            kpis.addWidget(self._group_form(title, [("", lbl)]))
        root.addLayout(kpis)

        # Charts
        self.gdp_chart = BarChart("Top 10 GDP (2019)", "#3b6fd4")
        self.region_chart = BarChart("Population by region (2019)", "#8fb3f0")
        charts = QtWidgets.QHBoxLayout()
        charts.addWidget(self.gdp_chart, 1)
        charts.addWidget(self.region_chart, 1)
        root.addLayout(charts)

        # Region filter + table
        self.region_combo = QtWidgets.QComboBox()
        self.region_combo.addItem("All regions", ALL_REGIONS)
        filt = QtWidgets.QHBoxLayout()
        filt.addWidget(QtWidgets.QLabel("Region:"))
        filt.addWidget(self.region_combo)
        filt.addStretch(1)
        root.addLayout(filt)

        self.model = DataFrameModel(pd.DataFrame(columns=DISPLAY_COLS))
        self.table = QtWidgets.QTableView()
        self.table.setModel(self.model)
        self.table.horizontalHeader().setStretchLastSection(True)
        root.addWidget(self.table, 1)

        self.status_lbl = QtWidgets.QLabel("Ready.")
        root.addWidget(self.status_lbl)

        # Signals
        self.refresh_btn.clicked.connect(self.refreshRequested.emit)
        self.export_btn.clicked.connect(self.exportRequested.emit)
        self.region_combo.activated.connect(
            lambda i: self.regionChanged.emit(self.region_combo.itemData(i))
        )

    # ---- helpers ----
    def _with_browse(self, line: QtWidgets.QLineEdit, filt: str):
        btn = QtWidgets.QPushButton("Browse…")
        btn.clicked.connect(lambda: self._pick(line, filt))
        hb = QtWidgets.QHBoxLayout()
        hb.setContentsMargins(0, 0, 0, 0)
        hb.addWidget(line)
        hb.addWidget(btn)
        w = QtWidgets.QWidget()
        w.setLayout(hb)
        return w

    def _pick(self, line: QtWidgets.QLineEdit, filt: str):
        path, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Select file", "", filt)
        if path:
            line.setText(path)

    def _group_form(self, title: str, rows: list[tuple[str, QtWidgets.QWidget]]):
        gb = QtWidgets.QGroupBox(title)
        form = QtWidgets.QFormLayout()
        for label, widget in rows:
            form.addRow(label, widget)
        gb.setLayout(form)
        return gb

    def _kpi_label(self):
        lbl = QtWidgets.QLabel("–")
        font = lbl.font()
        font.setPointSize(font.pointSize() + 6)
        font.setBold(True)
        lbl.setFont(font)
        return lbl

    # ---- used by controller ----
    def set_regions(self, options: List[str], current: str):
        self.region_combo.blockSignals(True)
        self.region_combo.clear()
        for option in options:
            text = "All regions" if option == ALL_REGIONS else option
            self.region_combo.addItem(text, option)
        idx = self.region_combo.findData(current)
        self.region_combo.setCurrentIndex(max(idx, 0))
        self.region_combo.blockSignals(False)
