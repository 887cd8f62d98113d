# wdidash/gui/controller.py
from __future__ import annotations
from typing import List

import requests
from PyQt6 import QtWidgets

from econ.aggregate import Kpis, RankedEntry
from econ.formatting import format_compact, format_currency
from econ.io import export_csv
from econ.state import DashboardController, Renderer
from econ.table import TableRow, rows_to_frame

from .view import MainWindow, DISPLAY_COLS


class QtRenderer(Renderer):
    def __init__(self, window: MainWindow):
        self.w = window

    def render_kpis(self, kpis: Kpis):
        self.w.kpi_countries.setText(format_compact(kpis.country_count))
        self.w.kpi_population.setText(format_compact(kpis.total_population))
        self.w.kpi_avg_gdp.setText(format_currency(kpis.average_gdp_2019))
        self.w.kpi_growth.setText(format_compact(kpis.growth_count))

    def render_charts(
        self, top_gdp: List[RankedEntry], top_population: List[RankedEntry]
    ):
        self.w.gdp_chart.setData(top_gdp)
        self.w.region_chart.setData(top_population)

    def render_regions(self, options: List[str], current: str):
        self.w.set_regions(options, current)

    def render_table(self, rows: List[TableRow]):
        self.w.model.setDataFrame(rows_to_frame(rows)[DISPLAY_COLS])
        self.w.table.resizeColumnsToContents()
        self.w.export_btn.setEnabled(bool(rows))
        self.w.status_lbl.setText(f"Showing {len(rows)} countries")


class Controller:
    def __init__(self, window: MainWindow):
        self.w = window
        self.dashboard = DashboardController(
            self.w.source_edit.text().strip(), QtRenderer(window)
        )

        self.w.refreshRequested.connect(self.on_refresh)
        self.w.regionChanged.connect(self.on_region)
        self.w.exportRequested.connect(self.on_export)

    def _update_status(self, text: str):
        self.w.status_lbl.setText(text)

    def on_refresh(self):
        self._update_status("Loading…")
        self.dashboard.source = self.w.source_edit.text().strip()
        try:
            loaded = self.dashboard.reload()
        except (OSError, UnicodeDecodeError, requests.RequestException) as e:
            self._update_status("Load failed.")
            QtWidgets.QMessageBox.critical(self.w, "Load failed", str(e))
            return
        if loaded:
            n = len(self.dashboard.state.dataset)
            self._update_status(f"Loaded {n} countries | {self.w.status_lbl.text()}")

    def on_region(self, region: str):
        self.dashboard.set_region_filter(region)

    def on_export(self):
        rows = self.dashboard.table_rows()
        if not rows:
            QtWidgets.QMessageBox.warning(self.w, "Export", "No data to export.")
            return
        path, _ = QtWidgets.QFileDialog.getSaveFileName(
            self.w, "Save CSV", "wdi_countries.csv", "CSV Files (*.csv)"
        )
        if not path:
            return
        try:
            export_csv(rows, path)
            QtWidgets.QMessageBox.information(self.w, "Export", f"Saved: {path}")
        except OSError as e:
            QtWidgets.QMessageBox.critical(self.w, "Export", f"Failed to save: {e}")
