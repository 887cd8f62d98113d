# econ/state.py
from __future__ import annotations

import logging
from typing import Callable, List, NamedTuple, Sequence, Tuple

from .aggregate import Kpis, RankedEntry, summarize
from .csvparse import parse_csv
from .io import read_source_text
from .records import Record
from .table import ALL_REGIONS, TableRow, build_table, distinct_regions

log = logging.getLogger(__name__)


class DashboardState(NamedTuple):
    dataset: Tuple[Record, ...] = ()
    region: str = ALL_REGIONS


class Renderer:
    """
    Rendering port. Front-ends (console, Qt) subclass this and draw the plain
    values they are handed; the base methods do nothing.
    """

    def render_kpis(self, kpis: Kpis) -> None:
        pass

    def render_charts(
        self, top_gdp: List[RankedEntry], top_population: List[RankedEntry]
    ) -> None:
        pass

    def render_regions(self, options: List[str], current: str) -> None:
        pass

    def render_table(self, rows: List[TableRow]) -> None:
        pass


def region_options(dataset: Sequence[Record]) -> List[str]:
    return [ALL_REGIONS] + distinct_regions(dataset)


class DashboardController:
    """
    Owns the current DashboardState and pushes derived views to a Renderer.

    Only reload() replaces the dataset, and only once the source text has been
    read and parsed; a failed read leaves the previous state in place.
    """

    def __init__(
        self,
        source: str,
        renderer: Renderer | None = None,
        reader: Callable[[str], str] = read_source_text,
    ):
        self.source = source
        self.renderer = renderer or Renderer()
        self.reader = reader
        self.state = DashboardState()
        self._loading = False

    def reload(self) -> bool:
        """Re-read the source, reset the region filter and re-render everything."""
        if self._loading:
            log.warning("Reload of %s already in progress; ignoring", self.source)
            return False
        self._loading = True
        try:
            text = self.reader(self.source)
            dataset = parse_csv(text)
        finally:
            self._loading = False

        self.state = DashboardState(dataset=dataset, region=ALL_REGIONS)
        self.render_all()
        return True

    def set_region_filter(self, region: str) -> None:
        """Change the table filter; KPIs and charts are unaffected."""
        self.state = self.state._replace(region=region)
        self.renderer.render_table(self.table_rows())

    def table_rows(self) -> List[TableRow]:
        return build_table(self.state.dataset, self.state.region)

    def render_all(self) -> None:
        dataset = self.state.dataset
        summary = summarize(dataset)
        self.renderer.render_kpis(summary.kpis)
        self.renderer.render_charts(summary.top_gdp, summary.top_population)
        self.renderer.render_regions(region_options(dataset), self.state.region)
        self.renderer.render_table(self.table_rows())
