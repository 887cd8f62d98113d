"""
Pytest configuration and fixtures for wdidash tests.
"""
import pytest

from econ.csvparse import parse_csv
from econ.records import Record
from econ.state import Renderer

SAMPLE_CSV = (
    "country,region,income_group,gdp_1993,gdp_2019,pop_2019\n"
    "Utopia,X,High income,100,200,1000\n"
    "Dystopia,X,Low income,NA,,500\n"
    '"Korea, Rep.",East Asia & Pacific,High income,400,1600,51000\n'
    "Chad,Sub-Saharan Africa,Low income,50,50,15000\n"
    "Japan,East Asia & Pacific,High income,4500,5100,126000\n"
)


class RecordingRenderer(Renderer):
    """Collects every render call as (name, payload)."""

    def __init__(self):
        self.calls = []

    def render_kpis(self, kpis):
        self.calls.append(("kpis", kpis))

    def render_charts(self, top_gdp, top_population):
        self.calls.append(("charts", (top_gdp, top_population)))

    def render_regions(self, options, current):
        self.calls.append(("regions", (options, current)))

    def render_table(self, rows):
        self.calls.append(("table", rows))

    def names(self):
        return [name for name, _ in self.calls]

    def last(self, name):
        return [payload for n, payload in self.calls if n == name][-1]


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def dataset(sample_csv):
    return parse_csv(sample_csv)


@pytest.fixture
def utopia_dataset():
    return (
        Record("Utopia", "X", "", 100.0, 200.0, 1000.0),
        Record("Dystopia", "X", "", None, None, 500.0),
    )


@pytest.fixture
def renderer():
    return RecordingRenderer()
