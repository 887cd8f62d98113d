"""
Unit tests for the country table and region options
"""
from econ.records import Record
from econ.table import (
    ALL_REGIONS,
    TABLE_COLUMNS,
    TableRow,
    build_table,
    distinct_regions,
    filter_by_region,
    rows_to_frame,
)


def rec(country, region="R", gdp_1993=None, gdp_2019=None):
    return Record(country, region, "inc", gdp_1993, gdp_2019, None)


class TestBuildTable:
    def test_all_regions_sorted_by_gdp(self, dataset):
        rows = build_table(dataset)
        assert [r.country for r in rows] == [
            "Japan",
            "Korea, Rep.",
            "Utopia",
            "Chad",
            "Dystopia",
        ]

    def test_delta(self, dataset):
        deltas = {r.country: r.delta for r in build_table(dataset)}
        assert deltas == {
            "Japan": 600.0,
            "Korea, Rep.": 1200.0,
            "Utopia": 100.0,
            "Chad": 0.0,
            "Dystopia": None,
        }

    def test_utopia_dystopia_rows(self, utopia_dataset):
        rows = build_table(utopia_dataset)
        assert rows[0] == TableRow("Utopia", "X", "", 100.0, 200.0, 1000.0, 100.0)
        assert rows[1].country == "Dystopia"
        assert rows[1].delta is None
        assert rows[1].gdp_2019 is None

    def test_filter_exact_region(self, dataset):
        rows = build_table(dataset, "East Asia & Pacific")
        assert [r.country for r in rows] == ["Japan", "Korea, Rep."]

    def test_filter_is_case_sensitive(self, dataset):
        assert build_table(dataset, "east asia & pacific") == []

    def test_unknown_region_is_empty(self, dataset):
        assert build_table(dataset, "Atlantis") == []

    def test_empty_dataset(self):
        assert build_table(()) == []

    def test_limit_forty(self):
        data = [rec(f"C{i}", gdp_2019=float(i)) for i in range(55)]
        rows = build_table(data)
        assert len(rows) == 40
        assert rows[0].country == "C54"
        assert rows[-1].country == "C15"

    def test_missing_gdp_sorts_as_zero_and_stays_missing(self):
        data = [
            rec("Neg", gdp_2019=-5.0),
            rec("Missing"),
            rec("Zero", gdp_2019=0.0),
            rec("Pos", gdp_2019=1.0),
        ]
        rows = build_table(data)
        assert [r.country for r in rows] == ["Pos", "Missing", "Zero", "Neg"]
        assert rows[1].gdp_2019 is None

    def test_ties_keep_source_order(self):
        data = [rec("A", gdp_2019=1.0), rec("B"), rec("C", gdp_2019=1.0), rec("D")]
        assert [r.country for r in build_table(data)] == ["A", "C", "B", "D"]

    def test_returns_plain_floats(self, dataset):
        row = build_table(dataset)[0]
        assert type(row.gdp_2019) is float
        assert type(row.delta) is float


def test_filter_by_region(dataset):
    assert len(filter_by_region(dataset, ALL_REGIONS)) == 5
    assert [r.country for r in filter_by_region(dataset, "X")] == ["Utopia", "Dystopia"]


def test_rows_to_frame(dataset):
    df = rows_to_frame(build_table(dataset))
    assert list(df.columns) == TABLE_COLUMNS
    assert len(df) == 5


def test_rows_to_frame_empty():
    df = rows_to_frame([])
    assert df.empty
    assert list(df.columns) == TABLE_COLUMNS


class TestDistinctRegions:
    def test_sample(self, dataset):
        assert distinct_regions(dataset) == [
            "East Asia & Pacific",
            "Sub-Saharan Africa",
            "X",
        ]

    def test_case_and_accent_insensitive_order(self):
        data = [rec("a", r) for r in ["beta", "Alpha", "Él", "delta", "Alpha"]]
        assert distinct_regions(data) == ["Alpha", "beta", "delta", "Él"]

    def test_lowercase_before_uppercase_on_ties(self):
        data = [rec("x", r) for r in ["A", "b", "a"]]
        assert distinct_regions(data) == ["a", "A", "b"]

    def test_excludes_all_sentinel_option(self, dataset):
        assert ALL_REGIONS not in distinct_regions(dataset)

    def test_empty(self):
        assert distinct_regions([]) == []
