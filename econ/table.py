# econ/table.py
from __future__ import annotations

import unicodedata
from typing import List, NamedTuple, Optional, Sequence

import pandas as pd

from .aggregate import to_frame
from .records import Record

ALL_REGIONS = "all"
TABLE_LIMIT = 40

TABLE_COLUMNS = [
    "country",
    "region",
    "income_group",
    "gdp_1993",
    "gdp_2019",
    "pop_2019",
    "delta",
]


class TableRow(NamedTuple):
    country: str
    region: str
    income_group: str
    gdp_1993: Optional[float]
    gdp_2019: Optional[float]
    pop_2019: Optional[float]
    delta: Optional[float]


def _opt(x) -> Optional[float]:
    return None if pd.isna(x) else float(x)


def filter_by_region(dataset: Sequence[Record], region: str) -> List[Record]:
    """Exact, case-sensitive region match; ALL_REGIONS keeps everything."""
    if region == ALL_REGIONS:
        return list(dataset)
    return [r for r in dataset if r.region == region]


def build_table(
    dataset: Sequence[Record],
    region: str = ALL_REGIONS,
    limit: int = TABLE_LIMIT,
) -> List[TableRow]:
    """
    Rows for the country table: filter by region, sort by 2019 GDP
    descending (missing GDP sorts as 0, ties keep source order), cap at
    `limit` rows and add the 1993->2019 GDP delta.
    """
    rows = filter_by_region(dataset, region)
    if not rows:
        return []

    df = to_frame(rows)
    sort_key = df["gdp_2019"].fillna(0.0)
    df = df.loc[sort_key.sort_values(ascending=False, kind="stable").index]
    df = df.head(limit)
    # NaN propagates, so delta is missing unless both years are present
    df["delta"] = df["gdp_2019"] - df["gdp_1993"]

    return [
        TableRow(
            country=r.country,
            region=r.region,
            income_group=r.income_group,
            gdp_1993=_opt(r.gdp_1993),
            gdp_2019=_opt(r.gdp_2019),
            pop_2019=_opt(r.pop_2019),
            delta=_opt(r.delta),
        )
        for r in df.itertuples(index=False)
    ]


def rows_to_frame(rows: Sequence[TableRow]) -> pd.DataFrame:
    return pd.DataFrame.from_records(list(rows), columns=TABLE_COLUMNS)


def _collation_key(name: str) -> str:
    """Case- and accent-insensitive sort key (e.g. 'Éire' sorts with 'eire')."""
    s = unicodedata.normalize("NFKD", name)
    s = "".join(c for c in s if not unicodedata.combining(c))
    return s.casefold()


def distinct_regions(dataset: Sequence[Record]) -> List[str]:
    """Sorted distinct regions; the ALL_REGIONS option is added by callers."""
    # swapcase puts "a" ahead of "A" on otherwise equal keys
    return sorted(
        {r.region for r in dataset}, key=lambda s: (_collation_key(s), s.swapcase())
    )
