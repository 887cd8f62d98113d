# econ/aggregate.py
from __future__ import annotations

from typing import List, NamedTuple, Sequence

import pandas as pd

from .records import NUMERIC_FIELDS, Record

TOP_N = 10


class Kpis(NamedTuple):
    country_count: int
    total_population: float
    average_gdp_2019: float
    growth_count: int


class RankedEntry(NamedTuple):
    label: str
    value: float


class Summary(NamedTuple):
    kpis: Kpis
    top_gdp: List[RankedEntry]
    top_population: List[RankedEntry]


def to_frame(dataset: Sequence[Record]) -> pd.DataFrame:
    """Records -> DataFrame with float64 numeric columns (None -> NaN)."""
    df = pd.DataFrame.from_records(list(dataset), columns=Record._fields)
    for col in NUMERIC_FIELDS:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype("float64")
    return df


def _ranked(labels: pd.Series, values: pd.Series, n: int) -> List[RankedEntry]:
    # kind="stable" keeps source order among equal values
    order = values.sort_values(ascending=False, kind="stable").index[:n]
    return [RankedEntry(str(labels.loc[i]), float(values.loc[i])) for i in order]


def compute_kpis(dataset: Sequence[Record]) -> Kpis:
    df = to_frame(dataset)
    gdp = df["gdp_2019"]
    has_gdp = gdp.notna()
    grew = df["gdp_1993"].notna() & has_gdp & (gdp > df["gdp_1993"])
    return Kpis(
        country_count=len(df),
        total_population=float(df["pop_2019"].fillna(0.0).sum()),
        average_gdp_2019=float(gdp[has_gdp].mean()) if has_gdp.any() else 0.0,
        growth_count=int(grew.sum()),
    )


def top_gdp_by_country(
    dataset: Sequence[Record], n: int = TOP_N
) -> List[RankedEntry]:
    """Top-n countries by 2019 GDP; rows without a 2019 value are skipped."""
    df = to_frame(dataset)
    df = df[df["gdp_2019"].notna()]
    return _ranked(df["country"], df["gdp_2019"], n)


def top_population_by_region(
    dataset: Sequence[Record], n: int = TOP_N
) -> List[RankedEntry]:
    """
    Sum 2019 population per region (missing counts as 0) and return the
    top-n regions. Groups keep first-seen order, so ties rank by the region's
    first appearance in the dataset.
    """
    df = to_frame(dataset)
    if df.empty:
        return []
    sums = (
        df.assign(pop_2019=df["pop_2019"].fillna(0.0))
        .groupby("region", sort=False, dropna=False)["pop_2019"]
        .sum()
    )
    regions = pd.Series(sums.index, index=sums.index)
    return _ranked(regions, sums, n)


def summarize(dataset: Sequence[Record], n: int = TOP_N) -> Summary:
    return Summary(
        kpis=compute_kpis(dataset),
        top_gdp=top_gdp_by_country(dataset, n),
        top_population=top_population_by_region(dataset, n),
    )

