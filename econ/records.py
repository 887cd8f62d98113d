# econ/records.py
from __future__ import annotations

import re
from typing import NamedTuple, Optional

import numpy as np

MISSING_SENTINEL = "NA"

# plain decimal literal: sign, digits, optional fraction, optional exponent
DECIMAL_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")

# header names, matched exactly; they double as Record field names
COLUMNS = ("country", "region", "income_group", "gdp_1993", "gdp_2019", "pop_2019")

NUMERIC_FIELDS = ("gdp_1993", "gdp_2019", "pop_2019")


class Record(NamedTuple):
    country: str
    region: str
    income_group: str
    gdp_1993: Optional[float]
    gdp_2019: Optional[float]
    pop_2019: Optional[float]


def to_number(value: str | None) -> Optional[float]:
    """Coerce a CSV cell to a finite float, or None for empty / 'NA' / junk."""
    if not value or value == MISSING_SENTINEL:
        return None
    if not DECIMAL_RE.match(value):
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    return parsed if np.isfinite(parsed) else None


def make_record(row: dict) -> Record:
    """Build a Record from a header-keyed dict of raw string cells."""
    return Record(
        country=row.get("country", ""),
        region=row.get("region", ""),
        income_group=row.get("income_group", ""),
        gdp_1993=to_number(row.get("gdp_1993")),
        gdp_2019=to_number(row.get("gdp_2019")),
        pop_2019=to_number(row.get("pop_2019")),
    )
