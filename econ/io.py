# econ/io.py
from __future__ import annotations

import logging
from typing import Sequence, Tuple

import requests

from .csvparse import parse_csv
from .records import Record
from .table import TableRow, rows_to_frame

log = logging.getLogger(__name__)

DEFAULT_SOURCE = "WDI Data Extract API-209 - PS 1 - 2022.csv"

HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; wdidash/1.0)",
    "Accept": "text/csv,text/plain;q=0.9,*/*;q=0.8",
}


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def read_source_text(source: str, session: requests.Session | None = None) -> str:
    """
    Return the raw CSV text from a local path or an http(s) URL.

    Errors (missing file, HTTP failure) propagate to the caller.
    """
    if is_url(source):
        log.debug("Fetching %s", source)
        sess = session or requests.Session()
        r = sess.get(source, headers=HEADERS, timeout=30)
        r.raise_for_status()
        return r.text
    log.debug("Reading %s", source)
    # utf-8-sig drops a BOM that would otherwise glue onto the first header
    with open(source, "r", encoding="utf-8-sig") as f:
        return f.read()


def load_dataset(source: str) -> Tuple[Record, ...]:
    return parse_csv(read_source_text(source))


def export_csv(rows: Sequence[TableRow], path: str) -> None:
    rows_to_frame(rows).to_csv(path, index=False)
