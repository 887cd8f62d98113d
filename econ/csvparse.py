# econ/csvparse.py
from __future__ import annotations

import logging
from typing import List, Tuple

from .records import COLUMNS, Record, make_record

log = logging.getLogger(__name__)


def split_csv_line(line: str) -> List[str]:
    """
    Split one CSV line on commas, honouring double-quoted fields.

    Quotes toggle quoted mode and are dropped. There is no "" escape and no
    multi-line field support; the last field is always emitted.
    """
    out = []
    cur = []
    in_quotes = False
    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            out.append("".join(cur))
            cur = []
        else:
            cur.append(ch)
    out.append("".join(cur))
    return out


def parse_header(line: str) -> List[str]:
    return [c.strip() for c in line.split(",")]


def parse_csv(text: str) -> Tuple[Record, ...]:
    """
    Parse WDI extract text into Records, in source order.

    Empty lines are skipped, but a whitespace-only line is still a record.
    Short lines read missing cells as "" and unknown header columns are
    ignored. Never raises on odd cells.
    """
    lines = text.strip().split("\n")
    header, body = lines[0], lines[1:]
    if not header.strip():
        return ()

    cols = parse_header(header.rstrip("\r"))
    missing = [c for c in COLUMNS if c not in cols]
    if missing:
        log.warning("CSV header lacks columns %s; they will read as empty", missing)

    records = []
    for line in body:
        line = line.rstrip("\r")
        if not line:
            continue
        values = split_csv_line(line)
        row = {
            c: (values[i] if i < len(values) else "") for i, c in enumerate(cols)
        }
        records.append(make_record(row))

    log.info("Parsed %d records (%d columns)", len(records), len(cols))
    return tuple(records)
