# econ/formatting.py
"""Display helpers shared by the CLI and the GUI (en-US compact notation)."""
from __future__ import annotations

from typing import Optional

NA_MARKER = "N/A"

_UNITS = ["", "K", "M", "B", "T"]


def _compact(x: float) -> str:
    sign = "-" if x < 0 else ""
    x = abs(x)
    idx = 0
    while idx < len(_UNITS) - 1 and x >= 1000:
        x /= 1000.0
        idx += 1
    x = round(x, 2)
    # 999.999K rounds to 1000K -> 1M
    if x >= 1000 and idx < len(_UNITS) - 1:
        x = round(x / 1000.0, 2)
        idx += 1
    text = f"{x:.2f}".rstrip("0").rstrip(".")
    if text == "0":
        sign = ""
    return f"{sign}{text}{_UNITS[idx]}"


def format_compact(value: Optional[float]) -> str:
    if value is None:
        return NA_MARKER
    return _compact(float(value))


def format_currency(value: Optional[float]) -> str:
    if value is None:
        return NA_MARKER
    text = _compact(float(value))
    if text.startswith("-"):
        return f"-${text[1:]}"
    return f"${text}"


def short_label(label: str, width: int = 11) -> str:
    return f"{label[:width]}..." if len(label) > width else label
