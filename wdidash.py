import argparse
import logging
import pandas as pd
import os, sys

import requests

# Make local package imports reliable when running as a script
sys.path.append(os.path.dirname(__file__))

from econ.formatting import NA_MARKER, format_compact, format_currency
from econ.io import DEFAULT_SOURCE, export_csv
from econ.state import DashboardController, Renderer, region_options
from econ.table import ALL_REGIONS, TABLE_LIMIT, rows_to_frame

try:
    from gui import run_gui
except ImportError:
    run_gui = None  # PyQt6 not installed; guarded in main()

PRINT_COLS = ["country", "region", "income_group", "gdp_2019", "pop_2019", "delta"]

FORMATTERS = {
    "gdp_2019": lambda x: NA_MARKER if pd.isna(x) else format_currency(x),
    "pop_2019": lambda x: NA_MARKER if pd.isna(x) else format_compact(x),
    "delta": lambda x: NA_MARKER if pd.isna(x) else format_currency(x),
}


def row_limit(value):
    n = int(value)
    if not 1 <= n <= TABLE_LIMIT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {TABLE_LIMIT}")
    return n


def print_table(df: pd.DataFrame, top: int | None = None):
    d = df.copy()
    if top is not None:
        d = d.head(top)
    with pd.option_context(
        "display.max_rows", None, "display.max_columns", None, "display.width", 180
    ):
        print(d.to_string(index=False, formatters=FORMATTERS))


class ConsoleRenderer(Renderer):
    def __init__(self, limit: int = TABLE_LIMIT):
        self.limit = limit

    def render_kpis(self, kpis):
        print(f"Countries:         {format_compact(kpis.country_count)}")
        print(f"Population (2019): {format_compact(kpis.total_population)}")
        print(f"Avg GDP (2019):    {format_currency(kpis.average_gdp_2019)}")
        print(f"Grew since 1993:   {format_compact(kpis.growth_count)}")

    def render_charts(self, top_gdp, top_population):
        print("\nTop GDP (2019) by country")
        for e in top_gdp:
            print(f"  {e.label:<32} {format_currency(e.value):>10}")
        print("\nPopulation (2019) by region")
        for e in top_population:
            print(f"  {e.label:<32} {format_compact(e.value):>10}")

    def render_table(self, rows):
        print()
        if not rows:
            print("No countries match the selected region.")
            return
        print_table(rows_to_frame(rows)[PRINT_COLS], top=self.limit)


def main(argv=None):
    p = argparse.ArgumentParser(description="World Development Indicators dashboard.")
    p.add_argument(
        "--file", default=DEFAULT_SOURCE, help="CSV path or http(s) URL of the extract."
    )
    p.add_argument(
        "--region", default=ALL_REGIONS, help="Filter the table to one region."
    )
    p.add_argument(
        "--limit",
        type=row_limit,
        default=TABLE_LIMIT,
        help=f"Max table rows to print (1-{TABLE_LIMIT}).",
    )
    p.add_argument("--export", default=None, help="Write the table rows to this CSV.")
    p.add_argument(
        "--list-regions", action="store_true", help="List region filter values and exit."
    )
    p.add_argument("--verbose", action="store_true", help="Debug logging.")
    p.add_argument(
        "--gui", action="store_true", help="Launch the desktop GUI and exit."
    )

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # ---- GUI path (early exit) ----
    if args.gui:
        if run_gui is None:
            print("GUI is not available. Ensure 'gui/' is present and PyQt6 is installed.")
            return 1
        run_gui(args.file)
        return 0

    # load quietly; the console renderer only sees the final filtered state
    controller = DashboardController(args.file, Renderer())
    try:
        controller.reload()
    except (OSError, UnicodeDecodeError, requests.RequestException) as e:
        print(f"Could not read '{args.file}': {e}")
        return 1

    options = region_options(controller.state.dataset)
    if args.list_regions:
        for option in options:
            print(option)
        return 0

    if args.region not in options:
        print(f"[warn] Region '{args.region}' not found in {args.file}.")
    controller.set_region_filter(args.region)

    controller.renderer = ConsoleRenderer(limit=args.limit)
    controller.render_all()

    if args.export:
        export_csv(controller.table_rows(), args.export)
        print(f"\nExported table rows to {args.export}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
