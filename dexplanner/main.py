"""Build the annotated Pokédex and its HTML report.

Usage:
    uv run python -m dexplanner.main [raw_records.json] [--rebuild] [--graph] [--summary] [--no-browser]

Example:
    uv run python -m dexplanner.main data/raw.json --rebuild --graph

If the data file already exists it is reused; otherwise the raw records are
classified, demand is propagated along evolution chains, and the result is
saved before the report is written.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dexplanner.config import Settings, load_settings
from dexplanner.demand import propagate_all
from dexplanner.graph import build_graph
from dexplanner.models import EntityRecord
from dexplanner.report import open_in_browser, summary_report, write_report
from dexplanner.storage import load_pokedex, load_raw_records, save_pokedex
from dexplanner.transform import transform_all
from dexplanner.visualizer import generate_visualization


def build_pokedex(raw_path: Path, data_file: Path) -> list[EntityRecord]:
    """Classify raw records, propagate demand, and save the result."""
    print(f"Loading raw records: {raw_path}")
    raws = load_raw_records(raw_path)
    print(f"  {len(raws)} records")

    records = transform_all(raws)
    capturable = sum(1 for r in records if r.capturable)
    print(f"  {capturable} capturable, {len(records) - capturable} evolution/trade only")

    records = propagate_all(records)
    print(f"  {sum(r.needed or 0 for r in records)} units of demand propagated")

    save_pokedex(records, data_file, source=str(raw_path))
    print(f"Data saved to: {data_file}")
    return records


def run(args: argparse.Namespace, settings: Settings) -> int:
    data_file = Path(args.data) if args.data else settings.data_file
    output_file = Path(args.output) if args.output else settings.output_file

    if data_file.exists() and not args.rebuild:
        print(f"Loading data file: {data_file}")
        records = load_pokedex(data_file).records
    else:
        if args.raw is None:
            print(
                f"Error: {data_file} not found and no raw records given.",
                file=sys.stderr,
            )
            return 1
        records = build_pokedex(Path(args.raw), data_file)

    write_report(records, output_file)
    print(f"HTML report written to: {output_file}")

    if args.graph:
        generate_visualization(build_graph(records), settings.graph_file)
        print(f"Evolution graph written to: {settings.graph_file}")

    if args.summary:
        summary_report(records)

    if not args.no_browser:
        open_in_browser(output_file)
    return 0


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValueError as exc:
        # pydantic ValidationError for a bad DEXPLANNER_* value
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(
        prog="python -m dexplanner.main",
        description="Classify Pokédex entries and count how many of each capturable Pokémon are needed.",
    )
    parser.add_argument(
        "raw",
        nargs="?",
        help="Path to a JSON array of raw records (needed when the data file is missing).",
    )
    parser.add_argument("--data", help=f"Annotated data file (default: {settings.data_file}).")
    parser.add_argument("--output", help=f"HTML report path (default: {settings.output_file}).")
    parser.add_argument(
        "--rebuild",
        action="store_true",
        help="Rebuild the data file from the raw records even if it exists.",
    )
    parser.add_argument("--graph", action="store_true", help="Also write the evolution graph HTML.")
    parser.add_argument("--summary", action="store_true", help="Print a capturability/demand summary.")
    parser.add_argument("--no-browser", action="store_true", help="Don't open the report in a browser.")

    args = parser.parse_args(argv)

    try:
        return run(args, settings)
    except (FileNotFoundError, ValueError) as exc:
        # Covers malformed JSON, invalid records and cyclic evolution chains
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
