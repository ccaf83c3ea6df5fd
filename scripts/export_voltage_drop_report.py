"""Calculate feeder voltage drop for circuits in a Revit ODBC export.

Reads the electrical circuit tables from an exported Access database, applies
the wire catalog and reserve from the settings file, prints the text report
and optionally saves an Excel workbook.

Usage:
    uv run python scripts/export_voltage_drop_report.py model.accdb \
        --settings pack_settings.json --units revit --output voltage_drop.xlsx
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from voltage_drop.calc.engine import VoltageDropEngine
from voltage_drop.db.access_reader import connect, read_circuits
from voltage_drop.db.settings_loader import load_settings
from voltage_drop.errors import ExportTableError
from voltage_drop.host import REVIT_INTERNAL_UNITS, SI_UNITS
from voltage_drop.logging_setup import init_logging
from voltage_drop.report import format_report
from voltage_drop.workbook import write_results_workbook

UNIT_SYSTEMS = {"si": SI_UNITS, "revit": REVIT_INTERNAL_UNITS}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("database", type=Path, help="Exported .mdb/.accdb model database")
    parser.add_argument("--settings", type=Path, help="Pack settings JSON (wire sizes, templates)")
    parser.add_argument("--units", choices=sorted(UNIT_SYSTEMS), default="si")
    parser.add_argument("--output", type=Path, help="Write results to this .xlsx workbook")
    parser.add_argument("--na", default=None, help="Text shown for figures that cannot be computed")
    parser.add_argument("--log-file", type=Path)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    init_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        settings = load_settings(args.settings)
        conn = connect(args.database)
    except (FileNotFoundError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    try:
        circuits = read_circuits(conn, UNIT_SYSTEMS[args.units])
    except ExportTableError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    finally:
        conn.close()

    results = VoltageDropEngine(settings).run(circuits)
    print(format_report(results, args.na))

    if args.output is not None:
        write_results_workbook(results, args.output)
        print(f"Saved: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
