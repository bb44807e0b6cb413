"""
Supply-Chain Impact Dashboard - Reference Data Verification

Checks that the supplier and base-metric tables join one-to-one, builds the
yearly projections and prints a per-component summary. Optionally exports the
projection table as an Excel workbook.

Usage:
    python verify_reference_data.py

Options:
    --export        Write Impact_Projections.xlsx
    --output DIR    Directory for the export (default: config.OUTPUT_DIR)
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "impact_dashboard"))

from config import configure_logging, get_output_path
from scenario_parameters import COMMON, METRICS
from utils.errors import DataIntegrityError
from utils.export_engine import create_projections_workbook
from utils.formatting import format_value
from utils.projection_engine import build_projections
from utils.query_layer import component_totals, suppliers_by_component
from utils.reference_data import get_base_metrics, get_suppliers

EXPORT_FILENAME = "Impact_Projections.xlsx"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Verify supply-chain reference data and projections.")
    parser.add_argument("--export", action="store_true", help=f"write {EXPORT_FILENAME}")
    parser.add_argument("--output", type=Path, default=None, help="export directory")
    return parser.parse_args(argv)


def print_component_summary(year):
    """Print supplier names and summed metrics per component for one year."""
    for component in COMMON["COMPONENTS"]:
        names = ", ".join(s.company_name for s in suppliers_by_component(component))
        print(f"  {component}: {names}")
        totals = component_totals(component, year)
        for field, meta in METRICS.items():
            print(f"      {meta['label']:<24} {format_value(totals[field], meta['unit'])}")


def export_workbook(output_dir=None):
    """Write the projection workbook and return its path."""
    if output_dir is None:
        path = get_output_path(EXPORT_FILENAME)
    else:
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / EXPORT_FILENAME
    path.write_bytes(create_projections_workbook())
    return path


def main(argv=None):
    """Run the verification; returns the process exit code."""
    args = parse_args(argv)
    configure_logging()

    print("=" * 60)
    print("  Supply-Chain Impact - Reference Data Verification")
    print("=" * 60)
    print(f"  Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print()

    suppliers = get_suppliers()
    metrics = get_base_metrics()
    try:
        rows = build_projections(suppliers, metrics)
    except DataIntegrityError as e:
        print(f"[ERROR] {e}")
        return 1

    expected = len(suppliers) * len(COMMON["YEARS"])
    print(f"[OK] {len(suppliers)} suppliers joined to {len(metrics)} base metric rows")
    print(f"[OK] {len(rows)} projected rows (expected {expected})")
    if len(rows) != expected:
        print("[ERROR] Projection row count mismatch")
        return 1

    print()
    print(f"[*] Base year {COMMON['BASE_YEAR']} summary:")
    print_component_summary(COMMON["BASE_YEAR"])

    if args.export:
        print()
        path = export_workbook(args.output)
        print(f"[OK] Exported {path}")

    print()
    print(f"  Completed: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
