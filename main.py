"""
Inventory projection runner.

Reads the latest SOH, product/BOM and forecast snapshots from INPUT_DIR,
projects component stock and writes the report to OUTPUT_DIR.

Usage:
    python main.py
    python main.py --input-dir data/snapshots --dry-run
"""

import argparse
from pathlib import Path

from mrp_engine.logger import setup_logger
from mrp_engine.pipelines.projection import ProjectionPipeline


def main() -> int:
    parser = argparse.ArgumentParser(description="Inventory projection runner")
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=None,
        help="Directory holding the dated JSON snapshots (default: INPUT_DIR)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute projections without writing output files",
    )
    args = parser.parse_args()

    setup_logger()
    pipeline = ProjectionPipeline(input_dir=args.input_dir, dry_run=args.dry_run)
    return 0 if pipeline.run() is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
