import json
import logging
import math
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any

from . import settings

logger = logging.getLogger(__name__)

_SNAPSHOT_DATE_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})\.json$")


def round_half_up(value: float, places: int = 2) -> float:
    """Rounds halves towards positive infinity (not banker's rounding like round())."""
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def find_latest_report(directory: Path, prefix: str) -> tuple[Path, date] | None:
    """
    Finds the newest '<prefix>YYYY-MM-DD.json' snapshot in a directory.
    Returns the path and its snapshot date, or None when nothing matches.
    """
    if not directory.exists():
        return None

    candidates = []
    for path in directory.glob(f"{prefix}*.json"):
        match = _SNAPSHOT_DATE_PATTERN.search(path.name)
        if not match:
            continue
        try:
            snapshot_date = datetime.strptime(match.group(1), "%Y-%m-%d").date()
        except ValueError:
            logger.warning(f"  > Ignoring {path.name}: unreadable date in filename.")
            continue
        candidates.append((snapshot_date, path))

    if not candidates:
        return None

    snapshot_date, path = max(candidates)
    return path, snapshot_date


def load_json(file_path: Path) -> list[dict[str, Any]] | None:
    """
    Loads a JSON snapshot that holds a list of records.
    Returns None when the file is missing or unreadable; the caller decides
    whether that aborts the run.
    """
    try:
        with open(file_path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.info(f"INFO: Snapshot not found at {file_path}, skipping.")
        return None
    except json.JSONDecodeError as e:
        logger.error(f"ERROR: Could not parse {file_path.name}. Reason: {e}")
        return None

    if not isinstance(data, list):
        logger.error(f"ERROR: {file_path.name} must contain a list of records.")
        return None
    return data


# --- Planning Formulas ---


def calculate_days_of_coverage(current_stock: float, monthly_demand: float) -> int:
    """Days the stock lasts at the given monthly rate, using a flat 30-day month."""
    if monthly_demand <= 0:
        return settings.NO_DEMAND_COVERAGE_DAYS
    daily_demand = monthly_demand / settings.DAYS_PER_MONTH
    return math.floor(current_stock / daily_demand)


def calculate_reorder_point(
    average_demand: float, lead_time_days: int = 30, safety_stock: float = 0
) -> int:
    daily_demand = average_demand / settings.DAYS_PER_MONTH
    return math.ceil(daily_demand * lead_time_days + safety_stock)


def calculate_economic_order_quantity(
    annual_demand: float, ordering_cost: float = 50, holding_cost_per_unit: float = 1
) -> int:
    """Classic Wilson EOQ: sqrt(2DS / H). Returns 0 for non-positive demand or holding cost."""
    if holding_cost_per_unit <= 0 or annual_demand <= 0:
        return 0
    return math.ceil(math.sqrt((2 * annual_demand * ordering_cost) / holding_cost_per_unit))


# --- Display Helpers ---


def format_coverage(percentage: float) -> str:
    if percentage >= 100:
        return "100%"
    if percentage <= 0:
        return "0%"
    return f"{round_half_up(percentage, 0):.0f}%"


def format_demand(demand: float) -> str:
    """Formats demand with K/M suffixes, e.g. 1500 -> '1.5K'."""
    if demand >= 1_000_000:
        return f"{demand / 1_000_000:.1f}M"
    if demand >= 1_000:
        return f"{demand / 1_000:.1f}K"
    return f"{round_half_up(demand, 0):.0f}"
