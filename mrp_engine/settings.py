import os
from pathlib import Path
from dotenv import load_dotenv

# --- Base Directory ---
BASE_DIR = Path(__file__).resolve().parent.parent

# --- Load Environment Variables ---
load_dotenv(BASE_DIR / ".env")

# --- Path Configuration ---
INPUT_DIR = BASE_DIR / os.getenv("INPUT_DIR", "input")
OUTPUT_DIR = BASE_DIR / os.getenv("OUTPUT_DIR", "output")
LOG_DIR = BASE_DIR / os.getenv("LOG_DIR", "logs")

# --- Snapshot Filename Configuration ---
# Snapshots are dated JSON dumps, e.g. "soh_2025-01-31.json".
SOH_FILENAME_PREFIX = os.getenv("SOH_FILENAME_PREFIX", "soh_")
PRODUCTS_FILENAME_PREFIX = os.getenv("PRODUCTS_FILENAME_PREFIX", "products_")
FORECASTS_FILENAME_PREFIX = os.getenv("FORECASTS_FILENAME_PREFIX", "forecasts_")
REPORT_FILENAME_BASE = os.getenv("REPORT_FILENAME", "projection_report")
EXPORT_FILENAME_BASE = os.getenv("EXPORT_FILENAME", "projection_export")

# --- Output Toggles ---
SAVE_JSON_OUTPUT = os.getenv("SAVE_JSON_OUTPUT", "true").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Shared Business Logic ---
# Externally supplied parts are not tracked in component demand.
BULK_SUPPLIED_PART_TYPE = "Bulk - Supplied"

# Number of forecast-bearing months used for the net demand window.
FORECAST_WINDOW_MONTHS = 4

# Days of coverage use a flat 30-day month for every month.
DAYS_PER_MONTH = 30
MAX_DAYS_OF_COVERAGE = 30

# Sentinel returned by the standalone coverage helper when there is no demand.
NO_DEMAND_COVERAGE_DAYS = 999

CRITICAL_COMPONENTS_LIMIT = 10
CRITICAL_ACTIONS_LIMIT = 5

# Minimum length of a search term before filtering kicks in.
MIN_SEARCH_TERM_LENGTH = 2

# Sort order for purchase recommendations (highest first).
PRIORITY_ORDER = {
    "High": 3,
    "Medium": 2,
    "Low": 1,
}
