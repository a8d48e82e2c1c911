import json
import logging
from pathlib import Path

import pandas as pd

from . import settings
from . import utils
from .schemas import InventoryProjection

logger = logging.getLogger(__name__)


def save_outputs(
    projections: list[InventoryProjection],
    export_df: pd.DataFrame,
    date_suffix: str | None = None,
) -> dict[str, Path]:
    """
    Saves the export table to CSV and conditionally the full projections to
    JSON, with dated filenames. Returns the paths that were written.
    """
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = date_suffix or utils.get_date_suffix_for_filename()
    written: dict[str, Path] = {}

    csv_path = settings.OUTPUT_DIR / f"{settings.EXPORT_FILENAME_BASE}_{date_suffix}.csv"
    export_df.to_csv(csv_path, index=False)
    logger.info(f"✅ Projection export saved to: {csv_path}")
    written["csv"] = csv_path

    if settings.SAVE_JSON_OUTPUT:
        json_path = settings.OUTPUT_DIR / f"{settings.REPORT_FILENAME_BASE}_{date_suffix}.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json_data = [p.model_dump(mode="json", by_alias=True) for p in projections]
            json.dump(json_data, f, indent=2)
        logger.info(f"✅ JSON output saved to: {json_path}")
        written["json"] = json_path
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return written
