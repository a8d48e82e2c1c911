import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class DataPipeline(ABC):
    """
    Abstract base class for report pipelines.
    Follows an Extract -> Transform -> Load (ETL) pattern.
    """

    def __init__(self, report_type: str, dry_run: bool = False):
        self.report_type = report_type
        self.dry_run = dry_run
        # Status summary tracks the snapshot date used for each input source
        self.status_summary: dict[str, Any] = {}

    def run(self) -> list[Any] | None:
        """
        Orchestrates the pipeline execution. Returns the transformed records,
        or None when the run was aborted.
        """
        logger.info(f"🚀 STEP: {self.report_type.upper()} REPORT")
        logger.info("-" * 30)

        # --- 1. EXTRACT ---
        raw_data = self.extract()
        if raw_data is None:
            logger.warning(f"⚠️ No data extracted for {self.report_type}. Aborting.")
            return None

        # --- 2. TRANSFORM ---
        records = self.transform(raw_data)
        if records is None:
            logger.error(f"❌ Transformation failed for {self.report_type}.")
            return None

        # --- 3. LOAD ---
        self.load(records)

        logger.info(f"✅ {self.report_type.capitalize()} Pipeline Finished.\n")
        logger.info("=" * 60)
        return records

    @abstractmethod
    def extract(self) -> Any | None:
        """
        Responsible for finding and reading inputs.
        Should also populate self.status_summary as it processes sources.
        """
        pass

    @abstractmethod
    def transform(self, raw_data: Any) -> list[Any] | None:
        """
        Responsible for validation and computation.
        Returns a list of Pydantic models, or None on failure.
        """
        pass

    def load(self, records: list[Any]):
        """Logs the source summary and writes outputs."""
        if self.status_summary:
            logger.info("\n--- Source Snapshot Summary ---")
            for source, date_val in self.status_summary.items():
                logger.info(f"{source}: {date_val.isoformat() if date_val else 'No data'}")

        if self.dry_run:
            logger.info("🧪 Dry Run: Skipping output files.")
            return

        self.save(records)

    @abstractmethod
    def save(self, records: list[Any]):
        pass
