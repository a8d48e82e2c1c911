import logging
from datetime import date
from functools import partial
from pathlib import Path

from pydantic import BaseModel, ValidationError

from mrp_engine import data_handler, settings, utils
from mrp_engine.analysis import get_mrp_summary
from mrp_engine.assembler import export_frame
from mrp_engine.engine import run_complete_analysis
from mrp_engine.exceptions import ProjectionInputError
from mrp_engine.pipeline import DataPipeline
from mrp_engine.schemas import Component, Forecast, InventoryProjection, Product
from mrp_engine.validation import validate_mrp_inputs

logger = logging.getLogger(__name__)


class ProjectionPipeline(DataPipeline):
    def __init__(self, input_dir: Path | None = None, dry_run: bool = False):
        super().__init__("projection", dry_run=dry_run)
        self.input_dir = input_dir or settings.INPUT_DIR
        self.system_date = date.today()
        self.inputs: dict[str, list[BaseModel]] = {}

        # Snapshot sources, all required
        self.SOURCE_REGISTRY = [
            {"name": "components", "prefix": settings.SOH_FILENAME_PREFIX, "model": Component},
            {"name": "products", "prefix": settings.PRODUCTS_FILENAME_PREFIX, "model": Product},
            {"name": "forecasts", "prefix": settings.FORECASTS_FILENAME_PREFIX, "model": Forecast},
        ]

    def extract(self) -> dict[str, Path] | None:
        logger.info("--- Locating Input Snapshots ---")

        file_paths = {}
        for source in self.SOURCE_REGISTRY:
            found_file_info = utils.find_latest_report(self.input_dir, source["prefix"])
            if not found_file_info:
                logger.error(f"  > ERROR: Required '{source['name']}' snapshot missing.")
                self.status_summary[source["name"]] = None
                return None

            path, snapshot_date = found_file_info
            file_paths[source["name"]] = path
            self.status_summary[source["name"]] = snapshot_date
            logger.info(f"  > Found '{source['name']}': {path.name} ({snapshot_date})")

        return file_paths

    def _fetch(self, name: str, path: Path, model: type[BaseModel]) -> list[BaseModel]:
        records = utils.load_json(path)
        if records is None:
            raise ValueError(f"{path.name} could not be read")
        parsed = [model.model_validate(record) for record in records]
        self.inputs[name] = parsed
        return parsed

    def transform(self, file_paths: dict[str, Path]) -> list[InventoryProjection] | None:
        logger.info("\n--- Running Projection Engine ---")

        fetchers = [
            partial(self._fetch, source["name"], file_paths[source["name"]], source["model"])
            for source in self.SOURCE_REGISTRY
        ]

        try:
            projections = run_complete_analysis(*fetchers)
        except ProjectionInputError as e:
            logger.error("❌ Input snapshot could not be loaded!")
            if isinstance(e.cause, ValidationError):
                logger.error(e.cause)
            return None

        report = validate_mrp_inputs(
            self.inputs["components"], self.inputs["products"], self.inputs["forecasts"]
        )
        for error in report.errors:
            logger.error(f"  > ❌ {error}")
        for warning in report.warnings:
            logger.warning(f"  > ⚠️  {warning}")

        summary = get_mrp_summary(projections)
        logger.info(
            f"  > 📊 {summary.total_components} components: "
            f"{summary.healthy_count} healthy, {summary.risk_count} at risk, "
            f"{summary.shortage_count} in shortage"
        )
        return projections

    def save(self, projections: list[InventoryProjection]):
        if not projections:
            logger.warning("No projections to save to disk.")
            return
        data_handler.save_outputs(
            projections,
            export_frame(projections),
            date_suffix=self.system_date.strftime("%Y-%m-%d"),
        )
