import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, TypeVar

from pydantic import BaseModel

from .aggregator import aggregate
from .assembler import assemble
from .classifier import classify
from .exceptions import ProjectionInputError
from .schemas import Component, Forecast, InventoryProjection, Product
from .simulator import simulate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _coerce(records: Iterable[Any], model: type[ModelT]) -> list[ModelT]:
    """Accepts model instances or raw camelCase dicts; raises ValidationError on bad numbers."""
    return [
        record if isinstance(record, model) else model.model_validate(record)
        for record in records
    ]


def calculate_inventory_projections(
    components: Iterable[Component | dict],
    products: Iterable[Product | dict],
    forecasts: Iterable[Forecast | dict],
) -> list[InventoryProjection]:
    """
    Projects stock for every snapshot component that has BOM-driven demand.

    Pure function of its three inputs: components without an aggregate entry,
    products without a forecast and bulk-supplied BOM lines are left out
    rather than raising.
    """
    components = _coerce(components, Component)
    products = _coerce(products, Product)
    forecasts = _coerce(forecasts, Forecast)

    logger.info("🔄 Starting MRP calculations...")

    demand_map = aggregate(products, forecasts)

    inventory_projections: list[InventoryProjection] = []
    for component in components:
        entry = demand_map.get(component.part_code)
        if entry is None:
            continue

        monthly = simulate(component, entry.demand_by_month)
        classification = classify(component, entry.demand_by_month, monthly)
        inventory_projections.append(assemble(component, entry, classification, monthly))

    logger.info(
        f"✅ MRP calculations completed for {len(inventory_projections)} components"
    )
    return inventory_projections


def run_complete_analysis(
    fetch_components: Callable[[], Iterable[Component | dict]],
    fetch_products: Callable[[], Iterable[Product | dict]],
    fetch_forecasts: Callable[[], Iterable[Forecast | dict]],
) -> list[InventoryProjection]:
    """
    Runs the three independent input fetches concurrently, waits for all of
    them and then computes the projections. If any fetch fails the engine
    does not run.
    """
    logger.info("🔄 Starting complete MRP analysis...")

    fetchers = {
        "components": fetch_components,
        "products": fetch_products,
        "forecasts": fetch_forecasts,
    }
    results: dict[str, list] = {}
    with ThreadPoolExecutor(max_workers=len(fetchers)) as executor:
        futures = {name: executor.submit(fetch) for name, fetch in fetchers.items()}
        for name, future in futures.items():
            try:
                results[name] = list(future.result())
            except Exception as e:
                logger.error(f"❌ Error fetching {name}: {e}")
                raise ProjectionInputError(name, e) from e

    logger.info(
        f"📊 Data fetched: {len(results['components'])} components, "
        f"{len(results['products'])} products, {len(results['forecasts'])} forecasts"
    )

    projections = calculate_inventory_projections(
        results["components"], results["products"], results["forecasts"]
    )

    logger.info("✅ Complete MRP analysis finished")
    return projections
