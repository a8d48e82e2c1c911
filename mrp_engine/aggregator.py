import logging
from collections import defaultdict

from . import settings
from .schemas import ComponentDemand, Forecast, Product

logger = logging.getLogger(__name__)


def aggregate(
    products: list[Product], forecasts: list[Forecast]
) -> dict[str, ComponentDemand]:
    """
    Explodes every product's forecast through its BOM into component demand.

    For each product with a forecast, each non bulk-supplied BOM line adds
    `forecasted_shippers * per_shipper` to its part's running total for every
    forecast month. Products without a forecast contribute nothing.

    Parts that are not in the inventory snapshot still get an entry here; they
    are dropped later because only snapshot components are simulated.
    """
    # First forecast wins when a product code appears more than once.
    forecast_lookup: dict[str, Forecast] = {}
    for forecast in forecasts:
        forecast_lookup.setdefault(forecast.product_code, forecast)

    demand: dict[str, dict[str, float]] = {}
    # dicts used as insertion-ordered sets
    skus: dict[str, dict[str, None]] = defaultdict(dict)
    part_types: dict[str, dict[str, None]] = defaultdict(dict)
    descriptions: dict[str, dict[str, None]] = defaultdict(dict)

    skipped_products = 0
    for product in products:
        forecast = forecast_lookup.get(product.product_code)
        if forecast is None:
            skipped_products += 1
            continue

        for bom_line in product.components:
            if bom_line.part_type == settings.BULK_SUPPLIED_PART_TYPE:
                continue

            part_demand = demand.setdefault(bom_line.part_code, {})
            skus[bom_line.part_code][product.product_code] = None
            part_types[bom_line.part_code][bom_line.part_type] = None
            descriptions[bom_line.part_code][bom_line.part_description] = None

            for month, forecasted_shippers in forecast.monthly_forecast.items():
                required_qty = forecasted_shippers * bom_line.per_shipper
                part_demand[month] = part_demand.get(month, 0.0) + required_qty

    if skipped_products:
        logger.debug(f"  > {skipped_products} product(s) have no forecast; no demand added.")

    return {
        part_code: ComponentDemand(
            demand_by_month=by_month,
            skus=list(skus[part_code]),
            part_types=list(part_types[part_code]),
            descriptions=list(descriptions[part_code]),
        )
        for part_code, by_month in demand.items()
    }
