import math

from . import settings
from .schemas import Component, MonthlyProjection
from .utils import round_half_up


def simulate(component: Component, demand_by_month: dict[str, float]) -> list[MonthlyProjection]:
    """
    Walks the months in ascending "YYYY-MM" order and depletes the component's
    stock by each month's demand.

    The running stock keeps full precision; only the reported figures are
    rounded to 2 decimals.
    """
    current_stock = component.stock
    projections: list[MonthlyProjection] = []

    for month in sorted(demand_by_month):
        demand = demand_by_month.get(month) or 0.0

        if demand > 0:
            coverage_percentage = min(1.0, current_stock / demand) * 100
        else:
            coverage_percentage = 100.0
        projected_soh = max(0.0, current_stock - demand)
        shortfall = max(0.0, demand - current_stock)

        daily_demand = demand / settings.DAYS_PER_MONTH
        if daily_demand > 0:
            days_of_coverage = math.floor(current_stock / daily_demand)
        else:
            days_of_coverage = settings.MAX_DAYS_OF_COVERAGE

        # Coverage < 100 and shortfall > 0 agree on the unrounded values only;
        # a shortfall under 0.005% of demand reports as 100% coverage.
        projections.append(
            MonthlyProjection(
                month=month,
                total_demand=round_half_up(demand),
                coverage_percentage=round_half_up(coverage_percentage),
                projected_soh=round_half_up(projected_soh),
                shortfall=round_half_up(shortfall),
                days_of_coverage=min(days_of_coverage, settings.MAX_DAYS_OF_COVERAGE),
            )
        )

        current_stock = projected_soh

    return projections
