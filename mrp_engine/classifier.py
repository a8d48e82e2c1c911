import math

from . import settings
from .schemas import Classification, Component, HealthStatus, MonthlyProjection, Priority
from .utils import round_half_up


def classify(
    component: Component,
    demand_by_month: dict[str, float],
    projections: list[MonthlyProjection] | None = None,
) -> Classification:
    """
    Labels a component's supply risk from its current stock and forecast demand.

    The near-term window is the first FORECAST_WINDOW_MONTHS months that have
    recorded demand (not calendar months from today); sparse forecasts sum
    whatever months exist. Rules, first match wins:

    1. stock >= window demand         -> Healthy / Low
    2. stock > average monthly demand -> Risk / Medium
    3. otherwise                      -> Shortage / High

    `projections` is accepted for callers that already simulated the curve;
    the decision tree itself only looks at stock and demand.
    """
    stock = component.stock
    sorted_months = sorted(demand_by_month)

    four_month_demand = sum(
        demand_by_month.get(month) or 0.0
        for month in sorted_months[: settings.FORECAST_WINDOW_MONTHS]
    )
    total_annual_demand = sum(demand_by_month.values())
    average_monthly_demand = (
        total_annual_demand / len(sorted_months) if sorted_months else 0.0
    )
    net_four_month_demand = max(0.0, four_month_demand - stock)

    if stock >= four_month_demand:
        overall_health = HealthStatus.HEALTHY
        priority = Priority.LOW
        recommended_action = "Monitor stock levels"
    elif stock > average_monthly_demand:
        overall_health = HealthStatus.RISK
        priority = Priority.MEDIUM
        recommended_action = f"Order {math.ceil(net_four_month_demand)} units"
    else:
        overall_health = HealthStatus.SHORTAGE
        priority = Priority.HIGH
        recommended_action = (
            f"URGENT: Order {math.ceil(net_four_month_demand)} units immediately"
        )

    return Classification(
        overall_health=overall_health,
        priority=priority,
        recommended_action=recommended_action,
        net_four_month_demand=round_half_up(net_four_month_demand),
        total_annual_demand=round_half_up(total_annual_demand),
        average_monthly_demand=round_half_up(average_monthly_demand),
    )
