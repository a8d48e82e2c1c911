"""Read-only views over computed projections: summaries, filters and purchase advice."""

import math

from . import settings
from .schemas import (
    HealthStatus,
    InventoryProjection,
    MrpReport,
    MrpSummary,
    Priority,
    PurchaseRecommendation,
)
from .utils import round_half_up

STANDARD_RECOMMENDATIONS = [
    "Implement automated reorder points for critical components",
    "Review safety stock levels for high-demand components",
    "Establish supplier agreements for faster lead times",
    "Consider alternative suppliers for shortage-prone components",
]


def get_mrp_summary(projections: list[InventoryProjection]) -> MrpSummary:
    """Counts per health status plus the most urgent High-priority components."""
    healthy_count = sum(1 for p in projections if p.overall_health == HealthStatus.HEALTHY)
    risk_count = sum(1 for p in projections if p.overall_health == HealthStatus.RISK)
    shortage_count = sum(1 for p in projections if p.overall_health == HealthStatus.SHORTAGE)

    total_demand_value = sum(p.total_annual_demand for p in projections)

    critical_components = sorted(
        (p for p in projections if p.priority == Priority.HIGH),
        key=lambda p: p.net_four_month_demand,
        reverse=True,
    )[: settings.CRITICAL_COMPONENTS_LIMIT]

    return MrpSummary(
        total_components=len(projections),
        healthy_count=healthy_count,
        risk_count=risk_count,
        shortage_count=shortage_count,
        total_demand_value=round_half_up(total_demand_value),
        critical_components=critical_components,
    )


def filter_by_health(
    projections: list[InventoryProjection], health: HealthStatus | str
) -> list[InventoryProjection]:
    return [p for p in projections if p.overall_health == HealthStatus(health)]


def filter_by_priority(
    projections: list[InventoryProjection], priority: Priority | str
) -> list[InventoryProjection]:
    return [p for p in projections if p.priority == Priority(priority)]


def search_projections(
    projections: list[InventoryProjection], search_term: str | None
) -> list[InventoryProjection]:
    """
    Case-insensitive search over part code, description and the SKUs that use
    the part. Terms shorter than MIN_SEARCH_TERM_LENGTH return everything.
    """
    if not search_term or len(search_term.strip()) < settings.MIN_SEARCH_TERM_LENGTH:
        return projections

    term = search_term.lower()
    return [
        p
        for p in projections
        if term in p.component.part_code.lower()
        or term in p.display_description.lower()
        or any(term in sku.lower() for sku in p.skus_used_in)
    ]


def generate_purchase_recommendations(
    projections: list[InventoryProjection],
) -> list[PurchaseRecommendation]:
    """One recommendation per component with net demand, highest priority first."""
    recommendations = [
        PurchaseRecommendation(
            part_code=p.component.part_code,
            description=p.display_description,
            current_stock=p.component.stock,
            recommended_quantity=math.ceil(p.net_four_month_demand),
            priority=p.priority,
            reason=p.recommended_action,
        )
        for p in projections
        if p.net_four_month_demand > 0
    ]
    return sorted(
        recommendations,
        key=lambda r: settings.PRIORITY_ORDER[r.priority.value],
        reverse=True,
    )


def _percentage_of(count: int, total: int) -> int:
    if total == 0:
        return 0
    return int(round_half_up(count / total * 100, 0))


def generate_mrp_report(projections: list[InventoryProjection]) -> MrpReport:
    summary = get_mrp_summary(projections)

    executive_summary = (
        f"MRP Analysis completed for {summary.total_components} components. "
        f"{summary.shortage_count} components are in shortage, {summary.risk_count} are at risk, "
        f"and {summary.healthy_count} are healthy. "
        f"Total annual demand value: ${summary.total_demand_value:,}."
    )

    key_findings = [
        f"{_percentage_of(summary.shortage_count, summary.total_components)}% of components are in shortage",
        f"{_percentage_of(summary.risk_count, summary.total_components)}% of components are at risk",
        f"{len(summary.critical_components)} components require immediate attention",
        "Average demand coverage varies significantly across component types",
    ]

    critical_actions = [
        f"Order {math.ceil(c.net_four_month_demand)} units of {c.component.part_code} immediately"
        for c in summary.critical_components[: settings.CRITICAL_ACTIONS_LIMIT]
    ]

    return MrpReport(
        executive_summary=executive_summary,
        key_findings=key_findings,
        recommendations=list(STANDARD_RECOMMENDATIONS),
        critical_actions=critical_actions,
    )
