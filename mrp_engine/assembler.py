import pandas as pd

from .schemas import (
    Classification,
    Component,
    ComponentDemand,
    InventoryProjection,
    MonthlyProjection,
)

NOT_AVAILABLE = "N/A"

# Summary columns lead every export row; month columns follow.
EXPORT_SUMMARY_COLUMNS = [
    "Part Code",
    "Description",
    "Part Type",
    "Current Stock",
    "Safety Stock",
    "SKUs Used In",
    "Health Status",
    "Priority",
    "Net 4-Month Demand",
    "Total Annual Demand",
    "Average Monthly Demand",
    "Recommended Action",
]


def assemble(
    component: Component,
    aggregate_entry: ComponentDemand,
    classification: Classification,
    monthly_projections: list[MonthlyProjection],
) -> InventoryProjection:
    """Merges the aggregate, simulation and classification for one component."""
    return InventoryProjection(
        component=component,
        skus_used_in=list(aggregate_entry.skus),
        display_part_type=(
            aggregate_entry.part_types[0] if aggregate_entry.part_types else NOT_AVAILABLE
        ),
        display_description=(
            aggregate_entry.descriptions[0] if aggregate_entry.descriptions else NOT_AVAILABLE
        ),
        net_four_month_demand=classification.net_four_month_demand,
        projections=list(monthly_projections),
        overall_health=classification.overall_health,
        recommended_action=classification.recommended_action,
        priority=classification.priority,
        total_annual_demand=classification.total_annual_demand,
        average_monthly_demand=classification.average_monthly_demand,
    )


def export_rows(projections: list[InventoryProjection]) -> list[dict]:
    """
    Flattens projections into one row per component for tabular export.

    Month columns are numbered by position in the component's own sorted
    months ("Month 1 Demand", ...) and are not padded to a fixed horizon.
    """
    rows = []
    for p in projections:
        row = {
            "Part Code": p.component.part_code,
            "Description": p.display_description,
            "Part Type": p.display_part_type,
            "Current Stock": p.component.stock,
            "Safety Stock": p.component.safety_stock or 0,
            "SKUs Used In": ", ".join(p.skus_used_in),
            "Health Status": p.overall_health.value,
            "Priority": p.priority.value,
            "Net 4-Month Demand": p.net_four_month_demand,
            "Total Annual Demand": p.total_annual_demand,
            "Average Monthly Demand": p.average_monthly_demand,
            "Recommended Action": p.recommended_action,
        }
        for index, month in enumerate(p.projections, start=1):
            row[f"Month {index} Demand"] = month.total_demand
            row[f"Month {index} Coverage %"] = month.coverage_percentage
            row[f"Month {index} Projected SOH"] = month.projected_soh
        rows.append(row)
    return rows


def export_frame(projections: list[InventoryProjection]) -> pd.DataFrame:
    """
    Export rows as a DataFrame. Components with fewer months leave the
    trailing month columns empty (NaN).
    """
    rows = export_rows(projections)

    # Union of columns in first-seen order, so "Month 10" never sorts before "Month 2".
    columns = list(EXPORT_SUMMARY_COLUMNS)
    for row in rows:
        for column in row:
            if column not in columns:
                columns.append(column)

    return pd.DataFrame(rows, columns=columns)
