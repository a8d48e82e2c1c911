from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HealthStatus(str, Enum):
    HEALTHY = "Healthy"
    RISK = "Risk"
    SHORTAGE = "Shortage"


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


# --- Input Contracts ---
# Inputs arrive as camelCase records from the inventory, product and forecast
# collaborators. Missing numeric fields default to 0; non-numeric ones fail validation.


class Component(BaseModel):
    """A stock-keeping component from the inventory (SOH) snapshot."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    part_code: str = Field(..., alias="partCode")
    part_description: Optional[str] = Field(default=None, alias="partDescription")
    stock: float = Field(default=0.0, alias="stock")
    safety_stock: Optional[float] = Field(default=None, alias="safetyStock")

    @field_validator("stock", mode="before")
    @classmethod
    def _default_missing_stock(cls, value):
        return 0.0 if value is None else value


class BomLine(BaseModel):
    """One line of a product's Bill of Materials."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    part_code: str = Field(..., alias="partCode")
    part_description: str = Field(default="", alias="partDescription")
    part_type: str = Field(default="", alias="partType")
    per_shipper: float = Field(default=0.0, alias="perShipper")

    @field_validator("per_shipper", mode="before")
    @classmethod
    def _default_missing_per_shipper(cls, value):
        return 0.0 if value is None else value

    @field_validator("part_description", "part_type", mode="before")
    @classmethod
    def _default_missing_text(cls, value):
        return "" if value is None else value


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_code: str = Field(..., alias="productCode")
    description: Optional[str] = Field(default=None, alias="description")
    components: list[BomLine] = Field(default_factory=list, alias="components")
    units_per_shipper: Optional[float] = Field(default=None, alias="unitsPerShipper")

    @field_validator("components", mode="before")
    @classmethod
    def _default_missing_components(cls, value):
        return [] if value is None else value


class Forecast(BaseModel):
    """
    Sparse monthly forecast for one product, in shippers.
    Keys are zero-padded "YYYY-MM" strings; absent months mean zero demand.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    product_code: str = Field(..., alias="productCode")
    monthly_forecast: dict[str, float] = Field(default_factory=dict, alias="monthlyForecast")

    @field_validator("monthly_forecast", mode="before")
    @classmethod
    def _default_missing_quantities(cls, value):
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {month: (0.0 if qty is None else qty) for month, qty in value.items()}


# --- Derived Contracts ---


class ComponentDemand(BaseModel):
    """Aggregated demand for one component across every product that uses it."""

    model_config = ConfigDict(frozen=True)

    demand_by_month: dict[str, float] = Field(default_factory=dict)
    skus: list[str] = Field(default_factory=list)
    part_types: list[str] = Field(default_factory=list)
    descriptions: list[str] = Field(default_factory=list)


class MonthlyProjection(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    month: str = Field(..., alias="month")
    total_demand: float = Field(..., alias="totalDemand")
    coverage_percentage: float = Field(..., alias="coveragePercentage")
    projected_soh: float = Field(..., alias="projectedSoh")
    shortfall: float = Field(..., alias="shortfall")
    days_of_coverage: int = Field(..., alias="daysOfCoverage")


class Classification(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    overall_health: HealthStatus = Field(..., alias="overallHealth")
    priority: Priority = Field(..., alias="priority")
    recommended_action: str = Field(..., alias="recommendedAction")
    net_four_month_demand: float = Field(..., alias="netFourMonthDemand")
    total_annual_demand: float = Field(..., alias="totalAnnualDemand")
    average_monthly_demand: float = Field(..., alias="averageMonthlyDemand")


class InventoryProjection(BaseModel):
    """
    The complete projection for one component: its simulated monthly curve
    plus the risk classification used for purchasing decisions.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    component: Component = Field(..., alias="component")
    skus_used_in: list[str] = Field(default_factory=list, alias="skusUsedIn")
    display_part_type: str = Field(default="N/A", alias="displayPartType")
    display_description: str = Field(default="N/A", alias="displayDescription")
    net_four_month_demand: float = Field(..., alias="netFourMonthDemand")
    projections: list[MonthlyProjection] = Field(default_factory=list, alias="projections")
    overall_health: HealthStatus = Field(..., alias="overallHealth")
    recommended_action: str = Field(..., alias="recommendedAction")
    priority: Priority = Field(..., alias="priority")
    total_annual_demand: float = Field(..., alias="totalAnnualDemand")
    average_monthly_demand: float = Field(..., alias="averageMonthlyDemand")


# --- Analysis Contracts ---


class MrpSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_components: int = Field(..., alias="totalComponents")
    healthy_count: int = Field(..., alias="healthyCount")
    risk_count: int = Field(..., alias="riskCount")
    shortage_count: int = Field(..., alias="shortageCount")
    total_demand_value: float = Field(..., alias="totalDemandValue")
    critical_components: list[InventoryProjection] = Field(
        default_factory=list, alias="criticalComponents"
    )


class PurchaseRecommendation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    part_code: str = Field(..., alias="partCode")
    description: str = Field(..., alias="description")
    current_stock: float = Field(..., alias="currentStock")
    recommended_quantity: int = Field(..., ge=0, alias="recommendedQuantity")
    priority: Priority = Field(..., alias="priority")
    reason: str = Field(..., alias="reason")
    estimated_cost: Optional[float] = Field(default=None, alias="estimatedCost")


class ValidationReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    errors: list[str] = Field(default_factory=list, alias="errors")
    warnings: list[str] = Field(default_factory=list, alias="warnings")


class MrpReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    executive_summary: str = Field(..., alias="executiveSummary")
    key_findings: list[str] = Field(default_factory=list, alias="keyFindings")
    recommendations: list[str] = Field(default_factory=list, alias="recommendations")
    critical_actions: list[str] = Field(default_factory=list, alias="criticalActions")
