from __future__ import annotations

import pytest

from mrp_engine.classifier import classify
from mrp_engine.schemas import HealthStatus, Priority
from tests.factories import make_component


class TestClassify:
    def test_stock_covering_window_is_healthy(self):
        component = make_component("X1", stock=100)
        demand = {"2025-01": 25, "2025-02": 25, "2025-03": 25, "2025-04": 25, "2025-05": 500}

        result = classify(component, demand)

        assert result.overall_health == HealthStatus.HEALTHY
        assert result.priority == Priority.LOW
        assert result.recommended_action == "Monitor stock levels"
        assert result.net_four_month_demand == 0
        assert result.total_annual_demand == 600
        assert result.average_monthly_demand == 120

    def test_stock_above_average_is_risk(self):
        component = make_component("X1", stock=100)

        result = classify(component, {"2025-01": 60, "2025-02": 80})

        assert result.overall_health == HealthStatus.RISK
        assert result.priority == Priority.MEDIUM
        assert result.net_four_month_demand == 40
        assert result.recommended_action == "Order 40 units"

    def test_stock_at_or_below_average_is_shortage(self):
        component = make_component("X1", stock=50)

        result = classify(component, {"2025-01": 50, "2025-02": 50})

        assert result.overall_health == HealthStatus.SHORTAGE
        assert result.priority == Priority.HIGH
        assert result.recommended_action == "URGENT: Order 50 units immediately"

    def test_zero_stock_with_demand_is_shortage(self):
        component = make_component("X1", stock=0)

        result = classify(component, {"2025-01": 10, "2025-02": 0, "2025-03": 0})

        assert result.overall_health == HealthStatus.SHORTAGE
        assert result.priority == Priority.HIGH

    def test_window_uses_first_four_recorded_months_not_calendar(self):
        """Gaps in the forecast are skipped: the window spans whatever months exist."""
        component = make_component("X1", stock=0)
        demand = {
            "2025-01": 1,
            "2025-06": 2,
            "2025-09": 3,
            "2026-02": 4,
            "2026-03": 100,
        }

        result = classify(component, demand)

        assert result.net_four_month_demand == 10

    def test_fewer_than_four_months_sums_what_exists(self):
        component = make_component("X1", stock=5)

        result = classify(component, {"2025-03": 7, "2025-01": 3})

        assert result.net_four_month_demand == 5
        assert result.average_monthly_demand == 5

    def test_no_demand_is_healthy(self):
        component = make_component("X1", stock=0)

        result = classify(component, {})

        assert result.overall_health == HealthStatus.HEALTHY
        assert result.net_four_month_demand == 0
        assert result.total_annual_demand == 0
        assert result.average_monthly_demand == 0

    def test_order_quantity_rounds_up(self):
        component = make_component("X1", stock=10)

        result = classify(component, {"2025-01": 5.2, "2025-02": 5.2, "2025-03": 5.2})

        assert result.net_four_month_demand == pytest.approx(5.6)
        assert result.recommended_action == "Order 6 units"

    def test_average_divides_by_months_with_entries(self):
        component = make_component("X1", stock=1000)

        result = classify(component, {"2025-01": 10, "2025-02": 0, "2025-07": 20})

        assert result.average_monthly_demand == 10
