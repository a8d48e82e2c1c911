from __future__ import annotations

import pytest

from mrp_engine.aggregator import aggregate
from tests.factories import make_bom_line, make_forecast, make_product


class TestAggregate:
    def test_demand_is_shippers_times_per_shipper(self):
        product = make_product("P1", make_bom_line("X1", per_shipper=2))
        forecast = make_forecast("P1", {"2025-01": 30, "2025-02": 40})

        result = aggregate([product], [forecast])

        assert set(result) == {"X1"}
        assert result["X1"].demand_by_month == {"2025-01": 60, "2025-02": 80}
        assert result["X1"].skus == ["P1"]

    def test_shared_component_accumulates_across_products(self):
        p1 = make_product("P1", make_bom_line("X1", per_shipper=2))
        p2 = make_product("P2", make_bom_line("X1", per_shipper=0.5))
        forecasts = [
            make_forecast("P1", {"2025-01": 10}),
            make_forecast("P2", {"2025-01": 4, "2025-03": 8}),
        ]

        result = aggregate([p1, p2], forecasts)

        assert result["X1"].demand_by_month["2025-01"] == pytest.approx(22)
        assert result["X1"].demand_by_month["2025-03"] == pytest.approx(4)
        assert "2025-02" not in result["X1"].demand_by_month
        assert result["X1"].skus == ["P1", "P2"]

    def test_product_without_forecast_contributes_nothing(self):
        p1 = make_product("P1", make_bom_line("X1", per_shipper=1))
        p2 = make_product("P2", make_bom_line("X1", per_shipper=1), make_bom_line("Z9"))

        result = aggregate([p1, p2], [make_forecast("P1", {"2025-01": 5})])

        assert result["X1"].demand_by_month == {"2025-01": 5}
        assert result["X1"].skus == ["P1"]
        assert "Z9" not in result

    def test_bulk_supplied_lines_are_excluded(self):
        product = make_product(
            "P1", make_bom_line("Y1", per_shipper=3, part_type="Bulk - Supplied")
        )

        result = aggregate([product], [make_forecast("P1", {"2025-01": 1000})])

        assert result == {}

    def test_bulk_line_excluded_even_when_part_used_elsewhere(self):
        bulk = make_product("P1", make_bom_line("Y1", per_shipper=3, part_type="Bulk - Supplied"))
        regular = make_product("P2", make_bom_line("Y1", per_shipper=1, part_type="Label"))
        forecasts = [
            make_forecast("P1", {"2025-01": 1000}),
            make_forecast("P2", {"2025-01": 5}),
        ]

        result = aggregate([bulk, regular], forecasts)

        assert result["Y1"].demand_by_month == {"2025-01": 5}
        assert result["Y1"].skus == ["P2"]
        assert result["Y1"].part_types == ["Label"]

    def test_first_matching_forecast_wins(self):
        product = make_product("P1", make_bom_line("X1", per_shipper=1))
        forecasts = [
            make_forecast("P1", {"2025-01": 5}),
            make_forecast("P1", {"2025-01": 500}),
        ]

        result = aggregate([product], forecasts)

        assert result["X1"].demand_by_month == {"2025-01": 5}

    def test_descriptions_and_part_types_keep_first_seen_order(self):
        p1 = make_product(
            "P1", make_bom_line("X1", part_type="Carton", part_description="Outer carton")
        )
        p2 = make_product(
            "P2", make_bom_line("X1", part_type="Box", part_description="Shipper box")
        )
        p3 = make_product(
            "P3", make_bom_line("X1", part_type="Carton", part_description="Outer carton")
        )
        forecasts = [make_forecast(code, {"2025-01": 1}) for code in ("P1", "P2", "P3")]

        result = aggregate([p1, p2, p3], forecasts)

        assert result["X1"].part_types == ["Carton", "Box"]
        assert result["X1"].descriptions == ["Outer carton", "Shipper box"]
        assert result["X1"].skus == ["P1", "P2", "P3"]

    def test_forecast_without_months_registers_component_with_no_demand(self):
        product = make_product("P1", make_bom_line("X1"))

        result = aggregate([product], [make_forecast("P1", {})])

        assert result["X1"].demand_by_month == {}
        assert result["X1"].skus == ["P1"]

    def test_raw_camel_case_inputs_are_accepted_by_models(self):
        from mrp_engine.schemas import Forecast, Product

        product = Product.model_validate(
            {
                "productCode": "P1",
                "components": [
                    {"partCode": "X1", "partDescription": "Lid", "partType": "Cap", "perShipper": 4}
                ],
            }
        )
        forecast = Forecast.model_validate(
            {"productCode": "P1", "monthlyForecast": {"2025-06": 2}}
        )

        result = aggregate([product], [forecast])

        assert result["X1"].demand_by_month == {"2025-06": 8}
