import re

from .schemas import Component, Forecast, Product, ValidationReport

MONTH_KEY_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_mrp_inputs(
    components: list[Component],
    products: list[Product],
    forecasts: list[Forecast],
) -> ValidationReport:
    """
    Checks the three inputs for completeness before a projection run.
    Errors make the run meaningless; warnings flag data that will be silently
    skipped or may distort the result. The engine does not call this itself.
    """
    errors: list[str] = []
    warnings: list[str] = []

    # Components
    if not components:
        errors.append("No components (SOH data) provided")
    else:
        invalid_components = [c for c in components if not c.part_code]
        if invalid_components:
            errors.append(f"{len(invalid_components)} components have invalid data")

        over_committed = [c for c in components if c.stock < 0]
        if over_committed:
            warnings.append(f"{len(over_committed)} components have negative stock")

    # Products
    if not products:
        errors.append("No products provided")
    else:
        missing_units = [
            p for p in products if not p.units_per_shipper or p.units_per_shipper <= 0
        ]
        if missing_units:
            warnings.append(f"{len(missing_units)} products missing unitsPerShipper data")

        without_bom = [p for p in products if not p.components]
        if without_bom:
            warnings.append(f"{len(without_bom)} products have no BOM components")

    # Forecasts
    if not forecasts:
        errors.append("No forecasts provided")
    else:
        empty_forecasts = [f for f in forecasts if not f.monthly_forecast]
        if empty_forecasts:
            warnings.append(f"{len(empty_forecasts)} forecasts have no monthly data")

        bad_keys = [
            f
            for f in forecasts
            if any(not MONTH_KEY_PATTERN.match(month) for month in f.monthly_forecast)
        ]
        if bad_keys:
            warnings.append(f"{len(bad_keys)} forecasts have months not in YYYY-MM format")

    # Cross-validation
    if products and forecasts:
        forecast_codes = {f.product_code for f in forecasts}
        without_forecast = [p for p in products if p.product_code not in forecast_codes]
        if without_forecast:
            warnings.append(f"{len(without_forecast)} products have no forecast data")

    return ValidationReport(is_valid=not errors, errors=errors, warnings=warnings)
