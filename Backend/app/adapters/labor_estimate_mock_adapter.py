"""
Mock Labor Estimate Adapter

Prices every job from the same hardcoded labor hours and parts cost.
No external call is made.
"""
from app.adapters.labor_estimate_interface import LaborEstimateAdapterInterface
from app.schemas.labor_estimate import EstimateRequest, MockLaborEstimateResult


# Hardcoded labor hours (used when no live pricing is available)
MOCK_LABOR_HOURS = {
    "min": 1.2,
    "max": 1.8,
    "recommended": 1.5,
}

MOCK_PARTS_COST = 180.0

DEFAULT_JOB_NAME = "Repair Service"


class LaborEstimateMockAdapter(LaborEstimateAdapterInterface):
    """Mock adapter for labor estimates"""

    async def estimate(self, request: EstimateRequest) -> MockLaborEstimateResult:
        suggested_labor_price = MOCK_LABOR_HOURS["recommended"] * request.shop_rate
        total_estimate = suggested_labor_price + MOCK_PARTS_COST

        return MockLaborEstimateResult(
            job_code=request.job_code,
            job_name=request.job_name or DEFAULT_JOB_NAME,
            year=request.year,
            make=request.make,
            model=request.model,
            labor_hours_min=MOCK_LABOR_HOURS["min"],
            labor_hours_max=MOCK_LABOR_HOURS["max"],
            labor_hours_recommended=MOCK_LABOR_HOURS["recommended"],
            shop_rate=request.shop_rate,
            suggested_labor_price=suggested_labor_price,
            parts_cost_estimate=MOCK_PARTS_COST,
            total_estimate=total_estimate
        )
