"""
VehicleDatabases Labor Estimate Adapter

Prices a job from the VehicleDatabases repairs API (year / make / model).

The API returns repair cost ranges in dollars, not hours. Hours are derived by
dividing the Labor cost range by a fixed $100/hour basis.

Any API failure, missing job or missing Labor cost falls back to the mock
labor hours; the caller never sees the upstream error.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List, Optional

from app.adapters.labor_estimate_interface import LaborEstimateAdapterInterface
from app.adapters.labor_estimate_mock_adapter import (
    MOCK_LABOR_HOURS,
    MOCK_PARTS_COST,
    DEFAULT_JOB_NAME
)
from app.core.exceptions import ConfigurationError, VehicleDatabasesError
from app.schemas.labor_estimate import EstimateRequest, LaborEstimateResult
from app.utils.vehicle_databases_client import VehicleDatabasesClient

logger = logging.getLogger(__name__)


DATA_SOURCE_LIVE = "VehicleDatabases"
DATA_SOURCE_FALLBACK = "mock_fallback"

FALLBACK_NOTE = "Using estimated data. Connect to VehicleDatabases API for accurate pricing."

# Dollars of labor cost per hour of labor time
LABOR_COST_PER_HOUR = Decimal("100")

TWO_PLACES = Decimal("0.01")


def _money(value: Decimal) -> str:
    """Format as a fixed two-decimal string."""
    with localcontext() as ctx:
        # Quantizing needs every integer digit plus two places
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return str(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def _decimal(value) -> Decimal:
    """Convert an API number (or null) to Decimal."""
    return Decimal(str(value or 0))


def find_matching_repair(repairs: List[Dict], job_code: str) -> Optional[Dict]:
    """
    First repair whose value equals the job code, or whose title contains it
    (case-insensitive).
    """
    needle = job_code.lower()
    for repair in repairs:
        if repair.get("value") == job_code:
            return repair
        if needle in (repair.get("title") or "").lower():
            return repair
    return None


def _find_cost(costs: List[Dict], name: str) -> Optional[Dict]:
    for cost in costs:
        if cost.get("name") == name:
            return cost
    return None


def build_live_estimate(
    repair_data: Dict,
    request: EstimateRequest
) -> Optional[LaborEstimateResult]:
    """
    Build an estimate from a repairs-ymm response.

    Returns:
        Estimate, or None when the job or its Labor cost is not in the response
    """
    if repair_data.get("status") != "success" or not repair_data.get("data"):
        return None

    repairs = repair_data["data"].get("repairs") or []
    repair = find_matching_repair(repairs, request.job_code)
    if not repair or not repair.get("costs"):
        return None

    parts_cost = _find_cost(repair["costs"], "Parts")
    labor_cost = _find_cost(repair["costs"], "Labor")
    if not labor_cost:
        return None

    shop_rate = Decimal(str(request.shop_rate))

    labor_hours_min = _decimal(labor_cost.get("low")) / LABOR_COST_PER_HOUR
    labor_hours_max = _decimal(labor_cost.get("high")) / LABOR_COST_PER_HOUR
    labor_hours_recommended = (labor_hours_min + labor_hours_max) / 2

    suggested_labor_price = labor_hours_recommended * shop_rate
    if parts_cost:
        parts_estimate = (_decimal(parts_cost.get("low")) + _decimal(parts_cost.get("high"))) / 2
    else:
        parts_estimate = Decimal("0")
    total_estimate = suggested_labor_price + parts_estimate

    return LaborEstimateResult(
        job_code=request.job_code,
        job_name=repair.get("title") or request.job_name or DEFAULT_JOB_NAME,
        year=request.year,
        make=request.make,
        model=request.model,
        labor_hours_min=_money(labor_hours_min),
        labor_hours_max=_money(labor_hours_max),
        labor_hours_recommended=_money(labor_hours_recommended),
        shop_rate=request.shop_rate,
        suggested_labor_price=_money(suggested_labor_price),
        parts_cost_estimate=_money(parts_estimate),
        total_estimate=_money(total_estimate),
        data_source=DATA_SOURCE_LIVE
    )


def build_fallback_estimate(request: EstimateRequest) -> LaborEstimateResult:
    """Estimate from the mock labor hours, tagged as a fallback."""
    shop_rate = Decimal(str(request.shop_rate))
    recommended = Decimal(str(MOCK_LABOR_HOURS["recommended"]))
    parts_cost = Decimal(str(MOCK_PARTS_COST))

    suggested_labor_price = recommended * shop_rate
    total_estimate = suggested_labor_price + parts_cost

    return LaborEstimateResult(
        job_code=request.job_code,
        job_name=request.job_name or DEFAULT_JOB_NAME,
        year=request.year,
        make=request.make,
        model=request.model,
        labor_hours_min=_money(Decimal(str(MOCK_LABOR_HOURS["min"]))),
        labor_hours_max=_money(Decimal(str(MOCK_LABOR_HOURS["max"]))),
        labor_hours_recommended=_money(recommended),
        shop_rate=request.shop_rate,
        suggested_labor_price=_money(suggested_labor_price),
        parts_cost_estimate=_money(parts_cost),
        total_estimate=_money(total_estimate),
        data_source=DATA_SOURCE_FALLBACK,
        note=FALLBACK_NOTE
    )


class VehicleDatabasesAdapter(LaborEstimateAdapterInterface):
    """
    Labor estimate adapter backed by the VehicleDatabases repairs API.
    Falls back to mock labor hours when live pricing is unavailable.
    """

    def __init__(self, client: Optional[VehicleDatabasesClient] = None):
        self.client = client or VehicleDatabasesClient()

    async def estimate(self, request: EstimateRequest) -> LaborEstimateResult:
        if not self.client.api_key:
            raise ConfigurationError("API key not configured")

        try:
            repair_data = await self.client.get_repairs(
                request.year,
                request.make,
                request.model
            )
        except VehicleDatabasesError as e:
            logger.error(f"VehicleDatabases API error: {e.error}")
            return build_fallback_estimate(request)

        try:
            result = build_live_estimate(repair_data, request)
        except (AttributeError, KeyError, TypeError, ArithmeticError, ValueError) as e:
            logger.warning(f"Unexpected VehicleDatabases response shape: {e}")
            result = None

        if result is None:
            logger.info(
                f"No live labor data for '{request.job_code}' on "
                f"{request.year} {request.make} {request.model}, using mock data"
            )
            return build_fallback_estimate(request)

        return result
