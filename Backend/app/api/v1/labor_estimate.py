"""
Labor Estimate API Routes

Endpoints for labor / parts pricing:
- POST / - Estimate a job for a vehicle at the shop's rate
"""
import logging
from typing import Union
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.adapters.labor_estimate_interface import LaborEstimateAdapterInterface
from app.core.exceptions import ConfigurationError, EstimateValidationError
from app.schemas.labor_estimate import (
    EstimateRequest,
    LaborEstimateResult,
    MockLaborEstimateResult
)
from app.services.labor_estimate_service import get_labor_estimate_adapter

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message}
    )


@router.post(
    "",
    response_model=Union[LaborEstimateResult, MockLaborEstimateResult],
    summary="Estimate labor and parts",
    description="Price a repair job for a vehicle. Uses VehicleDatabases repair costs when available, otherwise mock labor hours."
)
async def create_labor_estimate(
    request: Request,
    estimator: LaborEstimateAdapterInterface = Depends(get_labor_estimate_adapter)
):
    """
    Estimate labor hours, labor price and parts cost.

    **Body:** year, make, model, job_code, job_name (optional), shop_rate

    **Returns:**
    - Labor hours (min / max / recommended)
    - Suggested labor price = recommended hours x shop rate
    - Parts cost estimate and total
    - Data source (VehicleDatabases / mock_fallback)
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        estimate_request = EstimateRequest.from_payload(payload)
        result = await estimator.estimate(estimate_request)
    except EstimateValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, e.message)
    except ConfigurationError as e:
        logger.error(f"Labor estimate misconfigured: {e.message}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, e.message)
    except Exception:
        logger.exception("Error computing labor estimate")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # Live figures are strings, mock-only figures are numbers
    return JSONResponse(content=result.model_dump(mode="json", exclude_none=True))
