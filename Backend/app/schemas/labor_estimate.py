from pydantic import BaseModel, Field, ValidationError
from typing import Any, Optional, Union

from app.core.exceptions import EstimateValidationError


REQUIRED_FIELDS = ("year", "make", "model", "job_code", "shop_rate")


# ============================================================================
# Labor Estimate Request
# ============================================================================

class EstimateRequest(BaseModel):
    """Vehicle + job + shop rate to price"""
    year: Union[int, str] = Field(..., description="Vehicle year")
    make: str = Field(..., description="Vehicle make")
    model: str = Field(..., description="Vehicle model")
    job_code: str = Field(..., description="Repair job code")
    job_name: Optional[str] = Field(None, description="Job display name")
    shop_rate: Union[int, float] = Field(..., description="Shop labor rate per hour")

    class Config:
        json_schema_extra = {
            "example": {
                "year": 2018,
                "make": "Honda",
                "model": "Civic",
                "job_code": "brake-pad-replace",
                "job_name": "Front Brake Pads",
                "shop_rate": 120
            }
        }

    @classmethod
    def from_payload(cls, payload: Any) -> "EstimateRequest":
        """
        Validate a raw JSON body.

        Raises:
            EstimateValidationError: If a required field is missing or empty,
                or a present field has the wrong type
        """
        if not isinstance(payload, dict):
            payload = {}

        # Falsy values (None, "", 0) count as missing
        missing = [name for name in REQUIRED_FIELDS if not payload.get(name)]
        if missing:
            raise EstimateValidationError(
                f"Missing required fields: {', '.join(missing)}",
                fields=missing
            )

        try:
            return cls(
                year=payload["year"],
                make=payload["make"],
                model=payload["model"],
                job_code=payload["job_code"],
                job_name=payload.get("job_name") or None,
                shop_rate=payload["shop_rate"],
            )
        except ValidationError as e:
            invalid = []
            for error in e.errors():
                name = str(error["loc"][0]) if error.get("loc") else "body"
                if name not in invalid:
                    invalid.append(name)
            raise EstimateValidationError(
                f"Invalid request fields: {', '.join(invalid)}",
                fields=invalid
            )


# ============================================================================
# Labor Estimate Results
# ============================================================================

class _EstimateResultBase(BaseModel):
    status: str = "success"
    job_code: str
    job_name: str
    year: Union[int, str]
    make: str
    model: str
    shop_rate: Union[int, float]


class LaborEstimateResult(_EstimateResultBase):
    """
    Estimate from the live adapter (or its mock fallback).
    Money and hour figures are fixed two-decimal strings.
    """
    labor_hours_min: str
    labor_hours_max: str
    labor_hours_recommended: str
    suggested_labor_price: str
    parts_cost_estimate: str
    total_estimate: str
    data_source: str = Field(..., description="VehicleDatabases or mock_fallback")
    note: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "status": "success",
                "job_code": "brake-pad-replace",
                "job_name": "Front Brake Pads",
                "year": 2018,
                "make": "Honda",
                "model": "Civic",
                "labor_hours_min": "1.20",
                "labor_hours_max": "1.80",
                "labor_hours_recommended": "1.50",
                "shop_rate": 120,
                "suggested_labor_price": "180.00",
                "parts_cost_estimate": "180.00",
                "total_estimate": "360.00",
                "data_source": "mock_fallback",
                "note": "Using estimated data. Connect to VehicleDatabases API for accurate pricing."
            }
        }


class MockLaborEstimateResult(_EstimateResultBase):
    """Estimate from the mock-only adapter, with raw numeric figures"""
    labor_hours_min: float
    labor_hours_max: float
    labor_hours_recommended: float
    suggested_labor_price: float
    parts_cost_estimate: float
    total_estimate: float
