"""
Labor Estimate Adapter Interface

Abstract interface for labor estimate pricing.
This allows easy switching between the mock-only and live (VehicleDatabases)
implementations.
"""
from abc import ABC, abstractmethod
from typing import Union

from app.schemas.labor_estimate import (
    EstimateRequest,
    LaborEstimateResult,
    MockLaborEstimateResult
)


class LaborEstimateAdapterInterface(ABC):
    """Abstract interface for labor estimate adapters"""

    @abstractmethod
    async def estimate(
        self,
        request: EstimateRequest
    ) -> Union[LaborEstimateResult, MockLaborEstimateResult]:
        """
        Price a job for a vehicle at the shop's rate.

        Args:
            request: Validated estimate request

        Returns:
            Estimate result
        """
        pass
