"""
Labor Estimate Service - Factory Pattern

Selects the labor estimate adapter based on configuration.
Allows easy switching between the live VehicleDatabases and mock-only
implementations.
"""
from app.adapters.labor_estimate_interface import LaborEstimateAdapterInterface
from app.adapters.labor_estimate_mock_adapter import LaborEstimateMockAdapter
from app.core.config import settings


def get_labor_estimate_adapter() -> LaborEstimateAdapterInterface:
    """
    Factory function to get the appropriate labor estimate adapter.
    Used as a FastAPI dependency, so settings are read per request.

    Returns:
        Labor estimate adapter instance based on configuration
    """
    adapter_type = settings.LABOR_ESTIMATE_ADAPTER_TYPE

    if adapter_type == "mock":
        return LaborEstimateMockAdapter()
    elif adapter_type == "live":
        from app.adapters.vehicle_databases_adapter import VehicleDatabasesAdapter
        return VehicleDatabasesAdapter()
    else:
        raise ValueError(f"Unknown labor estimate adapter type: {adapter_type}")
