"""
API v1 Router

Aggregates all v1 API routes.
"""
from fastapi import APIRouter
from app.api.v1 import jobs, labor_estimate

API_V1_PREFIX = "/api/v1"
JOBS_PREFIX = "/connect-specs"

# Create main v1 router
api_router = APIRouter()

# Include sub-routers
api_router.include_router(
    jobs.router,
    prefix=JOBS_PREFIX,
    tags=["Connect Specs - Job Catalog"]
)

api_router.include_router(
    labor_estimate.router,
    prefix="/labor-estimate",
    tags=["Labor Estimate"]
)
