"""
Connect Specs Jobs API Routes

Endpoints for the standard job catalog:
- GET /jobs - Active jobs, merged with a shop's overrides
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from app.repositories.job_repository import JobRepository, get_job_repository
from app.schemas.job import JobsResponse
from app.services.job_catalog_service import JobCatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/jobs",
    response_model=JobsResponse,
    summary="List catalog jobs",
    description="Active standard jobs ordered by category. With shopId, hidden jobs are removed and the shop's hour / rate type overrides are applied."
)
async def list_jobs(
    shopId: Optional[str] = Query(None, description="Shop whose overrides to apply"),
    repository: JobRepository = Depends(get_job_repository)
):
    """
    List catalog jobs for a shop.

    **Returns:**
    - `jobs`: id, category, name, is_active, base_hours, rate_type
    """
    try:
        jobs = await JobCatalogService(repository).get_jobs(shopId)
    except Exception:
        logger.exception("Error fetching jobs")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"}
        )

    return JobsResponse(jobs=jobs)
