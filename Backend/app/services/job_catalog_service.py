"""
Job Catalog Service

Merges the standard job catalog with a shop's overrides:
- Jobs hidden by the shop are dropped
- Override hours / rate type replace the catalog values when set
"""
import logging
from typing import Dict, List, Optional

from app.repositories.job_repository import JobRepository
from app.schemas.job import JobSchema, ShopOverrideSchema

logger = logging.getLogger(__name__)


def merge_shop_overrides(
    jobs: List[JobSchema],
    overrides: List[ShopOverrideSchema]
) -> List[JobSchema]:
    """
    Apply a shop's overrides to the catalog.

    A job is hidden if any of its overrides is hidden. Hours and rate type
    come from the first override found for the job.

    Args:
        jobs: Active catalog jobs, already ordered
        overrides: Override records for a single shop

    Returns:
        Merged jobs in the original order
    """
    hidden_job_ids = {o.job_id for o in overrides if o.is_hidden}

    first_override: Dict[str, ShopOverrideSchema] = {}
    for override in overrides:
        first_override.setdefault(override.job_id, override)

    merged = []
    for job in jobs:
        if job.id in hidden_job_ids:
            continue

        override = first_override.get(job.id)
        if override is None:
            merged.append(job)
            continue

        merged.append(job.model_copy(update={
            "base_hours": (
                override.base_hours_override
                if override.base_hours_override is not None
                else job.base_hours
            ),
            "rate_type": (
                override.rate_type_override
                if override.rate_type_override is not None
                else job.rate_type
            ),
        }))

    return merged


class JobCatalogService:
    """Service for the shop-facing job catalog"""

    def __init__(self, repository: JobRepository):
        self.repository = repository

    async def get_jobs(self, shop_id: Optional[str] = None) -> List[JobSchema]:
        """
        Get active jobs, merged with the shop's overrides when a shop is given.

        Raises:
            Exception: Whatever the data store raised; no partial result
        """
        jobs = await self.repository.list_active_jobs()

        if not shop_id:
            return jobs

        overrides = await self.repository.list_overrides(shop_id)
        logger.info(f"Merging {len(overrides)} override(s) for shop {shop_id}")

        return merge_shop_overrides(jobs, overrides)
