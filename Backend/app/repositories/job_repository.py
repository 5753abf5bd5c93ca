from typing import List
import logging

from app.models.job import Job, ShopOverride
from app.schemas.job import JobSchema, ShopOverrideSchema

# Logger setup
logger = logging.getLogger(__name__)


class JobRepository:
    """
    Repository for catalog job reads (MongoDB/Beanie).
    Returns plain schemas so callers never touch documents.
    """

    async def list_active_jobs(self) -> List[JobSchema]:
        """Get all active jobs ordered by category."""
        try:
            jobs = await Job.find(Job.is_active == True).sort("+category").to_list()
        except Exception as e:
            logger.error(f"Failed to fetch active jobs: {e}")
            raise

        return [JobSchema.from_document(job) for job in jobs]

    async def list_overrides(self, shop_id: str) -> List[ShopOverrideSchema]:
        """Get every override record for a shop."""
        try:
            overrides = await ShopOverride.find(ShopOverride.shop_id == shop_id).to_list()
        except Exception as e:
            logger.error(f"Failed to fetch overrides for shop {shop_id}: {e}")
            raise

        return [ShopOverrideSchema.from_document(o) for o in overrides]


def get_job_repository() -> JobRepository:
    """FastAPI dependency returning the job repository."""
    return JobRepository()
