from pydantic import BaseModel, Field
from typing import Optional, List


# ============================================================================
# Job Schemas
# ============================================================================

class JobSchema(BaseModel):
    """Catalog job as returned to the frontend"""
    id: str = Field(..., description="Job identifier")
    category: str = Field(..., description="Job category")
    name: str = Field(..., description="Display name")
    description: Optional[str] = Field(None, description="Job description")
    is_active: bool = Field(True, description="Whether the job is offered")
    base_hours: Optional[float] = Field(None, description="Standard labor hours")
    rate_type: Optional[str] = Field(None, description="Labor rate type")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "65f1c0ab9d1e4a0012a4b7c1",
                "category": "Brakes",
                "name": "Front Brake Pads",
                "description": "Replace front brake pads and inspect rotors",
                "is_active": True,
                "base_hours": 1.5,
                "rate_type": "standard"
            }
        }

    @classmethod
    def from_document(cls, job) -> "JobSchema":
        """Build from a Job document."""
        return cls(
            id=str(job.id),
            category=job.category,
            name=job.name,
            description=job.description,
            is_active=job.is_active,
            base_hours=job.base_hours,
            rate_type=job.rate_type,
        )


class ShopOverrideSchema(BaseModel):
    """Shop-specific override of a catalog job"""
    shop_id: str
    job_id: str
    is_hidden: bool = False
    base_hours_override: Optional[float] = None
    rate_type_override: Optional[str] = None

    @classmethod
    def from_document(cls, override) -> "ShopOverrideSchema":
        """Build from a ShopOverride document."""
        return cls(
            shop_id=override.shop_id,
            job_id=override.job_id,
            is_hidden=override.is_hidden,
            base_hours_override=override.base_hours_override,
            rate_type_override=override.rate_type_override,
        )


class JobsResponse(BaseModel):
    """Response for the jobs lookup"""
    jobs: List[JobSchema] = Field(default_factory=list)
