"""
Database models package.
Import all models here so init_beanie can register them.
"""
from app.models.job import Job, ShopOverride

__all__ = [
    "Job",
    "ShopOverride",
]
