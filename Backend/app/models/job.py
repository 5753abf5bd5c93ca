from beanie import Document, Indexed
from typing import Annotated, Optional


class Job(Document):
    """
    Standard labor job.
    Part of the shop-wide catalog every shop starts from.
    """
    category: str
    name: str
    description: Optional[str] = None
    is_active: bool = True

    base_hours: Optional[float] = None
    rate_type: Optional[str] = None

    class Settings:
        name = "connect_specs_jobs"


class ShopOverride(Document):
    """
    Shop-specific customization of a catalog job.
    Null override fields keep the job's own values.
    """
    shop_id: Annotated[str, Indexed()]
    job_id: str

    is_hidden: bool = False
    base_hours_override: Optional[float] = None
    rate_type_override: Optional[str] = None

    class Settings:
        name = "shop_overrides"
