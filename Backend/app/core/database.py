import logging
from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from app.core.config import settings

logger = logging.getLogger(__name__)

# Process-wide client, created once by init_db() at startup
_client: Optional[AsyncIOMotorClient] = None


async def init_db():
    """
    Initialize MongoDB connection and Beanie ODM.
    """
    global _client

    if _client is not None:
        return

    client = AsyncIOMotorClient(settings.DATABASE_URL)

    # Explicit setting wins, then the database in the URL, then the default
    db_name = settings.DATABASE_NAME
    if not db_name:
        default_db = client.get_default_database(default="connect_specs")
        db_name = default_db.name

    from app.models.job import Job, ShopOverride

    await init_beanie(
        database=client[db_name],
        document_models=[
            Job,
            ShopOverride,
        ]
    )

    _client = client
    logger.info(f"Beanie initialized on database '{db_name}'")


def close_db():
    """Close the MongoDB client opened by init_db()."""
    global _client

    if _client is not None:
        _client.close()
        _client = None
