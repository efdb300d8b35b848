import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient

from .config import Settings

logger = logging.getLogger(__name__)

UNIQUE_FIELDS = {
    "donors": ["id", "email"],
    "hospitals": ["id", "email"],
}


def connect(settings: Settings):
    """Open a motor client and return (client, database)."""
    client = AsyncIOMotorClient(settings.MONGODB_URI)
    return client, client[settings.MONGODB_DB]


async def ensure_indexes(db) -> None:
    """Create the unique indexes that back email uniqueness."""
    for collection, fields in UNIQUE_FIELDS.items():
        for field in fields:
            await db[collection].create_index(field, unique=True)
    logger.info("Unique indexes ensured on donors and hospitals")


def get_db(request: Request):
    return request.app.state.db
