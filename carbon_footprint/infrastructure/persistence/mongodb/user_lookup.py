"""MongoDB implementation of IUserLookup."""

from __future__ import annotations

from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from carbon_footprint.domain.shared.errors import CollaboratorError

logger = structlog.get_logger(__name__)


class MongoUserLookup:
    """Checks user existence in the ``users`` collection by ``user_id``."""

    COLLECTION_NAME = "users"

    def __init__(self, db: AsyncIOMotorDatabase[Any]):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def exists(self, user_id: str) -> bool:
        try:
            count = await self.collection.count_documents({"user_id": user_id}, limit=1)
        except PyMongoError as e:
            logger.error("Database error while looking up user", user_id=user_id, error=str(e))
            raise CollaboratorError(f"User lookup error: {e}") from e

        return count > 0
