"""
MongoDB implementation of activity repository.

Storage design:
- Collection: carbon_activities
- Index on (user_id, date DESC) for range queries, newest first
- _id assigned by MongoDB (ObjectId), exposed as string id
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from carbon_footprint.domain.activity.entities import Activity
from carbon_footprint.domain.activity.value_objects import CategoryStats
from carbon_footprint.domain.shared.errors import CollaboratorError

logger = structlog.get_logger(__name__)


class MongoActivityRepository:
    """
    MongoDB implementation of IActivityRepository.

    Example:
        >>> from motor.motor_asyncio import AsyncIOMotorClient
        >>> client = AsyncIOMotorClient("mongodb://localhost:27017")
        >>> repository = MongoActivityRepository(client.carbon_footprint)
        >>> saved = await repository.save(activity)
    """

    COLLECTION_NAME = "carbon_activities"

    def __init__(self, db: AsyncIOMotorDatabase[Any]):
        """
        Initialize repository with MongoDB database.

        Creates indexes on first use.

        Args:
            db: Motor AsyncIOMotorDatabase instance
        """
        self.db = db
        self.collection = db[self.COLLECTION_NAME]
        self._indexes_created = False

    async def _ensure_indexes(self) -> None:
        if self._indexes_created:
            return

        await self.collection.create_index(
            [("user_id", 1), ("date", -1)],
            name="idx_user_date",
        )

        self._indexes_created = True

    def _to_document(self, activity: Activity) -> dict[str, Any]:
        return {
            "user_id": activity.user_id,
            "type": activity.type,
            "value": activity.value,
            "unit": activity.unit,
            "date": activity.date,
            "carbon_emission": activity.carbon_emission,
        }

    def _from_document(self, doc: dict[str, Any]) -> Activity:
        date = doc["date"]
        # Motor returns naive datetimes (UTC) unless the client is tz_aware
        if isinstance(date, datetime) and date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)

        return Activity(
            id=str(doc["_id"]),
            user_id=str(doc["user_id"]),
            type=doc["type"],
            value=doc["value"],
            unit=doc["unit"],
            date=date,
            carbon_emission=doc.get("carbon_emission"),
        )

    async def save(self, activity: Activity) -> Activity:
        """Insert activity; returns a copy carrying the new ObjectId."""
        try:
            await self._ensure_indexes()
            result = await self.collection.insert_one(self._to_document(activity))
        except PyMongoError as e:
            logger.error("Database error while saving activity", error=str(e))
            raise CollaboratorError(f"Activity save error: {e}") from e

        return activity.with_id(str(result.inserted_id))

    async def find_by_user_and_date_range(
        self,
        user_id: str,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Activity]:
        """Activities of a user within the inclusive range, newest first."""
        query: dict[str, Any] = {"user_id": user_id}

        if start_date is not None or end_date is not None:
            date_filter: dict[str, Any] = {}
            if start_date is not None:
                date_filter["$gte"] = start_date
            if end_date is not None:
                date_filter["$lte"] = end_date
            query["date"] = date_filter

        try:
            await self._ensure_indexes()
            cursor = self.collection.find(query).sort("date", -1)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("Database error while finding activities", user_id=user_id, error=str(e))
            raise CollaboratorError(f"Activity query error: {e}") from e

        return [self._from_document(doc) for doc in docs]

    async def get_user_stats(self, user_id: str) -> dict[str, CategoryStats]:
        """Per-category count, total and average emission."""
        pipeline = [
            {"$match": {"user_id": user_id}},
            {
                "$group": {
                    "_id": "$type",
                    "count": {"$sum": 1},
                    "total_emission": {"$sum": "$carbon_emission"},
                    "average_emission": {"$avg": "$carbon_emission"},
                }
            },
        ]

        try:
            cursor = self.collection.aggregate(pipeline)
            rows = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("Database error while getting stats", user_id=user_id, error=str(e))
            raise CollaboratorError(f"Stats calculation error: {e}") from e

        return {
            row["_id"]: CategoryStats(
                count=row["count"],
                total_emission=row["total_emission"] or 0.0,
                average_emission=row["average_emission"] or 0.0,
            )
            for row in rows
        }
