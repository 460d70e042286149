"""Factory for creating persistence adapters.

Uses REPOSITORY_BACKEND environment variable to pick the backend:
- inmemory: InMemoryActivityRepository / InMemoryUserLookup
- mongodb: MongoActivityRepository / MongoUserLookup
"""

from typing import Any, Optional

from carbon_footprint.domain.activity.ports import IActivityRepository, IUserLookup

from ..config import get_mongodb_database, get_mongodb_uri, get_repository_backend

# Module-level singletons
_repository_instance: Optional[IActivityRepository] = None
_user_lookup_instance: Optional[IUserLookup] = None
_mongo_client: Optional[Any] = None


def _mongo_database() -> Any:
    global _mongo_client

    if _mongo_client is None:
        from motor.motor_asyncio import AsyncIOMotorClient

        uri = get_mongodb_uri()
        if not uri:
            raise ValueError(
                "MONGODB_URI not configured. "
                "Set MONGODB_URI, MONGODB_USER, "
                "and MONGODB_PASSWORD environment variables."
            )
        _mongo_client = AsyncIOMotorClient(uri)

    return _mongo_client[get_mongodb_database()]


def create_activity_repository() -> IActivityRepository:
    """Create activity repository based on REPOSITORY_BACKEND env var.

    Returns:
        IActivityRepository: Repository instance (singleton pattern)

    Raises:
        ValueError: If REPOSITORY_BACKEND has unsupported value, or
            mongodb is selected without MONGODB_URI
    """
    global _repository_instance

    if _repository_instance is not None:
        return _repository_instance

    mode = get_repository_backend()

    if mode == "inmemory":
        from .in_memory.activity_repository import InMemoryActivityRepository

        _repository_instance = InMemoryActivityRepository()
        return _repository_instance

    if mode == "mongodb":
        from .mongodb.activity_repository import MongoActivityRepository

        _repository_instance = MongoActivityRepository(_mongo_database())
        return _repository_instance

    raise ValueError(
        f"Unknown REPOSITORY_BACKEND value: '{mode}'. Supported values: inmemory, mongodb"
    )


def create_user_lookup() -> IUserLookup:
    """Create user lookup based on REPOSITORY_BACKEND env var.

    Returns:
        IUserLookup: Lookup instance (singleton pattern)
    """
    global _user_lookup_instance

    if _user_lookup_instance is not None:
        return _user_lookup_instance

    mode = get_repository_backend()

    if mode == "inmemory":
        from .in_memory.user_lookup import InMemoryUserLookup

        _user_lookup_instance = InMemoryUserLookup()
        return _user_lookup_instance

    if mode == "mongodb":
        from .mongodb.user_lookup import MongoUserLookup

        _user_lookup_instance = MongoUserLookup(_mongo_database())
        return _user_lookup_instance

    raise ValueError(
        f"Unknown REPOSITORY_BACKEND value: '{mode}'. Supported values: inmemory, mongodb"
    )


def reset_persistence() -> None:
    """Reset singletons for testing purposes."""
    global _repository_instance, _user_lookup_instance, _mongo_client
    _repository_instance = None
    _user_lookup_instance = None
    _mongo_client = None


__all__ = [
    "create_activity_repository",
    "create_user_lookup",
    "reset_persistence",
]
