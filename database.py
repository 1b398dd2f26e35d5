"""MongoDB client lifecycle for Interview Practice API."""

from fastapi import Request
from pymongo import AsyncMongoClient, ASCENDING, DESCENDING
from config import config
from db_models import USERS, INTERVIEWS, QUESTIONS
from logger import log_info


def create_client(uri: str = None) -> AsyncMongoClient:
    """Create the process-wide MongoDB client (connects lazily)."""
    return AsyncMongoClient(
        uri or config.mongodb_uri,
        serverSelectionTimeoutMS=config.mongodb_timeout_ms,
        tz_aware=True,
    )


def get_database(client, name: str = None):
    """Get the application database from a client."""
    return client[name or config.mongodb_db]


def get_db(request: Request):
    """FastAPI dependency returning the shared database handle."""
    return request.app.state.db


async def check_db_connection(client) -> bool:
    """
    Ping the MongoDB server.

    Returns:
        True if the server answered
    """
    await client.admin.command("ping")
    return True


async def init_db(db) -> None:
    """Create indexes used by the data-access layer."""
    # Backs the email uniqueness check performed on registration
    await db[USERS].create_index([("email", ASCENDING)], unique=True)
    await db[INTERVIEWS].create_index([("userId", ASCENDING), ("createdAt", DESCENDING)])
    await db[QUESTIONS].create_index([("category", ASCENDING)])
    log_info("Indexes ensured")
