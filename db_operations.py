"""Database operations for Interview Practice API."""

from typing import Any, List, Optional
from pymongo import DESCENDING
from db_models import (
    USERS, INTERVIEWS, QUESTIONS,
    interview_document, serialize, to_object_id, user_document,
)


async def create_user_db(db, name: Optional[str], email: str, hashed_password: str) -> dict:
    """Insert an account and return the stored document (with ``_id``)."""
    document = user_document(name, email, hashed_password)
    result = await db[USERS].insert_one(document)
    document["_id"] = result.inserted_id
    return document


async def get_user_by_email(db, email: str) -> Optional[dict]:
    """Get account by email."""
    return await db[USERS].find_one({"email": email})


async def count_users(db) -> int:
    return await db[USERS].count_documents({})


async def create_interview(
    db,
    user_id: Any,
    questions: Any,
    answers: Any,
    feedback: Any,
    settings: Any,
    scores: Any,
) -> str:
    """
    Save a completed interview session.

    The user id is stored as given; it is not checked against ``users``.

    Returns:
        Generated interview id
    """
    document = interview_document(user_id, questions, answers, feedback, settings, scores)
    result = await db[INTERVIEWS].insert_one(document)
    return str(result.inserted_id)


async def get_interviews_by_user(db, user_id: str) -> List[dict]:
    """Get a user's interviews, newest first."""
    cursor = db[INTERVIEWS].find({"userId": user_id}).sort(
        [("createdAt", DESCENDING), ("_id", DESCENDING)]
    )
    return [serialize(doc) for doc in await cursor.to_list(length=None)]


async def get_interview_by_id(db, interview_id: str) -> Optional[dict]:
    """Get interview by ID. Malformed ids match nothing."""
    object_id = to_object_id(interview_id)
    if object_id is None:
        return None

    document = await db[INTERVIEWS].find_one({"_id": object_id})
    return serialize(document) if document else None


async def get_questions_by_category(db, category: str) -> List[dict]:
    """Get questions whose category matches exactly."""
    cursor = db[QUESTIONS].find({"category": category})
    return [serialize(doc) for doc in await cursor.to_list(length=None)]


async def count_questions(db) -> int:
    return await db[QUESTIONS].count_documents({})


async def insert_questions(db, questions: List[dict]) -> int:
    """Bulk insert question documents in one operation."""
    result = await db[QUESTIONS].insert_many(questions)
    return len(result.inserted_ids)
