"""Document layout for the MongoDB collections."""

from datetime import datetime, timezone
from typing import Any, Optional
from bson import ObjectId
from bson.errors import InvalidId


USERS = "users"
INTERVIEWS = "interviews"
QUESTIONS = "questions"

COLLECTIONS = (USERS, INTERVIEWS, QUESTIONS)


def utcnow() -> datetime:
    """Timestamp for ``createdAt`` fields."""
    return datetime.now(timezone.utc)


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a document id, returning None when it is malformed."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def user_document(name: Optional[str], email: str, hashed_password: str) -> dict:
    """Build an account document."""
    return {
        "name": name,
        "email": email,
        "password": hashed_password,
        "createdAt": utcnow(),
    }


def interview_document(
    user_id: Any,
    questions: Any,
    answers: Any,
    feedback: Any,
    settings: Any,
    scores: Any,
) -> dict:
    """Build an interview session document."""
    return {
        "userId": user_id,
        "questions": questions,
        "answers": answers,
        "feedback": feedback,
        "settings": settings,
        "scores": scores,
        "createdAt": utcnow(),
    }


def serialize(document: dict) -> dict:
    """Make a stored document JSON-friendly: ObjectIds become strings."""
    return {key: _serialize_value(value) for key, value in document.items()}


def public_user(document: dict) -> dict:
    """Account document without the password hash."""
    return serialize({key: value for key, value in document.items() if key != "password"})


def _serialize_value(value):
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return serialize(value)
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    return value
