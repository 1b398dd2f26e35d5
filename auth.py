"""Account registration and login for Interview Practice API."""

import asyncio
from functools import partial
from typing import Optional, Tuple
from passlib.context import CryptContext
from pydantic import BaseModel
from pymongo.errors import DuplicateKeyError
from config import config
from db_models import public_user
from db_operations import create_user_db, get_user_by_email
from errors import Conflict, InvalidCredentials

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=config.bcrypt_rounds)


class UserCreate(BaseModel):
    """User registration model."""
    name: Optional[str] = None
    email: str
    password: str


class UserCredentials(BaseModel):
    """User credentials for login."""
    email: str
    password: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash password."""
    return pwd_context.hash(password)


async def get_password_hash_async(password: str) -> str:
    """Hash password in the default executor, off the event loop."""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, partial(get_password_hash, password))


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    """Verify password in the default executor."""
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(
        None,
        partial(verify_password, plain_password, hashed_password)
    )


async def register_user(db, name: Optional[str], email: str, password: str) -> Tuple[dict, str]:
    """
    Create new account.

    Args:
        db: Application database
        name: Display name
        email: Account email, must not be registered yet
        password: Plain text password, stored hashed

    Returns:
        (account without password, generated account id)

    Raises:
        Conflict: If email already registered
    """
    existing_user = await get_user_by_email(db, email)
    if existing_user:
        raise Conflict()

    hashed_password = await get_password_hash_async(password)

    try:
        db_user = await create_user_db(db, name, email, hashed_password)
    except DuplicateKeyError:
        # Lost the race against a concurrent registration
        raise Conflict()

    return public_user(db_user), str(db_user["_id"])


async def authenticate_user(db, email: str, password: str) -> dict:
    """
    Authenticate account with email and password.

    Returns:
        Account without password

    Raises:
        InvalidCredentials: Unknown email or wrong password
    """
    db_user = await get_user_by_email(db, email)

    if not db_user:
        raise InvalidCredentials()

    if not await verify_password_async(password, db_user["password"]):
        raise InvalidCredentials()

    return public_user(db_user)
