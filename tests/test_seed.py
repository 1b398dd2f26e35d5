"""Tests for the seed loader."""

import pytest
from pymongo.errors import InvalidURI

import seed
from auth import authenticate_user
from models import CATEGORIES, SeedResult
from seed import (
    DEMO_USER_EMAIL,
    DEMO_USER_PASSWORD,
    SAMPLE_QUESTIONS,
    all_questions,
    initialize_database,
    run_seed,
)


class TestCatalog:
    """The fixed question catalog."""

    def test_ten_questions_per_category(self):
        """Test that every category holds exactly ten questions of that category."""
        assert set(SAMPLE_QUESTIONS) == set(CATEGORIES)
        for category, questions in SAMPLE_QUESTIONS.items():
            assert len(questions) == 10
            assert all(q.category == category for q in questions)

    def test_documents_have_all_fields(self):
        """Test that flattened documents carry text, category, difficulty and tags."""
        documents = all_questions()

        assert len(documents) == 40
        assert all(set(doc) == {"text", "category", "difficulty", "tags"} for doc in documents)
        assert {doc["difficulty"] for doc in documents} <= {"easy", "medium", "hard"}

    def test_seed_result_noop(self):
        """Test that an empty SeedResult counts as a no-op and a filled one does not."""
        assert SeedResult().is_noop()
        assert not SeedResult(questions_inserted=1).is_noop()


@pytest.mark.asyncio
class TestInitializeDatabase:
    """initialize_database against an in-memory store."""

    async def test_seeds_empty_store(self, db):
        """Test that an empty store gets collections, 40 questions and the demo account."""
        result = await initialize_database(db)

        assert set(result.collections_created) == {"users", "interviews", "questions"}
        assert result.questions_inserted == 40
        assert result.demo_user_created is True
        assert await db["questions"].count_documents({}) == 40
        assert await db["questions"].count_documents({"category": "technical"}) == 10

    async def test_demo_user_can_log_in(self, db):
        """Test that the demo account logs in with its documented password."""
        await initialize_database(db)

        user = await authenticate_user(db, DEMO_USER_EMAIL, DEMO_USER_PASSWORD)

        assert user["name"] == "John Doe"
        assert "password" not in user

    async def test_second_run_is_noop(self, db):
        """Test that re-running the loader leaves one demo account and 40 questions."""
        await initialize_database(db)
        result = await initialize_database(db)

        assert result.is_noop()
        assert await db["users"].count_documents({}) == 1
        assert await db["questions"].count_documents({}) == 40

    async def test_existing_users_skip_demo_account(self, db):
        """Test that the demo account is only created when there are no accounts."""
        await db["users"].insert_one({"name": "Someone", "email": "someone@example.com", "password": "x"})

        result = await initialize_database(db)

        assert result.demo_user_created is False
        assert await db["users"].count_documents({"email": DEMO_USER_EMAIL}) == 0

    async def test_duplicate_emails_do_not_block_catalog(self, db):
        """Test that existing accounts sharing an email still let the catalog load."""
        await db["users"].insert_many([
            {"name": "One", "email": "dup@example.com", "password": "x"},
            {"name": "Two", "email": "dup@example.com", "password": "y"},
        ])

        result = await initialize_database(db)

        assert result.questions_inserted == 40
        assert await db["questions"].count_documents({}) == 40
        assert await db["users"].count_documents({}) == 2

    async def test_index_failure_is_logged_and_skipped(self, db, monkeypatch):
        """Test that an index build error does not stop the seed steps."""
        async def broken_indexes(database):
            raise RuntimeError("index build failed")

        monkeypatch.setattr(seed, "init_db", broken_indexes)

        result = await initialize_database(db)

        assert result.questions_inserted == 40
        assert result.demo_user_created is True


@pytest.mark.asyncio
class TestRunSeed:
    """Standalone seed entry point."""

    async def test_run_seed_closes_client(self, fake_client, monkeypatch):
        """Test that a successful run seeds the store and closes its client."""
        async def ping(client):
            return True

        monkeypatch.setattr(seed, "create_client", lambda uri=None: fake_client)
        monkeypatch.setattr(seed, "check_db_connection", ping)

        result = await run_seed()

        assert result.questions_inserted == 40
        assert fake_client.closed is True

    async def test_run_seed_swallows_errors(self, fake_client, monkeypatch):
        """Test that an unreachable store is logged, not raised, and the client closed."""
        async def unreachable(client):
            raise ConnectionError("no server")

        monkeypatch.setattr(seed, "create_client", lambda uri=None: fake_client)
        monkeypatch.setattr(seed, "check_db_connection", unreachable)

        result = await run_seed()

        assert result.is_noop()
        assert fake_client.closed is True

    async def test_run_seed_swallows_bad_uri(self, monkeypatch):
        """Test that a malformed MongoDB URI does not escape the loader."""
        def invalid_uri(uri=None):
            raise InvalidURI("Port must be an integer")

        monkeypatch.setattr(seed, "create_client", invalid_uri)

        result = await run_seed(uri="mongodb://localhost:notaport")

        assert result.is_noop()
