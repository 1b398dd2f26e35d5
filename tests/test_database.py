"""Tests for MongoDB client setup."""

import pytest

from database import create_client, get_database


@pytest.mark.asyncio
class TestCreateClient:
    """create_client configuration."""

    async def test_client_returns_aware_datetimes(self):
        """Test that stored timestamps come back timezone-aware, like freshly written ones."""
        client = create_client("mongodb://localhost:27017")
        try:
            assert client.codec_options.tz_aware is True
        finally:
            await client.close()

    async def test_get_database_uses_name(self):
        """Test that get_database selects the requested database."""
        client = create_client("mongodb://localhost:27017")
        try:
            assert get_database(client, "practice_db").name == "practice_db"
        finally:
            await client.close()
