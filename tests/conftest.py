"""
Test configuration and fixtures for the FinziAi lead capture API.

DATABASE_URL is pointed at a throwaway SQLite file before the app is
imported, and the schema is rebuilt for every test that touches the database.
"""

import asyncio
import os
import tempfile
from typing import Generator

from dotenv import load_dotenv

import pytest
from fastapi.testclient import TestClient

load_dotenv()

test_db_path = tempfile.mktemp(suffix=".db")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{test_db_path}"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="finziai-logs-")


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from app.main import app

    return app


@pytest.fixture
def fresh_db():
    """Drop and recreate every table."""
    from app.platform.db.session import init_models

    asyncio.run(init_models(drop=True))


@pytest.fixture(scope="function")
def client(test_app, fresh_db) -> Generator[TestClient, None, None]:
    """
    Create a test client for making HTTP requests against an empty database.
    """
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def fetch_rows():
    """Return a helper that loads every row of a model from the test database."""
    from sqlalchemy import select

    from app.platform.db.session import SessionLocal

    async def _load(model):
        async with SessionLocal() as session:
            result = await session.execute(select(model))
            return list(result.scalars().all())

    def _fetch(model):
        return asyncio.run(_load(model))

    return _fetch


@pytest.fixture
def add_download_token():
    """Return a helper that stores a download token row directly."""
    from app.features.downloads.models.download_token import DownloadToken
    from app.platform.db.session import SessionLocal

    async def _store(token: str, email: str, used: bool):
        async with SessionLocal() as session:
            session.add(DownloadToken(email=email, token=token, used=used))
            await session.commit()

    def _add(token: str, email: str = "reader@example.com", used: bool = False):
        asyncio.run(_store(token, email, used))

    return _add
