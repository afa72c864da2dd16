import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.features.downloads.models.download_token import DownloadToken
from app.features.downloads.services.download_service import DownloadService
from app.platform.config import settings
from app.platform.db.session import get_db

EBOOK_NAME = "Finziai-Habbits-to-save-money-effortlessly.pdf"


def _token_row(fetch_rows, token):
    return next(row for row in fetch_rows(DownloadToken) if row.token == token)


def test_missing_token_is_rejected(client):
    response = client.get("/api/download")
    assert response.status_code == 400
    assert response.text == "Invalid token"


def test_blank_token_is_rejected(client):
    response = client.get("/api/download", params={"token": "  "})
    assert response.status_code == 400
    assert response.text == "Invalid token"


def test_unknown_token_is_rejected(client, fetch_rows, add_download_token):
    add_download_token("known-token")

    response = client.get("/api/download", params={"token": "never-issued"})

    assert response.status_code == 400
    assert response.text == "Invalid or expired download link"
    assert _token_row(fetch_rows, "known-token").used is False


def test_used_token_is_rejected(client, add_download_token):
    add_download_token("spent-token", used=True)

    response = client.get("/api/download", params={"token": "spent-token"})

    assert response.status_code == 400
    assert response.text == "Invalid or expired download link"


def test_valid_token_returns_pdf_and_is_consumed(client, fetch_rows, add_download_token):
    add_download_token("fresh-token")

    response = client.get("/api/download", params={"token": "fresh-token"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == f'attachment; filename="{EBOOK_NAME}"'
    assert response.content.startswith(b"%PDF")

    row = _token_row(fetch_rows, "fresh-token")
    assert row.used is True
    assert row.used_at is not None


def test_token_cannot_be_redeemed_twice(client, add_download_token):
    add_download_token("once-token")

    first = client.get("/api/download", params={"token": "once-token"})
    second = client.get("/api/download", params={"token": "once-token"})

    assert first.status_code == 200
    assert second.status_code == 400


def test_missing_ebook_does_not_consume_token(client, fetch_rows, add_download_token, monkeypatch, tmp_path):
    add_download_token("keep-token")
    monkeypatch.setattr(settings, "EBOOK_FILE_PATH", str(tmp_path / "missing.pdf"))

    response = client.get("/api/download", params={"token": "keep-token"})

    assert response.status_code == 500
    assert response.text == "An error occurred during download"
    assert _token_row(fetch_rows, "keep-token").used is False


def test_store_failure_is_server_error(client, add_download_token, monkeypatch):
    add_download_token("boom-token")

    async def _explode(self, token):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(
        "app.features.downloads.services.download_service.DownloadService.redeem", _explode
    )

    response = client.get("/api/download", params={"token": "boom-token"})

    assert response.status_code == 500
    assert response.text == "An error occurred during download"


def test_ebook_is_not_exposed_as_static_file(client):
    response = client.get(f"/static/assets/{EBOOK_NAME}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_concurrent_redemptions_only_one_succeeds():
    from app.main import app
    from app.platform.db.session import SessionLocal, init_models

    await init_models(drop=True)
    async with SessionLocal() as session:
        session.add(DownloadToken(email="race@example.com", token="race-token", used=False))
        await session.commit()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        responses = await asyncio.gather(
            ac.get("/api/download", params={"token": "race-token"}),
            ac.get("/api/download", params={"token": "race-token"}),
        )

    assert sorted(r.status_code for r in responses) == [200, 400]


def _failing_session():
    db = MagicMock()
    db.execute = AsyncMock(side_effect=OperationalError("UPDATE", {}, Exception("database is locked")))
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.mark.asyncio
async def test_redeem_rolls_back_and_reraises_on_store_failure():
    db = _failing_session()

    with pytest.raises(OperationalError):
        await DownloadService(db).redeem("any-token")

    db.rollback.assert_awaited_once()
    db.commit.assert_not_awaited()


def test_store_failure_during_update_leaves_token_unused(client, test_app, fetch_rows, add_download_token):
    add_download_token("locked-token")
    db = _failing_session()

    async def _override_get_db():
        yield db

    test_app.dependency_overrides[get_db] = _override_get_db
    try:
        response = client.get("/api/download", params={"token": "locked-token"})
    finally:
        test_app.dependency_overrides.pop(get_db, None)

    assert response.status_code == 500
    assert response.text == "An error occurred during download"
    db.rollback.assert_awaited_once()
    assert _token_row(fetch_rows, "locked-token").used is False
