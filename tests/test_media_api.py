"""API tests for media uploads. S3 calls are replaced with in-process fakes."""

import pytest

from app.models import Media
from app.services.s3 import s3_service
from tests.conftest import bearer, make_user


@pytest.fixture
def fake_s3(monkeypatch):
    deleted = []

    async def presigned_upload_url(s3_key, content_type=None, expiration=None):
        return f"https://uploads.example.com/{s3_key}?signature=put"

    async def presigned_url(s3_key, expiration=None):
        return f"https://cdn.example.com/{s3_key}?signature=get"

    async def delete_file(s3_key):
        deleted.append(s3_key)
        return True

    monkeypatch.setattr(s3_service, "generate_presigned_upload_url", presigned_upload_url)
    monkeypatch.setattr(s3_service, "generate_presigned_url", presigned_url)
    monkeypatch.setattr(s3_service, "delete_file", delete_file)
    return deleted


async def test_create_media_returns_upload_url(client, client_user, fake_s3):
    response = await client.post(
        "/api/media",
        json={"filename": "Logo.PNG", "mimeType": "image/png", "sizeBytes": 2048},
        headers=bearer(client_user),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["media"]["filename"] == "Logo.PNG"
    s3_key = data["upload"]["s3Key"]
    assert s3_key.startswith(f"media/{client_user.id}/")
    assert s3_key.endswith(".png")
    assert data["upload"]["presignedUrl"].startswith("https://uploads.example.com/")


async def test_create_media_rejects_unsupported_type(client, client_user, fake_s3):
    response = await client.post(
        "/api/media",
        json={"filename": "run.exe", "mimeType": "application/x-msdownload", "sizeBytes": 10},
        headers=bearer(client_user),
    )

    assert response.status_code == 400
    assert "Unsupported file type" in response.json()["message"]


async def test_create_media_rejects_large_files(client, client_user, fake_s3):
    response = await client.post(
        "/api/media",
        json={"filename": "huge.mp4", "mimeType": "video/mp4", "sizeBytes": 26 * 1024 * 1024},
        headers=bearer(client_user),
    )

    assert response.status_code == 400
    assert "25MB" in response.json()["message"]


async def test_list_media_includes_download_urls(client, db, client_user, fake_s3):
    db.add(Media(user_id=client_user.id, filename="a.jpg", s3_key="media/x/a.jpg", mime_type="image/jpeg", size_bytes=5))
    await db.commit()

    response = await client.get("/api/media", headers=bearer(client_user))

    assert response.status_code == 200
    assert response.json()[0]["url"] == "https://cdn.example.com/media/x/a.jpg?signature=get"


async def test_delete_media_removes_object_and_row(client, db, client_user, fake_s3):
    media = Media(user_id=client_user.id, filename="a.jpg", s3_key="media/x/a.jpg", mime_type="image/jpeg", size_bytes=5)
    db.add(media)
    await db.commit()

    response = await client.delete(f"/api/media/{media.id}", headers=bearer(client_user))

    assert response.status_code == 204
    assert fake_s3 == ["media/x/a.jpg"]
    listing = await client.get("/api/media", headers=bearer(client_user))
    assert listing.json() == []


async def test_cannot_delete_someone_elses_media(client, db, client_user, fake_s3):
    other = await make_user(db, email="other@example.com")
    media = Media(user_id=other.id, filename="b.jpg", s3_key="media/y/b.jpg", mime_type="image/jpeg", size_bytes=5)
    db.add(media)
    await db.commit()

    response = await client.delete(f"/api/media/{media.id}", headers=bearer(client_user))

    assert response.status_code == 403
    assert fake_s3 == []
