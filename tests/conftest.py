"""
Shared test fixtures and configuration for entire test suite.

Provides: settings builders, Gemini response builders, client mocks,
in-memory async database
Dependencies: pytest, sqlalchemy, google.genai
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
import uuid

import pytest
from google.genai import types

from thumbnail_studio.boundary.gemini.gemini_client import GeminiImageResult
from thumbnail_studio.boundary.identity.identity_client import VerifiedUser
from thumbnail_studio.configs import Settings
from thumbnail_studio.configs.backend_service import BackendServiceSettings
from thumbnail_studio.configs.gemini import PRIMARY_GEMINI_MODEL, GeminiSettings
from thumbnail_studio.configs.s3_thumbnails import S3ThumbnailsSettings

TEST_USER_ID = "7f0c6a3e-5c1b-4b8e-9d7a-2f6e1c0b9a11"
TEST_BUCKET = "thumbnail-assets"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


def make_settings(
    api_key: str | None = "test-gemini-key",
    service_url: str | None = "https://identity.example.test",
    public_key: str | None = "test-public-key",
    bucket: str = TEST_BUCKET,
) -> Settings:
    """Build settings with explicit values so the environment cannot leak in."""
    return Settings(
        gemini=GeminiSettings(api_key=api_key),
        service=BackendServiceSettings(url=service_url, public_key=public_key),
        s3_thumbnails=S3ThumbnailsSettings(bucket=bucket),
    )


def image_part(data: bytes = PNG_BYTES, mime_type: str = "image/png", thought: bool | None = None) -> types.Part:
    """Build an inline image part."""
    return types.Part(
        inline_data=types.Blob(mime_type=mime_type, data=data),
        thought=thought,
    )


def text_part(text: str, thought: bool | None = None) -> types.Part:
    """Build a text part."""
    return types.Part(text=text, thought=thought)


def make_response(parts: list[types.Part]) -> types.GenerateContentResponse:
    """Wrap parts in a single-candidate generateContent response."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=parts)),
        ]
    )


@pytest.fixture
def settings() -> Settings:
    """Fully configured settings."""
    return make_settings()


@pytest.fixture
def mock_db():
    """
    Create mock AsyncSession.

    Returns:
        AsyncMock: Session with commit/rollback awaitables
    """
    db = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.fixture
def mock_clients():
    """
    Create mocked identity, Gemini and S3 clients.

    Defaults describe a successful generation of one PNG.

    Returns:
        SimpleNamespace: identity_client, gemini_client, s3_client
    """
    identity_client = MagicMock()
    identity_client.get_user = AsyncMock(return_value=VerifiedUser(id=TEST_USER_ID))

    gemini_client = MagicMock()
    gemini_client.model = PRIMARY_GEMINI_MODEL
    gemini_client.generate_image = AsyncMock(
        return_value=GeminiImageResult(
            model=PRIMARY_GEMINI_MODEL,
            response=make_response([text_part("Here is your thumbnail."), image_part()]),
        )
    )

    s3_client = MagicMock()
    s3_client.bucket = TEST_BUCKET
    s3_client.upload_image = AsyncMock()
    s3_client.generate_presigned_download_url = MagicMock(
        return_value=("https://signed.example.test/object?sig=abc", datetime.now(timezone.utc))
    )

    return SimpleNamespace(
        identity_client=identity_client,
        gemini_client=gemini_client,
        s3_client=s3_client,
    )


@pytest.fixture
def mock_thumbnail_crud():
    """
    Create mock thumbnail_crud whose create_thumbnail echoes its input.

    Returns:
        MagicMock: CRUD mock building ThumbnailModel rows with id/created_at set
    """
    from thumbnail_studio.boundary.db.models.thumbnail_model import ThumbnailModel

    async def create_thumbnail(session, **kwargs):
        return ThumbnailModel(
            id=uuid.uuid4(),
            created_at=datetime.now(timezone.utc),
            **kwargs,
        )

    crud = MagicMock()
    crud.create_thumbnail = AsyncMock(side_effect=create_thumbnail)
    crud.list_by_user = AsyncMock(return_value=[])
    return crud


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from thumbnail_studio.boundary.db.base import Base
    from thumbnail_studio.boundary.db.models.thumbnail_model import ThumbnailModel  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()
