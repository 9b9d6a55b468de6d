"""
Thumbnail service orchestrator.

Runs the generation pipeline strictly in order: token, prompt and
configuration checks, identity verification, one Gemini call, image
selection, upload, presigned URL, metadata insert. Every failure is terminal
and nothing is rolled back in storage; an upload followed by a failed insert
leaves the object in place.

Dependencies: botocore, google.genai, sqlalchemy, thumbnail_studio.boundary,
    thumbnail_studio.core
System role: Thumbnail generation use case orchestration
"""

import logging
from typing import Protocol

from botocore.exceptions import BotoCoreError, ClientError
from google.genai import errors as genai_errors
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from thumbnail_studio.boundary.aws.s3_client import S3ThumbnailClient
from thumbnail_studio.boundary.db.CRUD.thumbnail_crud import thumbnail_crud
from thumbnail_studio.boundary.gemini.gemini_client import GeminiImageClient
from thumbnail_studio.boundary.identity.identity_client import (
    IdentityClient,
    IdentityVerificationError,
    VerifiedUser,
)
from thumbnail_studio.configs import Settings
from thumbnail_studio.core.exceptions import (
    InvalidAuthTokenError,
    MetadataSaveError,
    MissingAuthTokenError,
    MissingConfigurationError,
    NoGeneratedImageError,
    PromptRequiredError,
    StorageNotConfiguredError,
    UnexpectedServerError,
    UploadFailedError,
    UrlCreationFailedError,
)
from thumbnail_studio.core.generation import (
    build_storage_path,
    classify_provider_error,
    collect_text,
    extension_for_mime_type,
    first_candidate_parts,
    make_title,
    select_image_part,
)
from thumbnail_studio.models.thumbnail import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_SIZE,
    GenerateThumbnailRequest,
    GenerateThumbnailResponse,
    ThumbnailListItem,
    ThumbnailSummary,
)

logger = logging.getLogger(__name__)


class ThumbnailClients(Protocol):
    """Lazily built external client handles.

    Properties are only read after configuration has been validated, so an
    implementation may build clients from settings on first access.
    """

    @property
    def identity_client(self) -> IdentityClient: ...

    @property
    def gemini_client(self) -> GeminiImageClient: ...

    @property
    def s3_client(self) -> S3ThumbnailClient: ...


class ThumbnailService:
    """Thumbnail generation and listing orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        settings: Settings,
        clients: ThumbnailClients,
    ) -> None:
        """
        Initialize thumbnail service.

        Args:
            db: Async SQLAlchemy session
            settings: Application settings, validated per request
            clients: Provider of identity, Gemini and S3 clients
        """
        self.db = db
        self._settings = settings
        self._clients = clients

    def _require_provider_config(self) -> None:
        if not self._settings.gemini.api_key:
            raise MissingConfigurationError("GEMINI_API_KEY is not set")

    def _require_storage_config(self) -> None:
        if not self._settings.service.is_configured:
            raise StorageNotConfiguredError("SERVICE_URL and SERVICE_PUBLIC_KEY must be set")
        if not self._settings.s3_thumbnails.bucket:
            raise StorageNotConfiguredError("S3_THUMBNAILS_BUCKET is not set")

    async def _verify_user(self, token: str) -> VerifiedUser:
        try:
            return await self._clients.identity_client.get_user(token)
        except IdentityVerificationError as e:
            logger.info(f"{__name__}:_verify_user - token rejected: {e}")
            raise InvalidAuthTokenError() from e

    def _presigned_url(self, storage_path: str) -> str:
        try:
            url, _ = self._clients.s3_client.generate_presigned_download_url(
                s3_key=storage_path,
                expires_in=self._settings.s3_thumbnails.signed_url_expiry,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"{__name__}:_presigned_url - {type(e).__name__}: {e}")
            raise UrlCreationFailedError(str(e)) from e
        return url

    async def generate_from_body(
        self,
        token: str,
        body: bytes,
    ) -> GenerateThumbnailResponse:
        """
        Generate a thumbnail from a raw request body.

        The bearer token is checked before the body is parsed, so a request
        without a token is rejected whatever its body holds.

        Args:
            token: Bearer token from the Authorization header ("" if absent)
            body: Raw JSON request body

        Returns:
            GenerateThumbnailResponse: See generate()

        Raises:
            MissingAuthTokenError: If no token was supplied
            UnexpectedServerError: If the body is not valid JSON
        """
        if not token:
            raise MissingAuthTokenError()

        try:
            request = GenerateThumbnailRequest.from_json_body(body)
        except ValueError as e:
            logger.warning(f"{__name__}:generate_from_body - unparsable body: {e}")
            raise UnexpectedServerError(str(e)) from e

        return await self.generate(token, request)

    async def generate(
        self,
        token: str,
        request: GenerateThumbnailRequest,
    ) -> GenerateThumbnailResponse:
        """
        Generate, store and record one thumbnail.

        Args:
            token: Bearer token from the Authorization header ("" if absent)
            request: Prompt and image shape hints

        Returns:
            GenerateThumbnailResponse: Persisted summary, presigned URL,
                model id and provider commentary

        Raises:
            ThumbnailStudioException: Subclass matching the failed step
        """
        if not token:
            raise MissingAuthTokenError()

        prompt = (request.prompt or "").strip()
        if not prompt:
            raise PromptRequiredError()

        self._require_provider_config()
        self._require_storage_config()

        user = await self._verify_user(token)

        aspect_ratio = request.aspect_ratio or DEFAULT_ASPECT_RATIO
        image_size = request.image_size or DEFAULT_IMAGE_SIZE

        logger.info(
            f"{__name__}:generate - START "
            f"user_id={user.id}, prompt_len={len(prompt)}, aspect_ratio={aspect_ratio}"
        )

        gemini = self._clients.gemini_client
        try:
            result = await gemini.generate_image(
                prompt=prompt,
                aspect_ratio=aspect_ratio,
                image_size=image_size,
            )
        except genai_errors.APIError as e:
            provider_error = classify_provider_error(e, gemini.model)
            logger.warning(
                f"{__name__}:generate - provider error status={e.code} "
                f"classified_as={type(provider_error).__name__}"
            )
            raise provider_error from e

        parts = first_candidate_parts(result.response)
        image_part = select_image_part(parts)
        if image_part is None:
            logger.warning(f"{__name__}:generate - no image part in {len(parts)} parts")
            raise NoGeneratedImageError()

        mime_type = image_part.inline_data.mime_type or "image/png"
        image_bytes = image_part.inline_data.data
        storage_path = build_storage_path(user.id, extension_for_mime_type(mime_type))
        s3_client = self._clients.s3_client

        try:
            await s3_client.upload_image(
                s3_key=storage_path,
                image_bytes=image_bytes,
                content_type=mime_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"{__name__}:generate - upload failed {type(e).__name__}: {e}")
            raise UploadFailedError(str(e)) from e

        image_url = self._presigned_url(storage_path)

        try:
            thumbnail = await thumbnail_crud.create_thumbnail(
                self.db,
                user_id=user.id,
                title=make_title(prompt),
                prompt=prompt,
                storage_bucket=s3_client.bucket,
                storage_path=storage_path,
                mime_type=mime_type,
                file_size_bytes=len(image_bytes),
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            # Uploaded object stays in storage; only the DB transaction is rolled back.
            logger.error(
                f"{__name__}:generate - metadata insert failed, "
                f"orphaned storage_path={storage_path}: {e}"
            )
            await self.db.rollback()
            raise MetadataSaveError(str(e)) from e

        logger.info(
            f"{__name__}:generate - END "
            f"thumbnail_id={thumbnail.id}, mime_type={mime_type}, size={len(image_bytes)}"
        )

        return GenerateThumbnailResponse(
            thumbnail=ThumbnailSummary.model_validate(thumbnail),
            image_url=image_url,
            model=result.model,
            text=collect_text(parts),
        )

    async def list_thumbnails(
        self,
        token: str,
        limit: int = 50,
        offset: int = 0,
    ) -> list[ThumbnailListItem]:
        """
        List the caller's thumbnails with fresh presigned URLs.

        Args:
            token: Bearer token ("" if absent)
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            list[ThumbnailListItem]: Caller's thumbnails, newest first
        """
        if not token:
            raise MissingAuthTokenError()

        self._require_storage_config()
        user = await self._verify_user(token)

        thumbnails = await thumbnail_crud.list_by_user(
            self.db, user.id, limit=limit, offset=offset
        )
        logger.info(
            f"{__name__}:list_thumbnails - user_id={user.id}, count={len(thumbnails)}"
        )

        return [
            ThumbnailListItem(
                id=thumbnail.id,
                title=thumbnail.title,
                prompt=thumbnail.prompt,
                storage_bucket=thumbnail.storage_bucket,
                storage_path=thumbnail.storage_path,
                mime_type=thumbnail.mime_type,
                file_size_bytes=thumbnail.file_size_bytes,
                created_at=thumbnail.created_at,
                image_url=self._presigned_url(thumbnail.storage_path),
            )
            for thumbnail in thumbnails
        ]
