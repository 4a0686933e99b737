"""Media router: uploads through S3 presigned URLs"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.models import Media
from app.schemas.common import UploadInfo
from app.schemas.media import MediaCreate, MediaResponse, MediaUploadResponse
from app.services.account_service import as_uuid
from app.services.auth import TokenClaims, can_access, get_current_user
from app.services.s3 import s3_service
from app.utils.constants import ALLOWED_MEDIA_TYPES, MAX_MEDIA_SIZE_BYTES, MAX_MEDIA_SIZE_MB
from app.utils.exceptions import AccessDeniedError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/media", tags=["Media"])


@router.get("", response_model=list[MediaResponse])
async def list_media(
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the caller's media, newest first, each with a fresh download URL.
    """
    result = await db.execute(
        select(Media)
        .where(Media.user_id == as_uuid(user.id))
        .order_by(Media.created_at.desc())
    )

    items = []
    for media in result.scalars().all():
        item = MediaResponse.model_validate(media)
        item.url = await s3_service.generate_presigned_url(media.s3_key)
        items.append(item)
    return items


@router.post("", response_model=MediaUploadResponse, status_code=status.HTTP_201_CREATED)
async def create_media(
    request: MediaCreate,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Register an upload and return the presigned URL the browser PUTs the file to.
    """
    if request.mime_type not in ALLOWED_MEDIA_TYPES:
        raise ValidationError(f"Unsupported file type: {request.mime_type}")
    if request.size_bytes > MAX_MEDIA_SIZE_BYTES:
        raise ValidationError(f"File too large. Maximum size is {MAX_MEDIA_SIZE_MB}MB")

    s3_key = s3_service.generate_s3_key(user.id, request.filename)
    upload_url = await s3_service.generate_presigned_upload_url(s3_key, content_type=request.mime_type)
    if not upload_url:
        raise InternalError("Failed to generate upload URL")

    media = Media(
        user_id=as_uuid(user.id),
        filename=request.filename,
        s3_key=s3_key,
        mime_type=request.mime_type,
        size_bytes=request.size_bytes,
    )
    db.add(media)
    await db.commit()
    await db.refresh(media)

    logger.info(f"Registered media {media.id} ({request.mime_type}, {request.size_bytes} bytes) for user {user.id}")

    return MediaUploadResponse(
        media=MediaResponse.model_validate(media),
        upload=UploadInfo(
            presigned_url=upload_url,
            s3_key=s3_key,
            expires_in_seconds=s3_service.presigned_url_expiration,
        ),
    )


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(
    media_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    media = await db.get(Media, media_id)
    if media is None:
        raise NotFoundError("Media not found")
    if not can_access(user, media.user_id):
        raise AccessDeniedError("Access denied")

    if not await s3_service.delete_file(media.s3_key):
        logger.warning(f"S3 object {media.s3_key} was not removed, deleting media row anyway")

    await db.delete(media)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
