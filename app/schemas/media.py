"""Media upload schemas"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel, UploadInfo


class MediaCreate(CamelModel):
    filename: str = Field(..., min_length=1, max_length=255)
    mime_type: str
    size_bytes: int = Field(..., gt=0)


class MediaResponse(CamelModel):
    id: UUID
    filename: str
    mime_type: str
    size_bytes: int
    url: str | None = None
    created_at: datetime


class MediaUploadResponse(CamelModel):
    media: MediaResponse
    upload: UploadInfo
