"""Project schemas"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field, field_validator

from app.schemas.common import CamelModel

ProjectStatusLiteral = Literal["draft", "published"]


def _normalize_template_id(value):
    # The editor sends "none" when no template was picked
    if value in (None, "", "none"):
        return None
    return value


class ProjectCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    template_id: UUID | None = None
    status: ProjectStatusLiteral = "draft"
    html_content: str | None = None
    css_content: str | None = None
    thumbnail_url: str | None = None
    domain: str | None = None

    normalize_template_id = field_validator("template_id", mode="before")(_normalize_template_id)


class ProjectUpdate(CamelModel):
    """Partial update: only fields present in the body are applied"""
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    template_id: UUID | None = None
    status: ProjectStatusLiteral | None = None
    html_content: str | None = None
    css_content: str | None = None
    thumbnail_url: str | None = None
    domain: str | None = None

    normalize_template_id = field_validator("template_id", mode="before")(_normalize_template_id)


class ProjectResponse(CamelModel):
    id: UUID
    user_id: UUID
    template_id: UUID | None
    name: str
    description: str | None
    status: ProjectStatusLiteral
    html_content: str | None
    css_content: str | None
    thumbnail_url: str | None
    domain: str | None
    created_at: datetime
    updated_at: datetime
