"""AI generation and subscription schemas"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from app.schemas.common import CamelModel


class GenerateRequest(CamelModel):
    """Website generation request.

    ``prompt`` is what the user typed; the optional business fields refine the
    composed provider prompt. When ``description`` is omitted the prompt is used
    as the business description.
    """
    prompt: str = Field(..., min_length=1, max_length=5000)
    business_name: str | None = Field(default=None, max_length=200)
    business_type: str | None = Field(default=None, max_length=100)
    description: str | None = Field(default=None, max_length=5000)
    primary_color: str | None = Field(default=None, max_length=20)
    sections: list[str] | None = None


class RegenerateSectionRequest(CamelModel):
    current_html: str = Field(..., min_length=1)
    current_css: str = ""
    section_name: str = Field(..., min_length=1, max_length=100)
    instructions: str = Field(..., min_length=1, max_length=5000)


class GeneratedWebsite(CamelModel):
    html: str
    css: str


class UsageSnapshot(CamelModel):
    used: int
    limit: int
    remaining: int


class SubscriptionSnapshot(CamelModel):
    plan_type: str
    status: str
    is_blocked: bool
    can_use_ai: bool


class AiUsageResponse(UsageSnapshot, SubscriptionSnapshot):
    """Usage merged with the subscription snapshot"""


class GenerateResponse(CamelModel):
    result: GeneratedWebsite
    tokens_used: int
    usage: UsageSnapshot


class AiGenerationResponse(CamelModel):
    id: UUID
    prompt: str
    tokens_used: int
    created_at: datetime
