"""Template schemas"""

from datetime import datetime
from uuid import UUID

from app.schemas.common import CamelModel


class TemplateResponse(CamelModel):
    id: UUID
    name: str
    description: str | None
    category: str
    thumbnail_url: str | None
    html_content: str | None
    css_content: str | None
    is_premium: bool
    created_at: datetime
