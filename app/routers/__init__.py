"""API routers module"""

from app.routers.auth import router as auth_router
from app.routers.dashboard import router as dashboard_router
from app.routers.projects import router as projects_router
from app.routers.templates import router as templates_router
from app.routers.media import router as media_router
from app.routers.admin import router as admin_router
from app.routers.ai import router as ai_router
from app.routers.billing import router as billing_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "projects_router",
    "templates_router",
    "media_router",
    "admin_router",
    "ai_router",
    "billing_router",
]
