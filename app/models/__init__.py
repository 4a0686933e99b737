from app.db.database import Base
from app.models.subscription import PlanType, SubscriptionStatus
from app.models.user import User, UserRole
from app.models.template import Template
from app.models.project import Project, ProjectStatus
from app.models.media import Media
from app.models.ai_generation import AiGeneration

__all__ = [
    "Base",
    "PlanType",
    "SubscriptionStatus",
    "User",
    "UserRole",
    "Template",
    "Project",
    "ProjectStatus",
    "Media",
    "AiGeneration",
]
