"""Pydantic schemas for request/response validation"""

from app.schemas.common import CamelModel, UploadInfo
from app.schemas.user import (
    SignupRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    UpdateRoleRequest,
    UpdateSubscriptionRequest,
    UserStatsResponse,
    AdminStatsResponse,
    AdminAnalyticsResponse,
)
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from app.schemas.template import TemplateResponse
from app.schemas.media import MediaCreate, MediaResponse, MediaUploadResponse
from app.schemas.ai import (
    GenerateRequest,
    RegenerateSectionRequest,
    GeneratedWebsite,
    UsageSnapshot,
    SubscriptionSnapshot,
    AiUsageResponse,
    GenerateResponse,
    AiGenerationResponse,
)
from app.schemas.billing import CheckoutRequest, CheckoutResponse

__all__ = [
    # Common
    "CamelModel",
    "UploadInfo",
    # User / admin
    "SignupRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "UpdateRoleRequest",
    "UpdateSubscriptionRequest",
    "UserStatsResponse",
    "AdminStatsResponse",
    "AdminAnalyticsResponse",
    # Project
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    # Template
    "TemplateResponse",
    # Media
    "MediaCreate",
    "MediaResponse",
    "MediaUploadResponse",
    # AI
    "GenerateRequest",
    "RegenerateSectionRequest",
    "GeneratedWebsite",
    "UsageSnapshot",
    "SubscriptionSnapshot",
    "AiUsageResponse",
    "GenerateResponse",
    "AiGenerationResponse",
    # Billing
    "CheckoutRequest",
    "CheckoutResponse",
]
