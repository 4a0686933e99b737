"""User, auth and admin schemas"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel

Role = Literal["ADMIN", "CLIENT"]
Plan = Literal["free", "pro", "enterprise"]
Status = Literal["free", "active", "past_due", "cancelled"]


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    name: str = Field(..., min_length=1, max_length=255)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """User without the password hash"""
    id: UUID
    email: EmailStr
    name: str
    role: Role
    avatar_url: str | None
    ai_generations_used: int
    ai_generations_limit: int
    plan_type: Plan
    subscription_status: Status
    stripe_customer_id: str | None
    stripe_subscription_id: str | None
    subscription_end_date: datetime | None
    created_at: datetime


class AuthResponse(CamelModel):
    token: str
    user: UserResponse


class UpdateRoleRequest(CamelModel):
    role: Role


class UpdateSubscriptionRequest(CamelModel):
    plan_type: Plan
    status: Status


class UserStatsResponse(CamelModel):
    total_projects: int
    published_sites: int
    templates_used: int
    storage_used: str


class AdminStatsResponse(CamelModel):
    total_users: int
    total_projects: int
    published_sites: int
    active_users: int


class AdminAnalyticsResponse(AdminStatsResponse):
    total_generations: int
    total_tokens_used: int
    users_by_plan: dict[str, int]
