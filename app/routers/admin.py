"""Admin router: site statistics and account management"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.schemas.user import (
    AdminAnalyticsResponse,
    AdminStatsResponse,
    UpdateRoleRequest,
    UpdateSubscriptionRequest,
    UserResponse,
)
from app.services.account_service import account_service
from app.services.auth import TokenClaims, require_admin
from app.services.project_service import project_service
from app.services.subscription import subscription_service
from app.services.usage_service import usage_service
from app.utils.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/stats", response_model=AdminStatsResponse)
async def get_admin_stats(
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await project_service.admin_stats(db)


@router.get("/analytics", response_model=AdminAnalyticsResponse)
async def get_admin_analytics(
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Site statistics plus AI generation totals and the plan distribution.
    """
    stats = await project_service.admin_stats(db)
    totals = await usage_service.get_totals(db)
    users_by_plan = await project_service.users_by_plan(db)
    return {**stats, **totals, "users_by_plan": users_by_plan}


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await account_service.list_all(db)


@router.patch("/users/{user_id}/role", response_model=UserResponse)
async def update_user_role(
    user_id: UUID,
    request: UpdateRoleRequest,
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    user = await account_service.update_role(db, user_id, request.role)
    if user is None:
        raise NotFoundError("User not found")

    logger.info(f"Admin {admin.id} set role of {user_id} to {request.role}")
    return user


@router.patch("/users/{user_id}/subscription", response_model=UserResponse)
async def update_user_subscription(
    user_id: UUID,
    request: UpdateSubscriptionRequest,
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """
    Set plan and status directly. Moving to the free plan resets usage.
    """
    user = await subscription_service.update_subscription(db, user_id, request.plan_type, request.status)
    if user is None:
        raise NotFoundError("User not found")

    logger.info(f"Admin {admin.id} set subscription of {user_id} to {request.plan_type}/{request.status}")
    return user


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    admin: TokenClaims = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    if str(user_id) == admin.id:
        raise ValidationError("Cannot delete yourself")

    if not await account_service.delete(db, user_id):
        raise NotFoundError("User not found")

    logger.info(f"Admin {admin.id} deleted user {user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
