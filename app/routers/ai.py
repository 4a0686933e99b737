"""AI router: usage, subscription status and website generation"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.schemas.ai import (
    AiGenerationResponse,
    AiUsageResponse,
    GenerateRequest,
    GenerateResponse,
    RegenerateSectionRequest,
    SubscriptionSnapshot,
)
from app.services.ai import generation_service
from app.services.auth import TokenClaims, get_current_user
from app.services.subscription import subscription_service
from app.services.usage_service import usage_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["AI"])


@router.get("/ai/usage", response_model=AiUsageResponse)
async def get_ai_usage(
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Generation usage merged with the subscription snapshot.
    """
    usage = await usage_service.get_usage(db, user.id)
    decision = await subscription_service.get_status(db, user.id)
    return AiUsageResponse(
        **usage,
        plan_type=decision.plan_type,
        status=decision.status,
        is_blocked=decision.is_blocked,
        can_use_ai=decision.can_use_ai,
    )


@router.get("/subscription", response_model=SubscriptionSnapshot)
async def get_subscription(
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    decision = await subscription_service.get_status(db, user.id)
    return decision.as_dict()


@router.post("/ai/generate", response_model=GenerateResponse)
async def generate_website(
    request: GenerateRequest,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Generate a complete website from a prompt.

    Charges one generation, and only after a usable result came back.
    Returns 402 for past-due or cancelled subscriptions, 403 when out of
    credits and 503 when the AI provider is unavailable.
    """
    return await generation_service.generate(db, user, request)


@router.post("/ai/regenerate-section", response_model=GenerateResponse)
async def regenerate_section(
    request: RegenerateSectionRequest,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Rewrite one section of an existing website. Same gating and charging as generation.
    """
    return await generation_service.regenerate_section(db, user, request)


@router.get("/ai/generations", response_model=list[AiGenerationResponse])
async def list_generations(
    limit: int = Query(default=20, ge=1, le=100),
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    The caller's most recent generations, newest first.
    """
    return await usage_service.get_generation_history(db, user.id, limit)
