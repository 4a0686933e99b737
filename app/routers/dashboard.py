"""Dashboard statistics router"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.schemas.user import UserStatsResponse
from app.services.auth import TokenClaims, get_current_user
from app.services.project_service import project_service

router = APIRouter(tags=["Dashboard"])


@router.get("/stats", response_model=UserStatsResponse)
async def get_stats(
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Project and storage totals for the caller's dashboard.
    """
    return await project_service.user_stats(db, user.id)
