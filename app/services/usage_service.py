"""Usage ledger: per-account AI generation counter and generation log."""

import logging
import math
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.ai_generation import AiGeneration
from app.models.subscription import SubscriptionStatus
from app.models.user import User
from app.services.account_service import account_service, as_uuid
from app.services.subscription.policy import has_paid_plan, subscription_policy
from app.utils.constants import TOKENS_PER_PROMPT_CHAR

logger = logging.getLogger(__name__)


class UsageService:
    """Reads and charges the ``ai_generations_used`` counter."""

    async def get_usage(self, db: AsyncSession, user_id: UUID | str) -> dict:
        """Current usage as ``{used, limit, remaining}``."""
        user = await account_service.get(db, user_id, fresh=True)
        if user is None:
            limit = subscription_policy.quotas.free
            return {"used": 0, "limit": limit, "remaining": limit}

        used = user.ai_generations_used
        limit = user.ai_generations_limit
        return {"used": used, "limit": limit, "remaining": max(0, limit - used)}

    async def try_consume(self, db: AsyncSession, user_id: UUID | str) -> bool:
        """Charge one generation. Returns False when the account cannot be charged.

        Paid plans with an ``active`` status are not metered. Everyone else is
        charged through a conditional UPDATE that only succeeds while
        ``used < limit``, so concurrent requests cannot push usage past the
        limit. The decision is made on the stored row, not on a copy the
        session loaded before the provider call.
        """
        user = await account_service.get(db, user_id, fresh=True)
        if user is None:
            return False

        # Only "active" unlocks unmetered use here; a paid plan in any other
        # status is metered against its limit like a free account.
        if has_paid_plan(user.plan_type) and user.subscription_status == SubscriptionStatus.ACTIVE.value:
            return True

        result = await db.execute(
            update(User)
            .where(
                User.id == user.id,
                User.ai_generations_used < User.ai_generations_limit,
            )
            .values(ai_generations_used=User.ai_generations_used + 1)
            .execution_options(synchronize_session=False)
        )
        await db.commit()

        if result.rowcount != 1:
            logger.info(f"Quota exhausted for user {user.id} at consume time")
            return False

        await db.refresh(user)
        logger.debug(
            f"Charged one generation to user {user.id}: "
            f"{user.ai_generations_used}/{user.ai_generations_limit}"
        )
        return True

    async def log_generation(
        self,
        db: AsyncSession,
        user_id: UUID | str,
        prompt: str,
        result: str,
        tokens_used: int,
    ) -> AiGeneration:
        generation = AiGeneration(
            user_id=as_uuid(user_id),
            prompt=prompt,
            result=result,
            tokens_used=tokens_used,
        )
        db.add(generation)
        await db.commit()
        await db.refresh(generation)
        return generation

    async def get_generation_history(
        self,
        db: AsyncSession,
        user_id: UUID | str,
        limit: int,
    ) -> list[AiGeneration]:
        result = await db.execute(
            select(AiGeneration)
            .where(AiGeneration.user_id == as_uuid(user_id))
            .order_by(AiGeneration.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def get_totals(self, db: AsyncSession) -> dict:
        """Generation count and token sum across all accounts."""
        result = await db.execute(
            select(func.count(AiGeneration.id), func.coalesce(func.sum(AiGeneration.tokens_used), 0))
        )
        count, tokens = result.one()
        return {"total_generations": count, "total_tokens_used": int(tokens)}

    @staticmethod
    def estimate_tokens(prompt: str) -> int:
        """Placeholder cost model, not a tokenizer."""
        return math.ceil(len(prompt) * TOKENS_PER_PROMPT_CHAR)


# Global instance
usage_service = UsageService()
