"""Subscription status lookups and plan changes"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.services.account_service import account_service
from app.services.subscription.policy import (
    AccountSnapshot,
    SubscriptionDecision,
    SubscriptionPolicy,
    subscription_policy,
)

logger = logging.getLogger(__name__)


class SubscriptionService:
    def __init__(self, policy: SubscriptionPolicy):
        self.policy = policy

    def snapshot_for(self, user: User | None) -> AccountSnapshot:
        if user is None:
            return self.policy.default_snapshot()
        return AccountSnapshot.from_user(user)

    def decide(self, user: User | None) -> SubscriptionDecision:
        return self.policy.evaluate(self.snapshot_for(user))

    async def get_status(self, db: AsyncSession, user_id: UUID | str) -> SubscriptionDecision:
        user = await account_service.get(db, user_id, fresh=True)
        return self.decide(user)

    async def update_subscription(
        self,
        db: AsyncSession,
        user_id: UUID | str,
        plan_type: str,
        status: str,
    ) -> User | None:
        """Apply a plan/status change. Returns None when the account is missing."""
        user = await account_service.get(db, user_id)
        if user is None:
            return None

        changes = self.policy.plan_change(plan_type, status)
        for field, value in changes.items():
            setattr(user, field, value)

        await db.commit()
        await db.refresh(user)

        logger.info(
            f"Subscription for user {user.id} set to plan={plan_type} status={status} "
            f"(limit={user.ai_generations_limit}, used={user.ai_generations_used})"
        )
        return user


subscription_service = SubscriptionService(subscription_policy)
