"""Subscription policy: pure decisions over an account's plan fields.

Nothing here touches the database. ``SubscriptionService`` loads the account,
hands a snapshot to the policy and persists whatever the policy decides.
"""

from dataclasses import dataclass

from app.config import Settings, settings
from app.models.subscription import (
    BLOCKED_STATUSES,
    PAID_PLANS,
    PlanType,
    SubscriptionStatus,
)


@dataclass(frozen=True)
class AccountSnapshot:
    plan_type: str
    subscription_status: str
    ai_generations_used: int
    ai_generations_limit: int

    @classmethod
    def from_user(cls, user) -> "AccountSnapshot":
        return cls(
            plan_type=user.plan_type,
            subscription_status=user.subscription_status,
            ai_generations_used=user.ai_generations_used,
            ai_generations_limit=user.ai_generations_limit,
        )


@dataclass(frozen=True)
class SubscriptionDecision:
    plan_type: str
    status: str
    is_blocked: bool
    can_use_ai: bool

    def as_dict(self) -> dict:
        return {
            "planType": self.plan_type,
            "status": self.status,
            "isBlocked": self.is_blocked,
            "canUseAi": self.can_use_ai,
        }


@dataclass(frozen=True)
class QuotaTable:
    """AI generation limit per plan"""

    free: int
    pro: int
    enterprise: int

    @classmethod
    def from_settings(cls, config: Settings) -> "QuotaTable":
        return cls(
            free=config.free_ai_generations,
            pro=config.paid_ai_generations,
            enterprise=config.paid_ai_generations,
        )

    def limit_for(self, plan_type: str) -> int:
        return getattr(self, PlanType(plan_type).value)


def is_blocked(status: str) -> bool:
    return status in BLOCKED_STATUSES


def has_paid_plan(plan_type: str) -> bool:
    return plan_type in PAID_PLANS


def has_credits(snapshot: AccountSnapshot) -> bool:
    return snapshot.ai_generations_used < snapshot.ai_generations_limit


class SubscriptionPolicy:
    def __init__(self, quotas: QuotaTable):
        self.quotas = quotas

    def default_snapshot(self) -> AccountSnapshot:
        """Snapshot used when the account row does not exist."""
        return AccountSnapshot(
            plan_type=PlanType.FREE.value,
            subscription_status=SubscriptionStatus.FREE.value,
            ai_generations_used=0,
            ai_generations_limit=self.quotas.free,
        )

    def evaluate(self, snapshot: AccountSnapshot) -> SubscriptionDecision:
        blocked = is_blocked(snapshot.subscription_status)
        can_use_ai = not blocked and (has_credits(snapshot) or has_paid_plan(snapshot.plan_type))
        return SubscriptionDecision(
            plan_type=snapshot.plan_type,
            status=snapshot.subscription_status,
            is_blocked=blocked,
            can_use_ai=can_use_ai,
        )

    def plan_change(self, plan_type: str, status: str) -> dict:
        """Column updates for moving an account to ``plan_type``/``status``.

        Downgrading to free restarts the free quota; other changes keep the
        historical usage count.
        """
        plan = PlanType(plan_type)
        SubscriptionStatus(status)

        changes = {
            "plan_type": plan.value,
            "subscription_status": status,
            "ai_generations_limit": self.quotas.limit_for(plan.value),
        }
        if plan is PlanType.FREE:
            changes["ai_generations_used"] = 0
        return changes


subscription_policy = SubscriptionPolicy(QuotaTable.from_settings(settings))
