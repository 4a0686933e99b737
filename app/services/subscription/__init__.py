"""Subscription policy and plan management"""

from app.services.subscription.policy import (
    AccountSnapshot,
    QuotaTable,
    SubscriptionDecision,
    SubscriptionPolicy,
    subscription_policy,
)
from app.services.subscription.subscription_service import (
    SubscriptionService,
    subscription_service,
)

__all__ = [
    "AccountSnapshot",
    "QuotaTable",
    "SubscriptionDecision",
    "SubscriptionPolicy",
    "subscription_policy",
    "SubscriptionService",
    "subscription_service",
]
