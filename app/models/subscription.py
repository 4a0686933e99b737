"""Plan and subscription status enums stored on the user row"""

from enum import Enum as PyEnum


class PlanType(str, PyEnum):
    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class SubscriptionStatus(str, PyEnum):
    FREE = "free"  # Never activated a paid subscription
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELLED = "cancelled"


PAID_PLANS = frozenset({PlanType.PRO.value, PlanType.ENTERPRISE.value})
BLOCKED_STATUSES = frozenset({SubscriptionStatus.PAST_DUE.value, SubscriptionStatus.CANCELLED.value})
