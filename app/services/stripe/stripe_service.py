"""Stripe service for plan checkout and subscription webhooks"""

import asyncio
import logging
from datetime import datetime, timezone

import stripe
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.subscription import PlanType, SubscriptionStatus
from app.models.user import User
from app.services.account_service import account_service
from app.services.stripe.stripe_config import stripe_settings
from app.services.subscription import subscription_service

logger = logging.getLogger(__name__)

# Stripe subscription status -> stored subscription status
STRIPE_STATUS_MAP = {
    "active": SubscriptionStatus.ACTIVE.value,
    "trialing": SubscriptionStatus.ACTIVE.value,
    "past_due": SubscriptionStatus.PAST_DUE.value,
    "unpaid": SubscriptionStatus.PAST_DUE.value,
    "canceled": SubscriptionStatus.CANCELLED.value,
}


class StripeService:
    """Service for Stripe payment operations"""

    def __init__(self):
        self._initialized = False

    def _ensure_initialized(self):
        """Lazy initialization of Stripe API key"""
        if not self._initialized:
            if not stripe_settings.stripe_secret_key:
                raise ValueError("STRIPE_SECRET_KEY not configured")
            stripe.api_key = stripe_settings.stripe_secret_key
            self._initialized = True

    @staticmethod
    def _get_attr(obj, key: str, default=None):
        """Read a field from a dict or StripeObject"""
        if isinstance(obj, dict):
            return obj.get(key, default)
        return getattr(obj, key, default)

    async def get_or_create_customer(self, user: User, db: AsyncSession) -> str:
        """Return the account's Stripe customer id, creating the customer once"""
        self._ensure_initialized()

        if user.stripe_customer_id:
            return user.stripe_customer_id

        customer = await asyncio.to_thread(
            stripe.Customer.create,
            email=user.email,
            name=user.name,
            metadata={"user_id": str(user.id)},
        )

        user.stripe_customer_id = customer.id
        await db.commit()
        logger.info(f"Created Stripe customer {customer.id} for user {user.id}")

        return customer.id

    async def create_checkout_session(
        self,
        user: User,
        plan_type: str,
        success_url: str,
        cancel_url: str,
        db: AsyncSession,
    ) -> str:
        """Create a Stripe Checkout session for a paid plan; returns its URL"""
        self._ensure_initialized()

        price_id = stripe_settings.price_for(plan_type)
        if not price_id:
            raise ValueError(f"STRIPE_PRICE_{plan_type.upper()} not configured")

        customer_id = await self.get_or_create_customer(user, db)
        metadata = {"user_id": str(user.id), "plan_type": plan_type}

        session = await asyncio.to_thread(
            stripe.checkout.Session.create,
            customer=customer_id,
            mode="subscription",
            line_items=[{"price": price_id, "quantity": 1}],
            success_url=success_url,
            cancel_url=cancel_url,
            metadata=metadata,
            subscription_data={"metadata": metadata},
        )

        logger.info(f"Created checkout session {session.id} for user {user.id} ({plan_type})")
        return session.url

    def construct_webhook_event(self, payload: bytes, signature: str) -> stripe.Event:
        """Construct and verify webhook event"""
        self._ensure_initialized()

        if not stripe_settings.stripe_webhook_secret:
            raise ValueError("STRIPE_WEBHOOK_SECRET not configured")

        return stripe.Webhook.construct_event(
            payload,
            signature,
            stripe_settings.stripe_webhook_secret,
        )

    async def _find_user(self, obj, db: AsyncSession) -> User | None:
        """Resolve the account from metadata.user_id, falling back to the customer id"""
        metadata = self._get_attr(obj, "metadata") or {}
        user_id = metadata.get("user_id")
        if user_id:
            user = await account_service.get(db, user_id)
            if user is not None:
                return user

        customer_id = self._get_attr(obj, "customer")
        if not customer_id:
            return None
        result = await db.execute(select(User).where(User.stripe_customer_id == customer_id))
        return result.scalar_one_or_none()

    async def handle_event(self, event, db: AsyncSession) -> None:
        """Dispatch a verified webhook event"""
        event_type = self._get_attr(event, "type")
        obj = event["data"]["object"]

        handlers = {
            "checkout.session.completed": self.handle_checkout_completed,
            "customer.subscription.updated": self.handle_subscription_updated,
            "customer.subscription.deleted": self.handle_subscription_deleted,
            "invoice.payment_failed": self.handle_invoice_payment_failed,
        }
        handler = handlers.get(event_type)
        if handler is None:
            logger.debug(f"Unhandled webhook event type: {event_type}")
            return
        await handler(obj, db)

    async def handle_checkout_completed(self, session, db: AsyncSession) -> None:
        """checkout.session.completed: the purchased plan becomes active"""
        user = await self._find_user(session, db)
        if user is None:
            logger.error(f"No account for checkout session {self._get_attr(session, 'id')}")
            return

        metadata = self._get_attr(session, "metadata") or {}
        plan_type = metadata.get("plan_type") or PlanType.PRO.value

        user.stripe_subscription_id = self._get_attr(session, "subscription")
        customer_id = self._get_attr(session, "customer")
        if customer_id:
            user.stripe_customer_id = customer_id

        await subscription_service.update_subscription(
            db, user.id, plan_type, SubscriptionStatus.ACTIVE.value
        )
        logger.info(f"Activated {plan_type} plan for user {user.id}")

    async def handle_subscription_updated(self, subscription, db: AsyncSession) -> None:
        """customer.subscription.updated: mirror Stripe's status onto the account"""
        user = await self._find_user(subscription, db)
        if user is None:
            logger.warning(f"No account for subscription {self._get_attr(subscription, 'id')}")
            return

        stripe_status = self._get_attr(subscription, "status")
        status = STRIPE_STATUS_MAP.get(stripe_status)
        if status is None:
            logger.info(f"Ignoring Stripe subscription status {stripe_status} for user {user.id}")
            return

        period_end = self._get_attr(subscription, "current_period_end")
        if period_end:
            user.subscription_end_date = datetime.fromtimestamp(period_end, tz=timezone.utc).replace(tzinfo=None)

        metadata = self._get_attr(subscription, "metadata") or {}
        plan_type = metadata.get("plan_type") or user.plan_type

        await subscription_service.update_subscription(db, user.id, plan_type, status)

    async def handle_subscription_deleted(self, subscription, db: AsyncSession) -> None:
        """customer.subscription.deleted: back to the free plan"""
        user = await self._find_user(subscription, db)
        if user is None:
            logger.warning(f"No account for subscription {self._get_attr(subscription, 'id')}")
            return

        user.stripe_subscription_id = None
        user.subscription_end_date = None
        await subscription_service.update_subscription(
            db, user.id, PlanType.FREE.value, SubscriptionStatus.FREE.value
        )
        logger.info(f"Subscription ended for user {user.id}")

    async def handle_invoice_payment_failed(self, invoice, db: AsyncSession) -> None:
        """invoice.payment_failed: the account becomes past_due"""
        user = await self._find_user(invoice, db)
        if user is None:
            logger.warning(f"No account for customer {self._get_attr(invoice, 'customer')}")
            return

        await subscription_service.update_subscription(
            db, user.id, user.plan_type, SubscriptionStatus.PAST_DUE.value
        )
        logger.warning(f"Payment failed for user {user.id}")


stripe_service = StripeService()
