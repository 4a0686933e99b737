"""Stripe billing: checkout sessions and subscription webhooks"""

from app.services.stripe.stripe_config import StripeSettings, stripe_settings
from app.services.stripe.stripe_service import StripeService, stripe_service

__all__ = ["StripeSettings", "stripe_settings", "StripeService", "stripe_service"]
