"""Stripe configuration settings"""

from functools import lru_cache

from pydantic_settings import BaseSettings


class StripeSettings(BaseSettings):
    """Stripe configuration loaded from environment variables"""

    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_price_pro: str = ""  # Price ID for the pro monthly subscription
    stripe_price_enterprise: str = ""  # Price ID for the enterprise monthly subscription

    class Config:
        env_file = ".env"
        extra = "ignore"

    def price_for(self, plan_type: str) -> str:
        return {
            "pro": self.stripe_price_pro,
            "enterprise": self.stripe_price_enterprise,
        }.get(plan_type, "")


@lru_cache
def get_stripe_settings() -> StripeSettings:
    return StripeSettings()


stripe_settings = get_stripe_settings()
