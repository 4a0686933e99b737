"""Billing schemas"""

from typing import Literal

from app.schemas.common import CamelModel


class CheckoutRequest(CamelModel):
    plan_type: Literal["pro", "enterprise"] = "pro"
    success_url: str
    cancel_url: str


class CheckoutResponse(CamelModel):
    url: str
