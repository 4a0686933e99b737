"""Billing router for Stripe integration"""

import logging

import stripe
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.schemas.billing import CheckoutRequest, CheckoutResponse
from app.services.account_service import account_service
from app.services.auth import TokenClaims, get_current_user
from app.services.stripe import stripe_service
from app.utils.exceptions import (
    InternalError,
    NotFoundError,
    ProviderUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/billing", tags=["Billing"])


@router.post("/checkout", response_model=CheckoutResponse)
async def create_checkout(
    request: CheckoutRequest,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a Stripe Checkout session for the pro or enterprise plan.

    The plan is only applied once Stripe reports the checkout as completed.
    """
    account = await account_service.get(db, user.id)
    if account is None:
        raise NotFoundError("User not found")

    try:
        url = await stripe_service.create_checkout_session(
            account,
            request.plan_type,
            request.success_url,
            request.cancel_url,
            db,
        )
    except ValueError as e:
        logger.error(f"Billing not configured: {e}")
        raise ProviderUnavailableError("Billing is not available right now")
    except stripe.StripeError as e:
        logger.error(f"Stripe checkout failed for user {user.id}: {e}", exc_info=True)
        raise ProviderUnavailableError("Payment provider error. Please try again.")

    return CheckoutResponse(url=url)


@router.post("/webhook")
async def stripe_webhook(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """
    Stripe webhook endpoint.

    Maps subscription lifecycle events onto the account's plan and status.
    """
    payload = await request.body()
    signature = request.headers.get("stripe-signature")

    if not signature:
        raise ValidationError("Missing stripe-signature header")

    try:
        event = stripe_service.construct_webhook_event(payload, signature)
    except ValueError:
        raise ValidationError("Invalid payload")
    except stripe.SignatureVerificationError:
        raise ValidationError("Invalid signature")

    logger.info(f"Received Stripe webhook: {event['type']}")

    try:
        await stripe_service.handle_event(event, db)
    except Exception as e:
        logger.error(f"Error handling webhook {event['type']}: {e}", exc_info=True)
        raise InternalError("Webhook processing error")

    return {"status": "success"}
