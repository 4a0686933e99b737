"""API tests for Stripe checkout and webhooks. Stripe itself is never called."""

from datetime import datetime

import pytest
import stripe

from app.config import UNLIMITED_GENERATIONS
from app.services.stripe import stripe_service
from tests.conftest import bearer, make_user


@pytest.fixture
def webhook_events(monkeypatch):
    """Skip signature verification and hand the queued event to the handler."""
    events = []

    def construct_webhook_event(payload, signature):
        if signature == "bad":
            raise stripe.SignatureVerificationError("bad signature", signature)
        return events.pop(0)

    monkeypatch.setattr(stripe_service, "construct_webhook_event", construct_webhook_event)
    return events


async def post_event(client, events, event):
    events.append(event)
    return await client.post("/api/billing/webhook", content=b"{}", headers={"stripe-signature": "t=1,v1=x"})


async def test_checkout_returns_session_url(client, client_user, monkeypatch):
    calls = []

    async def create_checkout_session(user, plan_type, success_url, cancel_url, db):
        calls.append((user.id, plan_type))
        return "https://checkout.stripe.com/c/session"

    monkeypatch.setattr(stripe_service, "create_checkout_session", create_checkout_session)

    response = await client.post(
        "/api/billing/checkout",
        json={"planType": "enterprise", "successUrl": "https://app/ok", "cancelUrl": "https://app/no"},
        headers=bearer(client_user),
    )

    assert response.status_code == 200
    assert response.json() == {"url": "https://checkout.stripe.com/c/session"}
    assert calls == [(client_user.id, "enterprise")]


async def test_checkout_rejects_free_plan(client, client_user):
    response = await client.post(
        "/api/billing/checkout",
        json={"planType": "free", "successUrl": "https://app/ok", "cancelUrl": "https://app/no"},
        headers=bearer(client_user),
    )

    assert response.status_code == 400


async def test_webhook_requires_signature(client, setup_database):
    response = await client.post("/api/billing/webhook", content=b"{}")

    assert response.status_code == 400
    assert response.json()["message"] == "Missing stripe-signature header"


async def test_webhook_rejects_bad_signature(client, setup_database, webhook_events):
    response = await client.post("/api/billing/webhook", content=b"{}", headers={"stripe-signature": "bad"})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid signature"


async def test_checkout_completed_activates_plan(client, db, client_user, webhook_events):
    event = {
        "type": "checkout.session.completed",
        "data": {
            "object": {
                "id": "cs_1",
                "customer": "cus_1",
                "subscription": "sub_1",
                "metadata": {"user_id": str(client_user.id), "plan_type": "pro"},
            }
        },
    }

    response = await post_event(client, webhook_events, event)

    assert response.status_code == 200
    await db.refresh(client_user)
    assert client_user.plan_type == "pro"
    assert client_user.subscription_status == "active"
    assert client_user.ai_generations_limit == UNLIMITED_GENERATIONS
    assert client_user.stripe_customer_id == "cus_1"
    assert client_user.stripe_subscription_id == "sub_1"


@pytest.mark.parametrize(
    "stripe_status, expected",
    [("trialing", "active"), ("unpaid", "past_due"), ("past_due", "past_due"), ("canceled", "cancelled")],
)
async def test_subscription_updated_maps_status(client, db, webhook_events, stripe_status, expected):
    user = await make_user(db, plan_type="pro", subscription_status="active", stripe_customer_id="cus_9")
    event = {
        "type": "customer.subscription.updated",
        "data": {"object": {"id": "sub_9", "customer": "cus_9", "status": stripe_status, "metadata": {}}},
    }

    await post_event(client, webhook_events, event)

    await db.refresh(user)
    assert user.subscription_status == expected
    assert user.plan_type == "pro"


async def test_subscription_deleted_returns_to_free(client, db, webhook_events):
    user = await make_user(
        db,
        plan_type="enterprise",
        subscription_status="active",
        stripe_customer_id="cus_2",
        stripe_subscription_id="sub_2",
        ai_generations_used=50,
        ai_generations_limit=UNLIMITED_GENERATIONS,
    )
    event = {
        "type": "customer.subscription.deleted",
        "data": {"object": {"id": "sub_2", "customer": "cus_2", "metadata": {"user_id": str(user.id)}}},
    }

    await post_event(client, webhook_events, event)

    await db.refresh(user)
    assert user.plan_type == "free"
    assert user.subscription_status == "free"
    assert user.ai_generations_used == 0
    assert user.ai_generations_limit == 3
    assert user.stripe_subscription_id is None


async def test_invoice_payment_failed_marks_past_due(client, db, webhook_events):
    user = await make_user(db, plan_type="pro", subscription_status="active", stripe_customer_id="cus_3")
    event = {"type": "invoice.payment_failed", "data": {"object": {"id": "in_3", "customer": "cus_3"}}}

    await post_event(client, webhook_events, event)

    await db.refresh(user)
    assert user.subscription_status == "past_due"


async def test_unhandled_event_is_acknowledged(client, setup_database, webhook_events):
    response = await post_event(client, webhook_events, {"type": "customer.created", "data": {"object": {}}})

    assert response.status_code == 200
    assert response.json() == {"status": "success"}


async def test_subscription_period_end_is_stored_as_utc(client, db, webhook_events):
    user = await make_user(db, plan_type="pro", subscription_status="active", stripe_customer_id="cus_4")
    event = {
        "type": "customer.subscription.updated",
        "data": {
            "object": {
                "id": "sub_4",
                "customer": "cus_4",
                "status": "active",
                "current_period_end": 1767225600,
                "metadata": {},
            }
        },
    }

    await post_event(client, webhook_events, event)

    await db.refresh(user)
    assert user.subscription_end_date == datetime(2026, 1, 1, 0, 0, 0)
