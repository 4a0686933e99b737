"""API tests for the admin endpoints."""

import uuid

from app.config import UNLIMITED_GENERATIONS
from app.models import AiGeneration, Project
from tests.conftest import bearer, make_user


async def test_admin_routes_reject_clients(client, client_user):
    response = await client.get("/api/admin/stats", headers=bearer(client_user))

    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"


async def test_admin_stats(client, db, client_user, admin_user):
    db.add_all(
        [
            Project(user_id=client_user.id, name="One", status="published"),
            Project(user_id=client_user.id, name="Two"),
        ]
    )
    await db.commit()

    response = await client.get("/api/admin/stats", headers=bearer(admin_user))

    assert response.json() == {
        "totalUsers": 2,
        "totalProjects": 2,
        "publishedSites": 1,
        "activeUsers": 1,
    }


async def test_admin_analytics(client, db, client_user, admin_user):
    db.add(AiGeneration(user_id=client_user.id, prompt="x", result="{}", tokens_used=9))
    await db.commit()

    response = await client.get("/api/admin/analytics", headers=bearer(admin_user))

    data = response.json()
    assert data["totalGenerations"] == 1
    assert data["totalTokensUsed"] == 9
    assert data["usersByPlan"] == {"free": 2}


async def test_list_users_hides_password(client, client_user, admin_user):
    response = await client.get("/api/admin/users", headers=bearer(admin_user))

    assert response.status_code == 200
    users = response.json()
    assert {u["email"] for u in users} == {client_user.email, admin_user.email}
    assert all("password" not in u for u in users)


async def test_update_role(client, client_user, admin_user):
    response = await client.patch(
        f"/api/admin/users/{client_user.id}/role",
        json={"role": "ADMIN"},
        headers=bearer(admin_user),
    )

    assert response.status_code == 200
    assert response.json()["role"] == "ADMIN"


async def test_update_role_for_missing_user(client, admin_user):
    response = await client.patch(
        f"/api/admin/users/{uuid.uuid4()}/role",
        json={"role": "ADMIN"},
        headers=bearer(admin_user),
    )

    assert response.status_code == 404


async def test_upgrade_to_pro_keeps_usage(client, db, admin_user):
    user = await make_user(db, email="payer@example.com", ai_generations_used=3)

    response = await client.patch(
        f"/api/admin/users/{user.id}/subscription",
        json={"planType": "pro", "status": "active"},
        headers=bearer(admin_user),
    )

    data = response.json()
    assert data["planType"] == "pro"
    assert data["subscriptionStatus"] == "active"
    assert data["aiGenerationsLimit"] == UNLIMITED_GENERATIONS
    assert data["aiGenerationsUsed"] == 3


async def test_downgrade_to_free_resets_usage(client, db, admin_user):
    user = await make_user(db, email="leaver@example.com", plan_type="pro", subscription_status="active", ai_generations_used=40, ai_generations_limit=UNLIMITED_GENERATIONS)

    response = await client.patch(
        f"/api/admin/users/{user.id}/subscription",
        json={"planType": "free", "status": "cancelled"},
        headers=bearer(admin_user),
    )

    data = response.json()
    assert data["aiGenerationsUsed"] == 0
    assert data["aiGenerationsLimit"] == 3


async def test_invalid_subscription_values_rejected(client, client_user, admin_user):
    response = await client.patch(
        f"/api/admin/users/{client_user.id}/subscription",
        json={"planType": "gold", "status": "active"},
        headers=bearer(admin_user),
    )

    assert response.status_code == 400


async def test_admin_cannot_delete_self(client, admin_user):
    response = await client.delete(f"/api/admin/users/{admin_user.id}", headers=bearer(admin_user))

    assert response.status_code == 400
    assert response.json()["message"] == "Cannot delete yourself"


async def test_delete_user(client, db, client_user, admin_user):
    db.add(Project(user_id=client_user.id, name="Goes too"))
    await db.commit()

    response = await client.delete(f"/api/admin/users/{client_user.id}", headers=bearer(admin_user))
    again = await client.delete(f"/api/admin/users/{client_user.id}", headers=bearer(admin_user))

    assert response.status_code == 204
    assert again.status_code == 404
