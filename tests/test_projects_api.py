"""API tests for projects and templates."""

import uuid
from datetime import datetime, timedelta

from app.models import Project, Template
from tests.conftest import bearer, make_user


async def create_template(db, name="Starter", **fields) -> Template:
    template = Template(name=name, **fields)
    db.add(template)
    await db.commit()
    await db.refresh(template)
    return template


async def test_create_project(client, client_user):
    response = await client.post(
        "/api/projects",
        json={"name": "My Site", "description": "Portfolio", "htmlContent": "<p>hi</p>"},
        headers=bearer(client_user),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "My Site"
    assert data["status"] == "draft"
    assert data["userId"] == str(client_user.id)
    assert data["templateId"] is None


async def test_template_id_none_is_stored_as_null(client, client_user):
    response = await client.post(
        "/api/projects",
        json={"name": "Blank", "templateId": "none"},
        headers=bearer(client_user),
    )

    assert response.status_code == 201
    assert response.json()["templateId"] is None


async def test_create_project_with_template(client, db, client_user):
    template = await create_template(db)

    response = await client.post(
        "/api/projects",
        json={"name": "From template", "templateId": str(template.id)},
        headers=bearer(client_user),
    )

    assert response.status_code == 201
    assert response.json()["templateId"] == str(template.id)


async def test_create_project_with_unknown_template_returns_404(client, client_user):
    response = await client.post(
        "/api/projects",
        json={"name": "Broken", "templateId": str(uuid.uuid4())},
        headers=bearer(client_user),
    )

    assert response.status_code == 404


async def test_list_returns_only_own_projects_newest_first(client, db, client_user):
    other = await make_user(db, email="other@example.com")
    now = datetime.utcnow()
    db.add_all(
        [
            Project(user_id=client_user.id, name="Older", created_at=now - timedelta(days=1)),
            Project(user_id=client_user.id, name="Newer", created_at=now),
            Project(user_id=other.id, name="Theirs"),
        ]
    )
    await db.commit()

    response = await client.get("/api/projects", headers=bearer(client_user))

    assert [p["name"] for p in response.json()] == ["Newer", "Older"]


async def test_other_users_project_is_access_denied(client, db, client_user):
    other = await make_user(db, email="other@example.com")
    project = Project(user_id=other.id, name="Theirs")
    db.add(project)
    await db.commit()

    response = await client.get(f"/api/projects/{project.id}", headers=bearer(client_user))

    assert response.status_code == 403
    assert response.json()["message"] == "Access denied"


async def test_admin_can_read_any_project(client, db, client_user, admin_user):
    project = Project(user_id=client_user.id, name="Client site")
    db.add(project)
    await db.commit()

    response = await client.get(f"/api/projects/{project.id}", headers=bearer(admin_user))

    assert response.status_code == 200


async def test_missing_project_returns_404(client, client_user):
    response = await client.get(f"/api/projects/{uuid.uuid4()}", headers=bearer(client_user))

    assert response.status_code == 404
    assert response.json()["message"] == "Project not found"


async def test_patch_updates_only_sent_fields(client, db, client_user):
    project = Project(user_id=client_user.id, name="Site", description="Keep me")
    db.add(project)
    await db.commit()

    response = await client.patch(
        f"/api/projects/{project.id}",
        json={"status": "published", "name": None},
        headers=bearer(client_user),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "published"
    assert data["name"] == "Site"
    assert data["description"] == "Keep me"


async def test_delete_project(client, db, client_user):
    project = Project(user_id=client_user.id, name="Doomed")
    db.add(project)
    await db.commit()

    response = await client.delete(f"/api/projects/{project.id}", headers=bearer(client_user))
    follow_up = await client.get(f"/api/projects/{project.id}", headers=bearer(client_user))

    assert response.status_code == 204
    assert follow_up.status_code == 404


async def test_templates_are_public(client, db):
    await create_template(db, name="Bakery", category="restaurant")

    response = await client.get("/api/templates")

    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == ["Bakery"]


async def test_get_template(client, db):
    template = await create_template(db, name="Agency", is_premium=True)

    response = await client.get(f"/api/templates/{template.id}")

    assert response.json()["isPremium"] is True


async def test_missing_template_returns_404(client, setup_database):
    response = await client.get(f"/api/templates/{uuid.uuid4()}")

    assert response.status_code == 404
