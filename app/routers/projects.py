"""Projects router: the caller's websites"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.models import Project, Template
from app.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from app.services.auth import TokenClaims, can_access, get_current_user
from app.services.project_service import project_service
from app.utils.exceptions import AccessDeniedError, NotFoundError

router = APIRouter(prefix="/projects", tags=["Projects"])

# Columns that may not be cleared through a PATCH
REQUIRED_FIELDS = ("name", "status")


async def _get_accessible_project(db: AsyncSession, project_id: UUID, user: TokenClaims) -> Project:
    project = await project_service.get(db, project_id)
    if project is None:
        raise NotFoundError("Project not found")
    if not can_access(user, project.user_id):
        raise AccessDeniedError("Access denied")
    return project


async def _check_template(db: AsyncSession, template_id: UUID | None) -> None:
    if template_id is not None and await db.get(Template, template_id) is None:
        raise NotFoundError("Template not found")


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the caller's projects, newest first.
    """
    return await project_service.list_for_user(db, user.id)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await _get_accessible_project(db, project_id, user)


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    request: ProjectCreate,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create a project owned by the caller.

    A ``templateId`` of ``"none"`` or an empty string is stored as no template.
    """
    await _check_template(db, request.template_id)
    return await project_service.create(db, user.id, request.model_dump())


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    request: ProjectUpdate,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Apply the fields present in the body; absent fields are left unchanged.
    """
    project = await _get_accessible_project(db, project_id, user)

    changes = request.model_dump(exclude_unset=True)
    for field in REQUIRED_FIELDS:
        if field in changes and changes[field] is None:
            del changes[field]
    if "template_id" in changes:
        await _check_template(db, changes["template_id"])

    return await project_service.update(db, project, changes)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID,
    user: TokenClaims = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    project = await _get_accessible_project(db, project_id, user)
    await project_service.delete(db, project)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
