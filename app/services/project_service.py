"""Project rows and per-user / site-wide project statistics"""

import logging
from uuid import UUID

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.media import Media
from app.models.project import Project, ProjectStatus
from app.models.user import User
from app.services.account_service import as_uuid

logger = logging.getLogger(__name__)


def format_storage(size_bytes: int) -> str:
    """Human readable storage figure, always in MB."""
    if not size_bytes:
        return "0 MB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


class ProjectService:
    async def list_for_user(self, db: AsyncSession, user_id: UUID | str) -> list[Project]:
        result = await db.execute(
            select(Project)
            .where(Project.user_id == as_uuid(user_id))
            .order_by(Project.created_at.desc())
        )
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, project_id: UUID | str) -> Project | None:
        key = as_uuid(project_id)
        if key is None:
            return None
        return await db.get(Project, key)

    async def create(self, db: AsyncSession, user_id: UUID | str, fields: dict) -> Project:
        project = Project(user_id=as_uuid(user_id), **fields)
        db.add(project)
        await db.commit()
        await db.refresh(project)

        logger.info(f"Created project {project.id} for user {user_id}")
        return project

    async def update(self, db: AsyncSession, project: Project, changes: dict) -> Project:
        for field, value in changes.items():
            setattr(project, field, value)
        await db.commit()
        await db.refresh(project)
        return project

    async def delete(self, db: AsyncSession, project: Project) -> None:
        await db.delete(project)
        await db.commit()
        logger.info(f"Deleted project {project.id}")

    async def user_stats(self, db: AsyncSession, user_id: UUID | str) -> dict:
        key = as_uuid(user_id)
        result = await db.execute(
            select(
                func.count(Project.id),
                func.count(Project.id).filter(Project.status == ProjectStatus.PUBLISHED.value),
                func.count(Project.template_id),
            ).where(Project.user_id == key)
        )
        total, published, with_template = result.one()

        storage = await db.execute(
            select(func.coalesce(func.sum(Media.size_bytes), 0)).where(Media.user_id == key)
        )

        return {
            "total_projects": total,
            "published_sites": published,
            "templates_used": with_template,
            "storage_used": format_storage(int(storage.scalar())),
        }

    async def admin_stats(self, db: AsyncSession) -> dict:
        """Site-wide counts. Active users are accounts owning at least one project."""
        total_users = await db.scalar(select(func.count(User.id)))
        projects = await db.execute(
            select(
                func.count(Project.id),
                func.count(Project.id).filter(Project.status == ProjectStatus.PUBLISHED.value),
                func.count(distinct(Project.user_id)),
            )
        )
        total_projects, published, active_users = projects.one()

        return {
            "total_users": total_users or 0,
            "total_projects": total_projects,
            "published_sites": published,
            "active_users": active_users,
        }

    async def users_by_plan(self, db: AsyncSession) -> dict[str, int]:
        result = await db.execute(select(User.plan_type, func.count(User.id)).group_by(User.plan_type))
        return {plan: count for plan, count in result.all()}


project_service = ProjectService()
