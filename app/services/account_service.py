"""Account store: row-level access to users"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserRole
from app.utils.exceptions import ConflictError

logger = logging.getLogger(__name__)


def as_uuid(value: UUID | str) -> UUID | None:
    """Parse an id from a token or path; None when it is not a UUID."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class AccountService:
    """CRUD for user rows. Email uniqueness is enforced by the database."""

    async def get(self, db: AsyncSession, user_id: UUID | str, fresh: bool = False) -> User | None:
        """Load a user. ``fresh`` re-reads the row even when the session already holds it."""
        key = as_uuid(user_id)
        if key is None:
            return None
        return await db.get(User, key, populate_existing=fresh)

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        result = await db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        email: str,
        password_hash: str,
        name: str,
        role: UserRole = UserRole.CLIENT,
    ) -> User:
        user = User(
            email=email.lower(),
            password=password_hash,
            name=name,
            role=role.value,
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictError("Email already registered")
        await db.refresh(user)

        logger.info(f"Created account {user.id}")
        return user

    async def list_all(self, db: AsyncSession) -> list[User]:
        result = await db.execute(select(User).order_by(User.created_at.desc()))
        return list(result.scalars().all())

    async def update_role(self, db: AsyncSession, user_id: UUID | str, role: str) -> User | None:
        user = await self.get(db, user_id)
        if user is None:
            return None

        user.role = UserRole(role).value
        await db.commit()
        await db.refresh(user)

        logger.info(f"Role for user {user.id} set to {user.role}")
        return user

    async def delete(self, db: AsyncSession, user_id: UUID | str) -> bool:
        user = await self.get(db, user_id)
        if user is None:
            return False

        await db.delete(user)
        await db.commit()

        logger.info(f"Deleted account {user_id}")
        return True


account_service = AccountService()
