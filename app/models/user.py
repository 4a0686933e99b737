"""User model: credentials, role, plan and AI usage counters"""

import uuid
from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.db.database import Base
from app.models.subscription import PlanType, SubscriptionStatus


class UserRole(str, PyEnum):
    ADMIN = "ADMIN"
    CLIENT = "CLIENT"


class User(Base):
    """Registered account. Plan fields gate access to AI generation."""

    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    name = Column(String(255), nullable=False)
    role = Column(String(10), default=UserRole.CLIENT.value, nullable=False)
    avatar_url = Column(String(500), nullable=True)

    ai_generations_used = Column(Integer, default=0, nullable=False)
    ai_generations_limit = Column(Integer, default=3, nullable=False)
    plan_type = Column(String(20), default=PlanType.FREE.value, nullable=False)
    subscription_status = Column(String(20), default=SubscriptionStatus.FREE.value, nullable=False)

    stripe_customer_id = Column(String(100), nullable=True, index=True)
    stripe_subscription_id = Column(String(100), nullable=True, index=True)
    subscription_end_date = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    projects = relationship("Project", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    media = relationship("Media", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    ai_generations = relationship("AiGeneration", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', plan='{self.plan_type}')>"
