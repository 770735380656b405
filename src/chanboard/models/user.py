# src/chanboard/models/user.py
"""SQLAlchemy models for staff accounts and their login sessions."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    DateTime,
    Enum,
    ForeignKey,
    LargeBinary,
    PrimaryKeyConstraint,
    String,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chanboard.db.session import Base
from chanboard.db.time import utcnow
from chanboard.db.types import NAME_LENGTH


class PrivilegeLevel(enum.Enum):
    """Closed set of staff roles."""

    ADMIN = "admin"
    MOD = "mod"


privilege_level_type = Enum(
    PrivilegeLevel,
    name="privilege_level",
    values_callable=lambda levels: [level.value for level in levels],
    create_constraint=True,
    validate_strings=True,
)


class User(Base):
    """Staff account."""

    __tablename__ = "users"
    __table_args__ = (PrimaryKeyConstraint("id", "name"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(NAME_LENGTH), unique=True, nullable=False)
    # Opaque credential hash, see chanboard.core.security.
    password: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    level: Mapped[PrivilegeLevel] = mapped_column(privilege_level_type, nullable=False)

    sessions: Mapped[list[UserSession]] = relationship(
        "UserSession",
        back_populates="user",
        primaryjoin="User.id == UserSession.uid",
    )

    @property
    def is_admin(self) -> bool:
        match self.level:
            case PrivilegeLevel.ADMIN:
                return True
            case PrivilegeLevel.MOD:
                return False


class UserSession(Base):
    """Server-issued credential tying a user to a login event."""

    __tablename__ = "sessions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    uid: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id"), nullable=False)
    logged_in_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, server_default=func.now()
    )

    user: Mapped[User] = relationship(
        "User",
        back_populates="sessions",
        primaryjoin="User.id == UserSession.uid",
    )
