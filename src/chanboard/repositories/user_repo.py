"""CRUD-style helpers for staff users and their sessions."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from chanboard.core.security import hash_password
from chanboard.models.user import PrivilegeLevel, User, UserSession

__all__ = ["SessionRepository", "UserRepository"]

logger = logging.getLogger(__name__)


class UserRepository:
    """Database access for staff accounts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, name: str, password: str, level: PrivilegeLevel | str) -> User:
        """Persist a new user with a hashed password.

        Raises:
            ValueError: If ``level`` is not a known privilege level.
        """
        user = User(
            id=uuid.uuid4(),
            name=name,
            password=hash_password(password),
            level=PrivilegeLevel(level),
        )
        self.session.add(user)
        self.session.flush()
        logger.info("Created %s account %r", user.level.value, user.name)
        return user

    def get(self, user_id: uuid.UUID) -> User | None:
        return self.session.scalars(select(User).where(User.id == user_id)).first()

    def get_by_name(self, name: str) -> User | None:
        return self.session.scalars(select(User).where(User.name == name)).first()


class SessionRepository:
    """Database access for login sessions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, user: User) -> UserSession:
        """Open a new session for ``user``."""
        login = UserSession(id=uuid.uuid4(), uid=user.id)
        self.session.add(login)
        self.session.flush()
        self.session.refresh(login)
        return login

    def get(self, session_id: uuid.UUID) -> UserSession | None:
        return self.session.get(UserSession, session_id)
