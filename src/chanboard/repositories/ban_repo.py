"""Data access helpers for address bans."""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import Select, cast, select
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session

from chanboard.db.time import utcnow
from chanboard.models.ban import Ban
from chanboard.schemas.ban import BanCreate

__all__ = ["BanRepository"]

logger = logging.getLogger(__name__)


class BanRepository:
    """Database access for bans.

    Deciding what a ban blocks is up to the caller; this only records and
    finds them.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, data: BanCreate) -> Ban:
        ban = Ban(
            ip=data.ip,
            created_at=data.created_at or utcnow(),
            duration=data.duration,
            reason=data.reason,
        )
        self.session.add(ban)
        self.session.flush()
        logger.info("Banned %s until %s: %s", ban.ip, ban.expires_at, ban.reason)
        return ban

    def active_query(self, ip: str, now: datetime, dialect_name: str) -> Select[tuple[Ban]]:
        """Build the candidate query for :meth:`active_for`.

        PostgreSQL evaluates containment and expiry itself; elsewhere the
        interval arithmetic is not portable, so only the window start is
        filtered in SQL.
        """
        query = select(Ban).where(Ban.created_at <= now)
        if dialect_name == "postgresql":
            query = query.where(
                Ban.created_at + Ban.duration > now,
                Ban.ip.op(">>=", is_comparison=True)(cast(ip, postgresql.INET)),
            )
        return query.order_by(Ban.created_at.desc())

    def active_for(self, ip: str, now: datetime | None = None) -> Ban | None:
        """Return the most recent ban covering ``ip`` at ``now``, if any."""
        if now is None:
            now = utcnow()
        dialect_name = self.session.get_bind().dialect.name
        for ban in self.session.scalars(self.active_query(ip, now, dialect_name)):
            if ban.is_active(now) and ban.covers(ip):
                return ban
        return None
