# src/chanboard/models/ban.py
"""SQLAlchemy model for address bans."""

import ipaddress
from datetime import datetime, timedelta

from sqlalchemy import DateTime, Interval, PrimaryKeyConstraint, String, func
from sqlalchemy.orm import Mapped, mapped_column

from chanboard.db.session import Base
from chanboard.db.time import utcnow
from chanboard.db.types import BAN_REASON_LENGTH, InetAddress


class Ban(Base):
    """Time-windowed restriction on an address or network.

    The ban applies from ``created_at`` until ``created_at + duration``.
    """

    __tablename__ = "bans"
    __table_args__ = (PrimaryKeyConstraint("ip", "created_at", "duration"),)

    ip: Mapped[str] = mapped_column(InetAddress, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, server_default=func.now()
    )
    duration: Mapped[timedelta] = mapped_column(Interval, nullable=False)
    reason: Mapped[str] = mapped_column(String(BAN_REASON_LENGTH), nullable=False)

    @property
    def expires_at(self) -> datetime:
        return self.created_at + self.duration

    def covers(self, ip: str) -> bool:
        """Return True if ``ip`` falls inside the banned address or network."""
        network = ipaddress.ip_network(str(self.ip), strict=False)
        address = ipaddress.ip_address(str(ip).split("/", 1)[0])
        return address.version == network.version and address in network

    def is_active(self, now: datetime) -> bool:
        return self.created_at <= now < self.expires_at
