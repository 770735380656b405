# src/chanboard/schemas/ban.py
"""Ban-related Pydantic schemas."""

import ipaddress
from datetime import datetime, timedelta

from pydantic import BaseModel, Field, field_validator

from chanboard.db.types import BAN_REASON_LENGTH


class BanCreate(BaseModel):
    """Schema for banning an address or network."""

    ip: str = Field(..., description="Address or CIDR network")
    duration: timedelta
    reason: str = Field(..., min_length=1, max_length=BAN_REASON_LENGTH)
    created_at: datetime | None = None

    @field_validator("ip")
    @classmethod
    def _normalize_ip(cls, value: str) -> str:
        network = ipaddress.ip_network(value, strict=False)
        if network.num_addresses == 1:
            return str(network.network_address)
        return str(network)

    @field_validator("duration")
    @classmethod
    def _positive_duration(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("duration must be positive")
        return value
