# src/chanboard/db/types.py
"""Column types shared by the ORM models and the migrations."""

from sqlalchemy import String
from sqlalchemy.dialects import postgresql

# Textual form of an IPv4/IPv6 address or network; INET on PostgreSQL.
InetAddress = String(45).with_variant(postgresql.INET(), "postgresql")

NAME_LENGTH = 255
CONTENT_LENGTH = 65535
BAN_REASON_LENGTH = 256
