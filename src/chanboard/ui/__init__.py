"""Server-side counterparts of the browser helpers in ``static/script.js``."""

from .references import append_reply_reference, parse_reply_targets
from .timestamps import format_timestamp

__all__ = ["append_reply_reference", "format_timestamp", "parse_reply_targets"]
