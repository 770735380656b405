# src/chanboard/ui/references.py
"""Helpers for ``>>id`` post references."""

from __future__ import annotations

import re

REFERENCE_RE = re.compile(r">>(\d+)")

# Post ids live in a 32-bit INTEGER column.
MAX_POST_ID = 2**31 - 1


def append_reply_reference(text: str, post_id: int) -> str:
    """Append a reference to ``post_id`` to the reply box contents."""
    return f"{text} >>{post_id}"


def parse_reply_targets(text: str | None) -> list[int]:
    """Return the post ids referenced in ``text``, in first-seen order.

    Numbers that cannot be a post id (zero, or past the column's range) are
    skipped.
    """
    if not text:
        return []
    seen: dict[int, None] = {}
    for match in REFERENCE_RE.finditer(text):
        digits = match.group(1).lstrip("0")
        if not digits or len(digits) > len(str(MAX_POST_ID)):
            continue
        post_id = int(digits)
        if post_id <= MAX_POST_ID:
            seen.setdefault(post_id, None)
    return list(seen)
