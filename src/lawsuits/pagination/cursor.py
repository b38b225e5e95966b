"""Cursor-based pagination over an ordered sequence.

A cursor is base64 of ``{"id": <case number>}`` naming the last item of the
previous page. Keep that wire shape: external consumers may decode it.
"""
from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
MAX_LIMIT = 100


def encode_cursor(value: str) -> str:
    payload = json.dumps({"id": value}, separators=(',', ':'), ensure_ascii=False)
    return base64.b64encode(payload.encode('utf-8')).decode('ascii')


def decode_cursor(cursor: str) -> str:
    """Case number encoded in ``cursor``; raises ValueError if it is malformed."""
    try:
        # '+' often arrives as a space when the cursor was not URL-encoded
        token = cursor.strip().replace(' ', '+')
        token += '=' * (-len(token) % 4)
        decoded = base64.b64decode(token, validate=True).decode('utf-8')
        parsed = json.loads(decoded)
    except (binascii.Error, UnicodeDecodeError, ValueError, AttributeError) as e:
        raise ValueError(f"Invalid cursor: {e}") from e
    if not isinstance(parsed, dict) or not isinstance(parsed.get("id"), str):
        raise ValueError("Invalid cursor: missing 'id'")
    return parsed["id"]


def clamp_limit(limit: Optional[int]) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    return max(MIN_LIMIT, min(int(limit), MAX_LIMIT))


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    next_cursor: Optional[str] = None

    def to_dict(self, item_fn: Callable[[T], Any] = lambda item: item) -> dict:
        return {"items": [item_fn(i) for i in self.items], "nextCursor": self.next_cursor}


def _case_number(item: Any) -> str:
    return item.numero_processo


def _start_index(items: Sequence[T], cursor: Optional[str], key: Callable[[T], str]) -> int:
    if not cursor:
        return 0
    try:
        last_id = decode_cursor(cursor)
    except ValueError as e:
        logger.debug("Restarting pagination: %s", e)
        return 0
    for idx, item in enumerate(items):
        if key(item) == last_id:
            return idx + 1
    logger.debug("Cursor id %r not in current results, restarting pagination", last_id)
    return 0


def paginate(items: Sequence[T], cursor: Optional[str] = None, limit: Optional[int] = DEFAULT_LIMIT,
             key: Callable[[T], str] = _case_number) -> Page[T]:
    size = clamp_limit(limit)
    start = _start_index(items, cursor, key)
    end = start + size
    page_items = list(items[start:end])
    has_next = end < len(items)
    next_cursor = encode_cursor(key(page_items[-1])) if has_next and page_items else None
    return Page(items=page_items, next_cursor=next_cursor)
