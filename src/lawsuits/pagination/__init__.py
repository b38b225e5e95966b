from lawsuits.pagination.cursor import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MIN_LIMIT,
    Page,
    clamp_limit,
    decode_cursor,
    encode_cursor,
    paginate,
)

__all__ = [
    'DEFAULT_LIMIT',
    'MAX_LIMIT',
    'MIN_LIMIT',
    'Page',
    'clamp_limit',
    'decode_cursor',
    'encode_cursor',
    'paginate',
]
