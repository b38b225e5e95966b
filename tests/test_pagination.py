import base64
import json

import pytest

from lawsuits.pagination.cursor import (
    DEFAULT_LIMIT, MAX_LIMIT, clamp_limit, decode_cursor, encode_cursor, paginate,
)


class Item:
    def __init__(self, numero_processo):
        self.numero_processo = numero_processo

    def __repr__(self):
        return f"Item({self.numero_processo!r})"


@pytest.fixture
def items():
    return [Item(f"{i:07d}") for i in range(1, 6)]


def _ids(page):
    return [i.numero_processo for i in page.items]


@pytest.mark.parametrize("value,expected", [
    (None, DEFAULT_LIMIT), (0, 1), (-5, 1), (1, 1), (50, 50), (100, 100), (200, MAX_LIMIT),
])
def test_clamp_limit(value, expected):
    assert clamp_limit(value) == expected


def test_pages_of_two_over_five_items(items):
    first = paginate(items, limit=2)
    assert _ids(first) == ["0000001", "0000002"]
    assert first.next_cursor is not None

    second = paginate(items, first.next_cursor, 2)
    assert _ids(second) == ["0000003", "0000004"]

    third = paginate(items, second.next_cursor, 2)
    assert _ids(third) == ["0000005"]
    assert third.next_cursor is None


def test_full_traversal_visits_each_item_once(items):
    seen, cursor = [], None
    for _ in range(10):
        page = paginate(items, cursor, 3)
        seen.extend(_ids(page))
        cursor = page.next_cursor
        if cursor is None:
            break
    assert seen == [i.numero_processo for i in items]


def test_exact_fit_has_no_next_cursor(items):
    page = paginate(items, limit=5)
    assert len(page.items) == 5
    assert page.next_cursor is None


def test_empty_input():
    page = paginate([], limit=10)
    assert page.items == []
    assert page.next_cursor is None


@pytest.mark.parametrize("cursor", ["not-base64!!", "bm90IGpzb24=", encode_cursor("9999999"), "   "])
def test_bad_or_unknown_cursor_restarts(items, cursor):
    assert _ids(paginate(items, cursor, 2)) == ["0000001", "0000002"]


def test_out_of_range_limit_is_clamped(items):
    assert len(paginate(items, limit=0).items) == 1
    assert len(paginate(items, limit=500).items) == 5


def test_cursor_wire_shape():
    cursor = encode_cursor("0000001-23.2023.8.26.0100")
    assert json.loads(base64.b64decode(cursor)) == {"id": "0000001-23.2023.8.26.0100"}
    assert decode_cursor(cursor) == "0000001-23.2023.8.26.0100"


def test_decode_tolerates_missing_padding_and_spaces():
    cursor = encode_cursor("ação>>?")
    assert decode_cursor(cursor.rstrip("=")) == "ação>>?"
    assert decode_cursor(cursor.replace("+", " ")) == "ação>>?"


@pytest.mark.parametrize("cursor", [
    "%%%",
    base64.b64encode(b"[1, 2]").decode(),
    base64.b64encode(b'{"id": 5}').decode(),
    base64.b64encode(b'{"other": "x"}').decode(),
])
def test_decode_rejects_malformed(cursor):
    with pytest.raises(ValueError):
        decode_cursor(cursor)


def test_page_to_dict(items):
    page = paginate(items, limit=1)
    assert page.to_dict(lambda i: i.numero_processo) == {
        "items": ["0000001"],
        "nextCursor": page.next_cursor,
    }
