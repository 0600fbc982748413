import uuid

import pytest

from valueflows.db import paging, schemas
from valueflows.db.errors import ValidationError
from valueflows.utils.settings import refresh_settings


def test_cursor_roundtrip_is_opaque_and_urlsafe():
    rid = uuid.uuid4()
    cursor = paging.encode_cursor(rid)
    assert str(rid) not in cursor
    assert "=" not in cursor and "/" not in cursor and "+" not in cursor
    assert paging.decode_cursor(cursor) == rid


@pytest.mark.parametrize("bad", ["", "!!!", "bm90LWEtdXVpZA"])
def test_decode_cursor_rejects_garbage(bad):
    with pytest.raises(ValidationError) as ei:
        paging.decode_cursor(bad, "after")
    assert ei.value.errors[0].field == "after"


def test_parse_defaults_to_forward_default_size():
    req = paging.parse(None)
    assert req.direction == paging.FORWARD
    assert req.cursor is None
    assert req.size == 50


def test_parse_clamps_to_max_size(monkeypatch):
    assert paging.parse({"first": 1000}).size == 100

    monkeypatch.setenv("PAGE_MAX_SIZE", "10")
    monkeypatch.setenv("PAGE_DEFAULT_SIZE", "20")
    refresh_settings()
    assert paging.parse({"first": 11}).size == 10
    # default never exceeds the ceiling
    assert paging.parse({}).size == 10


def test_parse_backward_with_before_cursor():
    rid = uuid.uuid4()
    req = paging.parse(schemas.PageParams(last=5, before=paging.encode_cursor(rid)))
    assert req.direction == paging.BACKWARD
    assert req.cursor == rid
    assert req.size == 5


def test_parse_before_without_last_pages_backward():
    rid = uuid.uuid4()
    req = paging.parse({"before": paging.encode_cursor(rid)})
    assert req.direction == paging.BACKWARD
    assert req.size == 50


@pytest.mark.parametrize(
    "params, field",
    [
        ({"first": 1, "last": 1}, "first"),
        ({"after": "a", "before": "b"}, "after"),
        ({"last": 2, "after": "a"}, "after"),
        ({"first": 2, "before": "b"}, "before"),
    ],
)
def test_parse_rejects_conflicting_params(params, field):
    with pytest.raises(ValidationError) as ei:
        paging.parse(params)
    assert ei.value.errors[0].field == field


def test_parse_rejects_negative_and_unknown():
    with pytest.raises(ValidationError) as ei:
        paging.parse({"first": -1})
    assert ei.value.errors[0].field == "first"

    with pytest.raises(ValidationError) as ei:
        paging.parse({"offset": 10})
    assert ei.value.errors[0].field == "offset"
