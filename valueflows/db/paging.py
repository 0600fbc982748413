"""
Cursor pagination over identifier-ordered queries.

Pages are fetched with keyset conditions on the primary key: forward pages
(``first``/``after``) walk identifiers ascending, backward pages
(``last``/``before``) walk them descending and are reversed before being
returned. One extra row is fetched to tell whether another page exists.
Cursors are opaque to callers: URL-safe base64 of the row identifier.
"""
from __future__ import annotations

import base64
import binascii
import logging
import uuid
from dataclasses import dataclass
from typing import Any, Generic, List, Mapping, Optional, TypeVar, Union

from pydantic import ValidationError as PydanticValidationError

from valueflows.db import schemas
from valueflows.db.errors import ValidationError
from valueflows.db.transaction import storage_guard
from valueflows.utils.settings import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

FORWARD = "forward"
BACKWARD = "backward"


@dataclass(frozen=True)
class PageRequest:
    direction: str
    cursor: Optional[uuid.UUID]
    size: int


@dataclass(frozen=True)
class Edge(Generic[T]):
    cursor: str
    node: T


@dataclass(frozen=True)
class PageInfo:
    start_cursor: Optional[str]
    end_cursor: Optional[str]
    has_previous_page: bool
    has_next_page: bool
    page_limit: int


@dataclass(frozen=True)
class Page(Generic[T]):
    edges: List[Edge[T]]
    page_info: PageInfo

    @property
    def nodes(self) -> List[T]:
        return [e.node for e in self.edges]


def _invalid(field: str, message: str) -> ValidationError:
    logger.info("paging_rejected: %s: %s", field, message)
    return ValidationError.single(field, message)


def encode_cursor(id_: uuid.UUID) -> str:
    return base64.urlsafe_b64encode(str(id_).encode("ascii")).decode("ascii").rstrip("=")


def decode_cursor(cursor: str, field: str = "cursor") -> uuid.UUID:
    try:
        padded = cursor + "=" * (-len(cursor) % 4)
        return uuid.UUID(base64.urlsafe_b64decode(padded.encode("ascii")).decode("ascii"))
    except (ValueError, binascii.Error, UnicodeError):
        raise _invalid(field, "is not a valid cursor")


def parse(params: Union[schemas.PageParams, Mapping[str, Any], None]) -> PageRequest:
    """Validate paging parameters and resolve direction, cursor and size."""
    if params is None:
        params = schemas.PageParams()
    elif not isinstance(params, schemas.PageParams):
        try:
            params = schemas.PageParams.model_validate(dict(params))
        except PydanticValidationError as e:
            err = ValidationError.from_pydantic(e)
            logger.info("paging_rejected: %s", err)
            raise err

    if params.first is not None and params.last is not None:
        raise _invalid("first", "can't be provided together with last")
    if params.after is not None and params.before is not None:
        raise _invalid("after", "can't be provided together with before")
    if params.after is not None and params.last is not None:
        raise _invalid("after", "can only be used with first")
    if params.before is not None and params.first is not None:
        raise _invalid("before", "can only be used with last")

    settings = get_settings()
    if params.last is not None or params.before is not None:
        direction, requested = BACKWARD, params.last
        cursor = decode_cursor(params.before, "before") if params.before is not None else None
    else:
        direction, requested = FORWARD, params.first
        cursor = decode_cursor(params.after, "after") if params.after is not None else None

    size = settings.page_default_size if requested is None else min(requested, settings.page_max_size)
    return PageRequest(direction=direction, cursor=cursor, size=size)


def page(query, id_column, params: Union[schemas.PageParams, Mapping[str, Any], None]) -> Page:
    """Run ``query`` for one page described by ``params``."""
    req = parse(params)

    if req.direction == FORWARD:
        if req.cursor is not None:
            query = query.filter(id_column > req.cursor)
        query = query.order_by(id_column.asc())
    else:
        if req.cursor is not None:
            query = query.filter(id_column < req.cursor)
        query = query.order_by(id_column.desc())

    with storage_guard():
        rows = query.limit(req.size + 1).all()

    more = len(rows) > req.size
    rows = rows[:req.size]
    if req.direction == FORWARD:
        has_next, has_previous = more, req.cursor is not None
    else:
        rows.reverse()
        has_next, has_previous = req.cursor is not None, more

    key = id_column.key
    edges = [Edge(cursor=encode_cursor(getattr(r, key)), node=r) for r in rows]
    return Page(
        edges=edges,
        page_info=PageInfo(
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
            has_previous_page=has_previous,
            has_next_page=has_next,
            page_limit=req.size,
        ),
    )
