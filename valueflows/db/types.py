"""Custom SQLAlchemy types used by the persistence layer."""
from __future__ import annotations

import json
from typing import Iterable, List

from sqlalchemy import Text, and_, cast, func, literal, select, true
from sqlalchemy.dialects import postgresql
from sqlalchemy.types import JSON, TypeDecorator


class TagArray(TypeDecorator[List[str]]):
    """Store classification tags as ``text[]`` on PostgreSQL.

    Falls back to JSON storage on dialects without array support
    (e.g. SQLite during unit tests).
    """

    cache_ok = True
    impl = JSON

    def load_dialect_impl(self, dialect):  # type: ignore[override]
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.ARRAY(Text))
        return dialect.type_descriptor(JSON(none_as_null=True))

    def process_bind_param(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        if isinstance(value, str) or not isinstance(value, Iterable):
            raise TypeError(f"TagArray expects an iterable of strings, got {type(value)!r}")
        return [str(v) for v in value]

    def process_result_value(self, value, dialect):  # type: ignore[override]
        if value is None:
            return None
        if isinstance(value, str):
            parsed = json.loads(value)
            return [str(v) for v in parsed]
        return [str(v) for v in value]

    def copy(self, **kwargs):  # type: ignore[override]
        return TagArray()


def tags_contain(dialect_name: str, column, tags: Iterable[str]):
    """Return a clause true when ``column`` holds every tag in ``tags``.

    PostgreSQL uses the array containment operator; other dialects expand
    the JSON array with ``json_each`` and require one match per tag.
    """
    tags = list(tags)
    if not tags:
        return true()
    if dialect_name == "postgresql":
        return column.op("@>")(cast(tags, postgresql.ARRAY(Text)))

    clauses = []
    for tag in tags:
        each = func.json_each(column).table_valued("value")
        clauses.append(select(literal(1)).select_from(each).where(each.c.value == tag).exists())
    return and_(*clauses)
