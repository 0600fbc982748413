"""
Atomic unit of work around a session.

Repository mutations run their fetch, validate and write steps inside
``transaction(db)``. The first step that raises ends the pipeline; the scope
rolls back on every non-success exit and commits only on a clean exit.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from valueflows.db.errors import ResourceError, StorageFault

logger = logging.getLogger(__name__)


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    try:
        yield db
        db.commit()
    except ResourceError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("transaction_aborted: %s", e.__class__.__name__)
        raise StorageFault(f"storage failure: {e}", original=e) from e
    except BaseException:
        db.rollback()
        raise


@contextmanager
def storage_guard() -> Iterator[None]:
    """Translate driver errors raised by read-only queries into StorageFault."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("query_failed: %s", e.__class__.__name__)
        raise StorageFault(f"storage failure: {e}", original=e) from e
