"""
Instance variables: the singleton record of system-wide defaults.

``ensure_inst_vars`` seeds the default unit and resource specifications the
same way the seeding migration does, so fresh databases created from the
ORM metadata (tests, scripts) end up in the same state.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from valueflows.db import models
from valueflows.db.errors import NotFoundError
from valueflows.db.transaction import storage_guard, transaction

logger = logging.getLogger(__name__)

UNIT_ONE = {"label": "one", "symbol": "#"}
DEFAULT_SPECS = {
    "spec_currency": "currency",
    "spec_project_design": "Design",
    "spec_project_service": "Service",
    "spec_project_product": "Product",
}


def get_inst_vars(db: Session) -> models.InstVars:
    with storage_guard():
        found = db.query(models.InstVars).one_or_none()
    if found is None:
        logger.info("inst_vars_not_initialized")
        raise NotFoundError("instance variables are not initialized")
    return found


def ensure_inst_vars(db: Session) -> models.InstVars:
    """Return the singleton record, creating it and its defaults if missing."""
    try:
        return get_inst_vars(db)
    except NotFoundError:
        pass

    with transaction(db):
        unit_one = models.Unit(**UNIT_ONE)
        db.add(unit_one)
        db.flush()
        specs = {}
        for key, name in DEFAULT_SPECS.items():
            spec = models.ResourceSpecification(name=name, default_unit_of_resource_id=unit_one.id)
            db.add(spec)
            specs[key] = spec
        db.flush()
        inst_vars = models.InstVars(
            id=1,
            unit_one_id=unit_one.id,
            **{f"{key}_id": spec.id for key, spec in specs.items()},
        )
        db.add(inst_vars)
    logger.info("inst_vars_seeded: unit_one=%s", unit_one.id)
    return get_inst_vars(db)
