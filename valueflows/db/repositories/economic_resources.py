"""
Economic resource repository functions.

Implements single lookup, filtered cursor-paged listing, transactional
update/delete (re-fetching the row first) and on-demand association
preloading for economic resources.
"""
from __future__ import annotations

import enum
import logging
import uuid
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import Uuid, inspect
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from valueflows.db import models, paging, schemas
from valueflows.db.errors import NotFoundError, ValidationError
from valueflows.db.transaction import storage_guard, transaction
from valueflows.db.types import tags_contain

logger = logging.getLogger(__name__)

Criteria = Union[uuid.UUID, str, Mapping[str, Any]]

# Update payload keys whose ORM attribute is named differently
_ATTRIBUTE_NAMES = {"metadata": "metadata_col"}


def _coerce_uuid(value) -> Optional[uuid.UUID]:
    if value is None or isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def _criteria_clauses(criteria: Criteria) -> Dict[str, Any]:
    if not isinstance(criteria, Mapping):
        criteria = {"id": criteria}

    column_attrs = inspect(models.EconomicResource).column_attrs
    unknown = sorted(k for k in criteria if k not in column_attrs)
    if unknown:
        logger.info("economic_resource_criteria_rejected: field=%s", unknown[0])
        raise ValidationError.single(unknown[0], "is not a field of economic resources")

    clauses = {}
    for key, value in criteria.items():
        if isinstance(column_attrs[key].columns[0].type, Uuid) and value is not None:
            coerced = _coerce_uuid(value)
            if coerced is None:
                # A malformed identifier can't match any row
                logger.info("economic_resource_not_found: %s=%r", key, value)
                raise NotFoundError()
            value = coerced
        clauses[key] = value
    return clauses


def get_economic_resource(db: Session, criteria: Criteria) -> models.EconomicResource:
    """Return the unique resource matching an id or field equality clauses."""
    clauses = _criteria_clauses(criteria)
    with storage_guard():
        found = db.query(models.EconomicResource).filter_by(**clauses).one_or_none()
    if found is None:
        logger.info("economic_resource_not_found: %s", clauses)
        raise NotFoundError()
    return found


# Filters, ANDed together in the order given
def _filter_classified_as(q, dialect: str, value):
    return q.filter(tags_contain(dialect, models.EconomicResource.classified_as, value))


def _filter_primary_accountable(q, dialect: str, value):
    return q.filter(models.EconomicResource.primary_accountable_id.in_(value))


def _filter_custodian(q, dialect: str, value):
    return q.filter(models.EconomicResource.custodian_id.in_(value))


def _filter_conforms_to(q, dialect: str, value):
    return q.filter(models.EconomicResource.conforms_to_id.in_(value))


_FILTERS = {
    "classified_as": _filter_classified_as,
    "primary_accountable": _filter_primary_accountable,
    "custodian": _filter_custodian,
    "conforms_to": _filter_conforms_to,
}


def _parse_filter(raw) -> schemas.EconomicResourceFilter:
    if raw is None:
        return schemas.EconomicResourceFilter()
    if isinstance(raw, schemas.EconomicResourceFilter):
        return raw
    try:
        return schemas.EconomicResourceFilter.model_validate(dict(raw))
    except PydanticValidationError as e:
        err = ValidationError.from_pydantic(e, prefix="filter")
        logger.info("economic_resource_filter_rejected: %s", err)
        raise err


def get_economic_resources(db: Session, params: Optional[Mapping[str, Any]] = None) -> paging.Page:
    """List resources matching ``params["filter"]``, one page at a time.

    ``params`` may also carry the paging keys ``first``/``after`` or
    ``last``/``before``.
    """
    params = dict(params or {})
    filt = _parse_filter(params.pop("filter", None))

    dialect = db.get_bind().dialect.name
    q = db.query(models.EconomicResource)
    for key, value in filt.model_dump(exclude_none=True).items():
        q = _FILTERS[key](q, dialect, value)
    return paging.page(q, models.EconomicResource.id, params)


def _changeset(fields) -> Dict[str, Any]:
    if isinstance(fields, schemas.EconomicResourceUpdate):
        return fields.model_dump(exclude_unset=True)
    try:
        return schemas.EconomicResourceUpdate.model_validate(dict(fields)).model_dump(exclude_unset=True)
    except PydanticValidationError as e:
        err = ValidationError.from_pydantic(e)
        logger.info("economic_resource_update_rejected: %s", err)
        raise err


def update_economic_resource(db: Session, resource_id, fields) -> models.EconomicResource:
    with transaction(db):
        db_resource = get_economic_resource(db, resource_id)
        changes = _changeset(fields)
        for key, value in changes.items():
            setattr(db_resource, _ATTRIBUTE_NAMES.get(key, key), value)
        db.flush()
    db.refresh(db_resource)
    logger.info("economic_resource_updated: id=%s fields=%s", db_resource.id, sorted(changes))
    return db_resource


def delete_economic_resource(db: Session, resource_id) -> models.EconomicResource:
    """Delete a resource, returning it as it was immediately before removal."""
    with transaction(db):
        db_resource = get_economic_resource(db, resource_id)
        db.delete(db_resource)
        db.flush()
    logger.info("economic_resource_deleted: id=%s", db_resource.id)
    return db_resource


class Relation(enum.Enum):
    IMAGES = "images"
    CONFORMS_TO = "conforms_to"
    ACCOUNTING_QUANTITY = "accounting_quantity"
    ONHAND_QUANTITY = "onhand_quantity"
    PRIMARY_ACCOUNTABLE = "primary_accountable"
    CUSTODIAN = "custodian"
    STAGE = "stage"
    STATE = "state"
    CURRENT_LOCATION = "current_location"
    LOT = "lot"
    CONTAINED_IN = "contained_in"
    UNIT_OF_EFFORT = "unit_of_effort"


def _fetch_related(db: Session, db_resource: models.EconomicResource, attr: str):
    prop = inspect(models.EconomicResource).relationships[attr]
    target = prop.mapper.class_
    if prop.uselist:
        remote = next(iter(prop.remote_side))
        q = db.query(target).filter(remote == db_resource.id)
        if prop.order_by:
            q = q.order_by(*prop.order_by)
        return q.all()
    fk = getattr(db_resource, next(iter(prop.local_columns)).key)
    return db.get(target, fk) if fk is not None else None


def _load_attribute(db: Session, db_resource: models.EconomicResource, attr: str) -> models.EconomicResource:
    state = inspect(db_resource)
    if attr not in state.unloaded:
        return db_resource
    with storage_guard():
        if state.session is db:
            getattr(db_resource, attr)
        else:
            # Detached entities (e.g. returned by delete) are enriched through
            # ``db`` without marking anything as changed
            set_committed_value(db_resource, attr, _fetch_related(db, db_resource, attr))
    return db_resource


def _relationship_loader(attr: str) -> Callable[[Session, models.EconomicResource], models.EconomicResource]:
    def load(db: Session, db_resource: models.EconomicResource) -> models.EconomicResource:
        return _load_attribute(db, db_resource, attr)
    load.__name__ = f"_preload_{attr}"
    return load


def _preload_state(db: Session, db_resource: models.EconomicResource) -> models.EconomicResource:
    # Actions are a fixed vocabulary, resolved without touching the store
    with storage_guard():
        db_resource.state
    return db_resource


_PRELOADERS: Dict[Relation, Callable[[Session, models.EconomicResource], models.EconomicResource]] = {
    Relation.IMAGES: _relationship_loader("images"),
    Relation.CONFORMS_TO: _relationship_loader("conforms_to"),
    Relation.ACCOUNTING_QUANTITY: _relationship_loader("accounting_quantity_has_unit"),
    Relation.ONHAND_QUANTITY: _relationship_loader("onhand_quantity_has_unit"),
    Relation.PRIMARY_ACCOUNTABLE: _relationship_loader("primary_accountable"),
    Relation.CUSTODIAN: _relationship_loader("custodian"),
    Relation.STAGE: _relationship_loader("stage"),
    Relation.STATE: _preload_state,
    Relation.CURRENT_LOCATION: _relationship_loader("current_location"),
    Relation.LOT: _relationship_loader("lot"),
    Relation.CONTAINED_IN: _relationship_loader("contained_in"),
    Relation.UNIT_OF_EFFORT: _relationship_loader("unit_of_effort"),
}


def preload_economic_resource(
    db: Session,
    db_resource: models.EconomicResource,
    relation: Relation,
) -> models.EconomicResource:
    """Attach ``relation`` to the in-memory resource, fetching it at most once."""
    if not isinstance(relation, Relation):
        logger.info("economic_resource_preload_rejected: relation=%r", relation)
        raise ValidationError.single("relation", "is not a preloadable relation")
    return _PRELOADERS[relation](db, db_resource)
