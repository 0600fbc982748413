"""
Recipe exchange repository functions.

Recipe exchanges are simple validated records (name and note); mutations
follow the same fetch, validate, write transaction as economic resources.
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from valueflows.db import models, paging, schemas
from valueflows.db.errors import NotFoundError, ValidationError
from valueflows.db.transaction import storage_guard, transaction

logger = logging.getLogger(__name__)


def _validated(schema, payload):
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(dict(payload))
    except PydanticValidationError as e:
        err = ValidationError.from_pydantic(e)
        logger.info("recipe_exchange_rejected: %s", err)
        raise err


def create_recipe_exchange(
    db: Session,
    recipe_exchange: Union[schemas.RecipeExchangeCreate, Mapping[str, Any]],
) -> models.RecipeExchange:
    with transaction(db):
        data = _validated(schemas.RecipeExchangeCreate, recipe_exchange)
        db_recipe_exchange = models.RecipeExchange(name=data.name, note=data.note)
        db.add(db_recipe_exchange)
        db.flush()
    db.refresh(db_recipe_exchange)
    logger.info("recipe_exchange_created: id=%s", db_recipe_exchange.id)
    return db_recipe_exchange


def get_recipe_exchange(db: Session, recipe_exchange_id) -> models.RecipeExchange:
    if not isinstance(recipe_exchange_id, uuid.UUID):
        try:
            recipe_exchange_id = uuid.UUID(str(recipe_exchange_id))
        except ValueError:
            logger.info("recipe_exchange_not_found: id=%r", recipe_exchange_id)
            raise NotFoundError()
    with storage_guard():
        found = db.query(models.RecipeExchange).filter(models.RecipeExchange.id == recipe_exchange_id).one_or_none()
    if found is None:
        logger.info("recipe_exchange_not_found: id=%s", recipe_exchange_id)
        raise NotFoundError()
    return found


def get_recipe_exchanges(db: Session, params: Optional[Mapping[str, Any]] = None) -> paging.Page:
    return paging.page(db.query(models.RecipeExchange), models.RecipeExchange.id, params)


def update_recipe_exchange(
    db: Session,
    recipe_exchange_id,
    recipe_exchange: Union[schemas.RecipeExchangeUpdate, Mapping[str, Any]],
) -> models.RecipeExchange:
    with transaction(db):
        db_recipe_exchange = get_recipe_exchange(db, recipe_exchange_id)
        changes = _validated(schemas.RecipeExchangeUpdate, recipe_exchange).model_dump(exclude_unset=True)
        for key, value in changes.items():
            setattr(db_recipe_exchange, key, value)
        db.flush()
    db.refresh(db_recipe_exchange)
    return db_recipe_exchange


def delete_recipe_exchange(db: Session, recipe_exchange_id) -> models.RecipeExchange:
    with transaction(db):
        db_recipe_exchange = get_recipe_exchange(db, recipe_exchange_id)
        db.delete(db_recipe_exchange)
        db.flush()
    logger.info("recipe_exchange_deleted: id=%s", db_recipe_exchange.id)
    return db_recipe_exchange
