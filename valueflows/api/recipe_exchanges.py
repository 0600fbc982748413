"""Recipe exchange API endpoints."""
import uuid
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from valueflows.db import schemas
from valueflows.db.database import get_db
from valueflows.db.repositories import recipe_exchanges as repo

router = APIRouter(prefix="/recipe-exchanges", tags=["recipe-exchanges"])


@router.post("/", response_model=schemas.RecipeExchange, status_code=status.HTTP_201_CREATED)
def create_recipe_exchange_endpoint(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    return repo.create_recipe_exchange(db, payload)


@router.get("/{recipe_exchange_id}", response_model=schemas.RecipeExchange)
def get_recipe_exchange_endpoint(recipe_exchange_id: uuid.UUID, db: Session = Depends(get_db)):
    return repo.get_recipe_exchange(db, recipe_exchange_id)


@router.patch("/{recipe_exchange_id}", response_model=schemas.RecipeExchange)
def update_recipe_exchange_endpoint(
    recipe_exchange_id: uuid.UUID,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    return repo.update_recipe_exchange(db, recipe_exchange_id, payload)


@router.delete("/{recipe_exchange_id}", response_model=schemas.RecipeExchange)
def delete_recipe_exchange_endpoint(recipe_exchange_id: uuid.UUID, db: Session = Depends(get_db)):
    return repo.delete_recipe_exchange(db, recipe_exchange_id)
