"""
Economic resources API endpoints.

Thin adapter over the economic resource repository: lookup, filtered
cursor-paged listing, partial update and delete.
"""
import dataclasses
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session

from valueflows.db import schemas
from valueflows.db.database import get_db
from valueflows.db.repositories import economic_resources as repo

router = APIRouter(prefix="/economic-resources", tags=["economic-resources"])


def to_connection(page) -> schemas.EconomicResourceConnection:
    return schemas.EconomicResourceConnection(
        edges=[
            schemas.EconomicResourceEdge(cursor=e.cursor, node=schemas.EconomicResource.model_validate(e.node))
            for e in page.edges
        ],
        page_info=schemas.PageInfo(**dataclasses.asdict(page.page_info)),
    )


@router.get("/", response_model=schemas.EconomicResourceConnection)
def get_economic_resources_endpoint(
    classified_as: Optional[List[str]] = Query(default=None),
    primary_accountable: Optional[List[uuid.UUID]] = Query(default=None),
    custodian: Optional[List[uuid.UUID]] = Query(default=None),
    conforms_to: Optional[List[uuid.UUID]] = Query(default=None),
    first: Optional[int] = None,
    after: Optional[str] = None,
    last: Optional[int] = None,
    before: Optional[str] = None,
    db: Session = Depends(get_db),
):
    filt = {
        key: value
        for key, value in {
            "classified_as": classified_as,
            "primary_accountable": primary_accountable,
            "custodian": custodian,
            "conforms_to": conforms_to,
        }.items()
        if value is not None
    }
    params = {
        key: value
        for key, value in {"first": first, "after": after, "last": last, "before": before}.items()
        if value is not None
    }
    page = repo.get_economic_resources(db, {"filter": filt, **params})
    return to_connection(page)


@router.get("/{resource_id}", response_model=schemas.EconomicResource)
def get_economic_resource_endpoint(resource_id: uuid.UUID, db: Session = Depends(get_db)):
    return repo.get_economic_resource(db, resource_id)


@router.patch("/{resource_id}", response_model=schemas.EconomicResource)
def update_economic_resource_endpoint(
    resource_id: uuid.UUID,
    fields: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
):
    return repo.update_economic_resource(db, resource_id, fields)


@router.delete("/{resource_id}", response_model=schemas.EconomicResource)
def delete_economic_resource_endpoint(resource_id: uuid.UUID, db: Session = Depends(get_db)):
    return repo.delete_economic_resource(db, resource_id)
