import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from valueflows.db import validate
from .paging import PageInfo
from .vocabulary import Unit


class Measure(BaseModel):
    has_numerical_value: Optional[Decimal] = None
    has_unit: Optional[Unit] = None
    model_config = ConfigDict(from_attributes=True)


class EconomicResource(BaseModel):
    id: uuid.UUID
    name: str
    note: Optional[str] = None
    tracking_identifier: Optional[str] = None
    classified_as: Optional[List[str]] = None
    conforms_to_id: uuid.UUID
    accounting_quantity_has_numerical_value: Optional[Decimal] = None
    accounting_quantity_has_unit_id: Optional[uuid.UUID] = None
    onhand_quantity_has_numerical_value: Optional[Decimal] = None
    onhand_quantity_has_unit_id: Optional[uuid.UUID] = None
    primary_accountable_id: Optional[uuid.UUID] = None
    custodian_id: Optional[uuid.UUID] = None
    stage_id: Optional[uuid.UUID] = None
    state_id: Optional[str] = None
    current_location_id: Optional[uuid.UUID] = None
    lot_id: Optional[uuid.UUID] = None
    contained_in_id: Optional[uuid.UUID] = None
    unit_of_effort_id: Optional[uuid.UUID] = None
    repo: Optional[str] = None
    version: Optional[str] = None
    licensor: Optional[str] = None
    license: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = Field(default=None, validation_alias="metadata_col")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class EconomicResourceUpdate(BaseModel):
    """Fields an update may replace; anything else is rejected."""
    name: Optional[str] = None
    note: Optional[str] = None
    tracking_identifier: Optional[str] = None
    classified_as: Optional[List[str]] = None
    repo: Optional[str] = None
    version: Optional[str] = None
    licensor: Optional[str] = None
    license: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    model_config = ConfigDict(extra="forbid")

    @field_validator("name")
    @classmethod
    def _name(cls, v):
        if v is None:
            raise ValueError("can't be blank")
        return validate.name(v)

    @field_validator("note")
    @classmethod
    def _note(cls, v):
        return validate.note(v)

    @field_validator("repo")
    @classmethod
    def _repo(cls, v):
        return validate.uri(v)

    @field_validator("tracking_identifier", "version", "licensor", "license")
    @classmethod
    def _short_text(cls, v):
        return validate.name(v)

    @field_validator("classified_as")
    @classmethod
    def _classified_as(cls, v):
        return validate.class_list(v)


class EconomicResourceFilter(BaseModel):
    """Composable (AND) list filters; unknown keys are rejected."""
    classified_as: Optional[List[str]] = None
    primary_accountable: Optional[List[uuid.UUID]] = None
    custodian: Optional[List[uuid.UUID]] = None
    conforms_to: Optional[List[uuid.UUID]] = None
    model_config = ConfigDict(extra="forbid")

    @field_validator("classified_as")
    @classmethod
    def _classified_as(cls, v):
        return validate.class_list(v)


class EconomicResourceEdge(BaseModel):
    cursor: str
    node: EconomicResource


class EconomicResourceConnection(BaseModel):
    edges: List[EconomicResourceEdge]
    page_info: PageInfo
