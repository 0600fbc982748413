import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class Unit(BaseModel):
    id: uuid.UUID
    label: str
    symbol: str
    model_config = ConfigDict(from_attributes=True)


class SpatialThing(BaseModel):
    id: uuid.UUID
    name: str
    mappable_address: Optional[str] = None
    lat: Optional[float] = None
    long: Optional[float] = None
    alt: Optional[float] = None
    note: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class Agent(BaseModel):
    id: uuid.UUID
    type: str
    name: str
    note: Optional[str] = None
    classified_as: Optional[List[str]] = None
    primary_location_id: Optional[uuid.UUID] = None
    model_config = ConfigDict(from_attributes=True)


class ResourceSpecification(BaseModel):
    id: uuid.UUID
    name: str
    note: Optional[str] = None
    resource_classified_as: Optional[List[str]] = None
    default_unit_of_resource_id: Optional[uuid.UUID] = None
    default_unit_of_effort_id: Optional[uuid.UUID] = None
    model_config = ConfigDict(from_attributes=True)


class ProcessSpecification(BaseModel):
    id: uuid.UUID
    name: str
    note: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class ProductBatch(BaseModel):
    id: uuid.UUID
    batch_number: str
    expiry_date: Optional[datetime] = None
    production_date: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class File(BaseModel):
    id: uuid.UUID
    hash: str
    name: str
    description: Optional[str] = None
    mime_type: str
    extension: str
    size: int
    width: Optional[int] = None
    height: Optional[int] = None
    url: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)
