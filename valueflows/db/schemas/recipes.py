import uuid
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from valueflows.db import validate


class RecipeExchangeBase(BaseModel):
    name: str
    note: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name(cls, v):
        return validate.name(v)

    @field_validator("note")
    @classmethod
    def _note(cls, v):
        return validate.note(v)


class RecipeExchangeCreate(RecipeExchangeBase):
    model_config = ConfigDict(extra="forbid")


class RecipeExchangeUpdate(BaseModel):
    name: Optional[str] = None
    note: Optional[str] = None
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


class RecipeExchange(BaseModel):
    id: uuid.UUID
    name: str
    note: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
