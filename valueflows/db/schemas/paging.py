from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PageParams(BaseModel):
    first: Optional[int] = Field(default=None, ge=1)
    after: Optional[str] = None
    last: Optional[int] = Field(default=None, ge=1)
    before: Optional[str] = None
    model_config = ConfigDict(extra="forbid")


class PageInfo(BaseModel):
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None
    has_previous_page: bool
    has_next_page: bool
    page_limit: int
