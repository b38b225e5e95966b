from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from lawsuits.api import config
from lawsuits.pagination.cursor import MAX_LIMIT, MIN_LIMIT


class ListLawsuitsQuery(BaseModel):
    model_config = ConfigDict(extra="forbid")

    q: Optional[str] = Field(default=None, max_length=200)
    tribunal: Optional[str] = Field(default=None, max_length=20)
    grau: Optional[str] = Field(default=None, max_length=10)
    cursor: Optional[str] = None
    limit: int = Field(default=config.DEFAULT_PAGE_LIMIT, ge=MIN_LIMIT, le=MAX_LIMIT)
