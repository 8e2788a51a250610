from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class QueryError(str, Enum):
    """Client input errors; the value is the response body sent back."""

    invalid_city = "unknown city"
    invalid_count = "incorrect count"


class CafeQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    city: str = Field(..., min_length=1)
    count: int | None = Field(default=None, ge=0, description="None means no cap")
    search: str = ""


class ParseResult(BaseModel):
    """Either a validated query or the reason it was rejected."""

    model_config = ConfigDict(frozen=True)

    query: CafeQuery | None = None
    error: QueryError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> ParseResult:
        if (self.query is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of query or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class MetadataResponse(BaseModel):
    cities: list[str]
    total_cafes: int
