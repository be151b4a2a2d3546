"""Response envelopes shared by every route."""

from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ErrorResponse(BaseModel):
    """Body returned for domain errors (400, 404, 409)."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a listing plus the unpaginated total."""

    items: list[T]
    total: int
    page: int
    page_size: int

    @classmethod
    def build(
        cls, items: Sequence[T], total: int, page: int, page_size: int
    ) -> "PaginatedResponse[T]":
        return cls(items=list(items), total=total, page=page, page_size=page_size)
