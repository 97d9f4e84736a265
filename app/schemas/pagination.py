from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Position of one page of directory rows within the full result"""
    total: int
    limit: int
    offset: int
    has_more: bool

    @classmethod
    def for_page(cls, *, total: int, limit: int, offset: int, returned: int) -> "PaginationMeta":
        return cls(total=total, limit=limit, offset=offset, has_more=offset + returned < total)


class PaginatedResponse(BaseModel, Generic[T]):
    items: list[T]
    pagination: PaginationMeta
