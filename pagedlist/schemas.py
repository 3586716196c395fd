"""Pydantic schemas for paged API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from pagedlist.paged_list import PagedList

T = TypeVar("T")


class PageMetadataResponse(BaseModel):
    """Schema for page metadata."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    page_number: int = Field(..., ge=1, description="Current page (1-indexed)")
    page_size: int = Field(..., ge=1)
    total_item_count: int = Field(..., ge=0)
    page_count: int = Field(..., ge=0)
    first_item_on_page: int = Field(..., ge=0, description="1-based position of the first item, 0 when empty")
    last_item_on_page: int = Field(..., ge=0, description="1-based position of the last item, 0 when empty")
    is_first_page: bool
    is_last_page: bool
    has_previous_page: bool
    has_next_page: bool
    previous_page_number: int | None = None
    next_page_number: int | None = None


class PagedResponse(BaseModel, Generic[T]):
    """Schema for a page of items with its metadata."""

    items: list[T]
    metadata: PageMetadataResponse

    @classmethod
    def from_paged_list(cls, paged: PagedList[T]) -> "PagedResponse[T]":
        return cls(
            items=list(paged),
            metadata=PageMetadataResponse.model_validate(paged.metadata),
        )
