"""Paged views over large ordered collections."""

from pagedlist.config import DEFAULT_PAGE_SIZE, Settings, get_settings, setup_logging
from pagedlist.errors import IndexOutOfRangeError, InvalidArgumentError, PagedListError
from pagedlist.metadata import PageMetadata, compute_page_metadata
from pagedlist.paged_list import PagedList, to_paged_list
from pagedlist.schemas import PagedResponse, PageMetadataResponse
from pagedlist.sources import QueryProvider, SequenceProvider, SubsetProvider

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "Settings",
    "get_settings",
    "setup_logging",
    "PagedListError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "PageMetadata",
    "compute_page_metadata",
    "PagedList",
    "to_paged_list",
    "PagedResponse",
    "PageMetadataResponse",
    "SubsetProvider",
    "SequenceProvider",
    "QueryProvider",
]
