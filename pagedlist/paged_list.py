"""Read-only container for one page of a larger ordered collection."""

import logging
import warnings
from collections.abc import Awaitable, Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import Select
from sqlalchemy.orm import Session

from pagedlist.config import get_settings
from pagedlist.errors import IndexOutOfRangeError, InvalidArgumentError
from pagedlist.metadata import PageMetadata, compute_page_metadata
from pagedlist.sources import QueryProvider, SequenceProvider, SubsetProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")

_METADATA_ATTRIBUTES = frozenset({
    "page_number",
    "page_size",
    "total_item_count",
    "page_count",
    "first_item_on_page",
    "last_item_on_page",
    "is_first_page",
    "is_last_page",
    "has_previous_page",
    "has_next_page",
    "previous_page_number",
    "next_page_number",
    "offset",
    "item_span",
})


def _resolve_page_size(page_size: int | None) -> int:
    if page_size is None:
        return get_settings().default_page_size
    return page_size


class PagedList(Generic[T]):
    """
    A page of items plus metadata about the collection it was cut from.

    Items are accessed by zero-based index or by iteration. Metadata fields
    (page_number, has_next_page, ...) are readable on the list itself.

    A subset shorter than the page is kept as given. A subset longer than
    the page (more than metadata.item_span items) raises InvalidArgumentError.
    """

    __slots__ = ("_metadata", "_subset")

    def __init__(
        self,
        page_number: int,
        page_size: int,
        total_item_count: int,
        subset_provider: SubsetProvider[T],
    ):
        metadata = compute_page_metadata(page_number, page_size, total_item_count)
        subset: Iterable[T] = ()
        if metadata.total_item_count > 0:
            logger.debug(f"Loading page {metadata.page_number} of {metadata.page_count}")
            subset = subset_provider(metadata)
        self._init(subset, metadata)

    def _init(self, subset: Iterable[T], metadata: PageMetadata) -> None:
        items = tuple(subset)
        if len(items) > metadata.item_span:
            raise InvalidArgumentError(
                f"subset has {len(items)} items but page {metadata.page_number} "
                f"spans at most {metadata.item_span}."
            )
        self._metadata = metadata
        self._subset = items

    @classmethod
    def from_metadata(cls, subset: Iterable[T], metadata: PageMetadata) -> "PagedList[T]":
        """Wrap an already fetched subset with previously computed metadata."""
        if not isinstance(metadata, PageMetadata):
            raise InvalidArgumentError(
                f"metadata = {metadata!r}. metadata must be a PageMetadata."
            )
        paged = cls.__new__(cls)
        paged._init(subset, metadata)
        return paged

    @classmethod
    def from_subset(
        cls,
        subset: Iterable[T],
        page_number: int,
        page_size: int,
        total_item_count: int,
    ) -> "PagedList[T]":
        """
        Wrap a subset the caller has already cut from the superset.

        Args:
            subset: Items of the requested page, in superset order
            page_number: Page the subset belongs to (1-indexed)
            page_size: Maximum number of items on any page
            total_item_count: Size of the superset

        Returns:
            PagedList holding the given items
        """
        metadata = compute_page_metadata(page_number, page_size, total_item_count)
        return cls.from_metadata(subset, metadata)

    @classmethod
    def from_sequence(
        cls,
        superset: Sequence[T],
        page_number: int,
        page_size: int | None = None,
    ) -> "PagedList[T]":
        """Cut one page out of an in-memory sequence."""
        provider = SequenceProvider(superset)
        return cls(page_number, _resolve_page_size(page_size), provider.count(), provider)

    @classmethod
    def from_query(
        cls,
        session: Session,
        statement: Select,
        page_number: int,
        page_size: int | None = None,
    ) -> "PagedList[Any]":
        """
        Run a counted, offset/limited select for one page.

        Args:
            session: Database session
            statement: Ordered select statement over the whole superset
            page_number: Requested page (1-indexed)
            page_size: Items per page; the configured default when omitted

        Returns:
            PagedList of the scalar rows on the page
        """
        page_size = _resolve_page_size(page_size)
        # Reject bad arguments before touching the database
        compute_page_metadata(page_number, page_size, 0)
        provider = QueryProvider(session, statement)
        return cls(page_number, page_size, provider.count(), provider)

    @classmethod
    async def from_async_provider(
        cls,
        page_number: int,
        page_size: int,
        total_item_count: int,
        provider: Callable[[PageMetadata], Awaitable[Iterable[T]]],
    ) -> "PagedList[T]":
        """Build a page whose subset is fetched by a coroutine function."""
        metadata = compute_page_metadata(page_number, page_size, total_item_count)
        subset: Iterable[T] = ()
        if metadata.total_item_count > 0:
            logger.debug(f"Awaiting page {metadata.page_number} of {metadata.page_count}")
            subset = await provider(metadata)
        return cls.from_metadata(subset, metadata)

    @property
    def metadata(self) -> PageMetadata:
        return self._metadata

    @property
    def count(self) -> int:
        """Number of items actually present on this page."""
        return len(self._subset)

    def get(self, index: int) -> T:
        """
        Get the item at a zero-based index within this page.

        Negative indices are not counted from the end.

        Raises:
            IndexOutOfRangeError: index is outside [0, count)
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"PagedList indices must be integers, not {type(index).__name__}")
        if index < 0 or index >= len(self._subset):
            raise IndexOutOfRangeError(
                f"index = {index}. Page holds {len(self._subset)} items."
            )
        return self._subset[index]

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._subset)

    def __iter__(self) -> Iterator[T]:
        return iter(self._subset)

    def __bool__(self) -> bool:
        return bool(self._subset)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PagedList):
            return NotImplemented
        return self._metadata == other._metadata and self._subset == other._subset

    __hash__ = None

    def __getattr__(self, name: str) -> Any:
        if name in _METADATA_ATTRIBUTES:
            return getattr(self._metadata, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        return (
            f"PagedList(page_number={self._metadata.page_number}, "
            f"page_size={self._metadata.page_size}, "
            f"total_item_count={self._metadata.total_item_count}, "
            f"count={len(self._subset)})"
        )

    def get_metadata(self) -> PageMetadata:
        """
        Legacy accessor for the page metadata without the items.

        Deprecated: read the ``metadata`` property instead.
        """
        warnings.warn(
            "PagedList.get_metadata() is deprecated; use PagedList.metadata",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._metadata


def to_paged_list(
    superset: Sequence[T],
    page_number: int,
    page_size: int | None = None,
) -> PagedList[T]:
    """Shortcut for PagedList.from_sequence()."""
    return PagedList.from_sequence(superset, page_number, page_size)
