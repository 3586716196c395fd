"""Page metadata calculation."""

import logging
from dataclasses import dataclass, fields

from pagedlist.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageMetadata:
    """
    Position and navigation data for one page of a larger ordered collection.

    Build instances with compute_page_metadata(). Direct construction is
    checked: every field must match what compute_page_metadata() derives from
    page_number, page_size and total_item_count, or InvalidArgumentError is
    raised.
    """

    page_number: int
    page_size: int
    total_item_count: int
    page_count: int
    first_item_on_page: int
    last_item_on_page: int
    is_first_page: bool
    is_last_page: bool
    has_previous_page: bool
    has_next_page: bool

    def __post_init__(self) -> None:
        expected = _derive_fields(self.page_number, self.page_size, self.total_item_count)
        for field in fields(self):
            value = getattr(self, field.name)
            if type(value) is not type(expected[field.name]) or value != expected[field.name]:
                raise InvalidArgumentError(
                    f"{field.name} = {value!r}. Expected {expected[field.name]!r} for "
                    f"page_number={self.page_number}, page_size={self.page_size}, "
                    f"total_item_count={self.total_item_count}."
                )

    @property
    def previous_page_number(self) -> int | None:
        """The previous page number, or None on the first page."""
        return self.page_number - 1 if self.has_previous_page else None

    @property
    def next_page_number(self) -> int | None:
        """The next page number, or None on the last page."""
        return self.page_number + 1 if self.has_next_page else None

    @property
    def offset(self) -> int:
        """Zero-based index of the page's first item within the superset."""
        if self.total_item_count == 0:
            return 0
        return self.first_item_on_page - 1

    @property
    def item_span(self) -> int:
        """Number of superset items the page covers."""
        if self.total_item_count == 0:
            return 0
        return self.last_item_on_page - self.first_item_on_page + 1


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} = {value!r}. {name} must be an integer."
        )


def _derive_fields(page_number: int, page_size: int, total_item_count: int) -> dict:
    _require_int("page_number", page_number)
    _require_int("page_size", page_size)
    _require_int("total_item_count", total_item_count)

    if page_number < 1:
        raise InvalidArgumentError(
            f"page_number = {page_number}. page_number cannot be below 1."
        )
    if page_size < 1:
        raise InvalidArgumentError(
            f"page_size = {page_size}. page_size cannot be less than 1."
        )
    if total_item_count < 0:
        raise InvalidArgumentError(
            f"total_item_count = {total_item_count}. total_item_count cannot be less than 0."
        )

    if total_item_count == 0:
        # No items, show the first (empty) page
        return {
            "page_number": 1,
            "page_size": page_size,
            "total_item_count": 0,
            "page_count": 0,
            "first_item_on_page": 0,
            "last_item_on_page": 0,
            "is_first_page": True,
            "is_last_page": True,
            "has_previous_page": False,
            "has_next_page": False,
        }

    page_count = (total_item_count + page_size - 1) // page_size
    page_number = min(page_number, page_count)

    first_item = (page_number - 1) * page_size + 1
    last_item = min(first_item + page_size - 1, total_item_count)

    return {
        "page_number": page_number,
        "page_size": page_size,
        "total_item_count": total_item_count,
        "page_count": page_count,
        "first_item_on_page": first_item,
        "last_item_on_page": last_item,
        "is_first_page": page_number == 1,
        "is_last_page": page_number == page_count,
        "has_previous_page": page_number > 1,
        "has_next_page": page_number < page_count,
    }


def compute_page_metadata(
    page_number: int,
    page_size: int,
    total_item_count: int,
) -> PageMetadata:
    """
    Calculate pagination metadata.

    A page number beyond the last page is limited to the last page. A page
    number below 1 is rejected, not raised to 1.

    Args:
        page_number: Requested page (1-indexed)
        page_size: Maximum number of items on any page
        total_item_count: Size of the whole collection

    Returns:
        PageMetadata for the (possibly clamped) page

    Raises:
        InvalidArgumentError: page_number < 1, page_size < 1 or
            total_item_count < 0
    """
    derived = _derive_fields(page_number, page_size, total_item_count)
    if total_item_count > 0 and derived["page_number"] < page_number:
        logger.debug(
            f"Requested page {page_number} exceeds page count {derived['page_count']}; using last page"
        )
    return PageMetadata(**derived)
