"""Exceptions raised by pagedlist."""


class PagedListError(Exception):
    """Base class for all pagedlist errors."""
    pass


class InvalidArgumentError(PagedListError, ValueError):
    """A page number, page size or item count outside its allowed range."""
    pass


class IndexOutOfRangeError(PagedListError, IndexError):
    """Indexed access outside the items present on the page."""
    pass
