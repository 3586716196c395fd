"""Subset providers that fetch the items of one page."""

import logging
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from pagedlist.metadata import PageMetadata

logger = logging.getLogger(__name__)

T_co = TypeVar("T_co", covariant=True)


class SubsetProvider(Protocol[T_co]):
    """
    Anything that returns the items of a page window.

    Implementations must return at most ``metadata.item_span`` items, in
    superset order, starting at ``metadata.offset``.
    """

    def __call__(self, metadata: PageMetadata) -> Sequence[T_co]: ...


class SequenceProvider:
    """Slice pages out of an in-memory sequence."""

    def __init__(self, superset: Sequence[Any]):
        self.superset = superset

    def count(self) -> int:
        return len(self.superset)

    def __call__(self, metadata: PageMetadata) -> Sequence[Any]:
        start = metadata.offset
        return self.superset[start:start + metadata.item_span]


class QueryProvider:
    """
    Fetch pages from a SQLAlchemy select statement.

    The statement should carry its own ORDER BY; without one the database is
    free to return rows in any order and pages may overlap.
    """

    def __init__(self, session: Session, statement: Select):
        self.session = session
        self.statement = statement

    def count(self) -> int:
        """Count the rows the statement would return."""
        count_query = select(func.count()).select_from(self.statement.subquery())
        total = self.session.execute(count_query).scalar() or 0
        logger.debug(f"Counted {total} rows for paged query")
        return total

    def __call__(self, metadata: PageMetadata) -> Sequence[Any]:
        query = self.statement.offset(metadata.offset).limit(metadata.item_span)
        rows = self.session.execute(query).scalars().all()
        logger.debug(
            f"Fetched {len(rows)} rows for page {metadata.page_number} "
            f"(offset={metadata.offset}, limit={metadata.item_span})"
        )
        return rows
