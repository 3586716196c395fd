"""Shared pytest fixtures."""

from collections.abc import Generator

import pytest
from sqlalchemy import Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from pagedlist.config import get_settings


class Base(DeclarativeBase):
    """Base class for test models."""
    pass


class Article(Base):
    """Minimal model to page through."""

    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """In-memory SQLite session with an empty articles table."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def articles(db_session):
    """Create 25 articles with ids 1..25."""
    rows = [Article(id=i, title=f"Article {i}") for i in range(1, 26)]
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def articles_query():
    """Select statement over all articles in id order."""
    return select(Article).order_by(Article.id)
