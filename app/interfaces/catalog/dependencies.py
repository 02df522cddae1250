"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into resource handlers via constructor injection.
These are the composition root for the catalog context; tests replace
``get_engine`` through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.catalog.authors import AuthorHandler
from app.application.catalog.books import BookHandler
from app.core.config import settings
from app.domain.catalog.ports import LoggerService
from app.infrastructure.catalog.author_repository import SqlAuthorRepository
from app.infrastructure.catalog.book_repository import SqlBookRepository
from app.infrastructure.catalog.logger_service import StandardLoggerService
from app.infrastructure.catalog.tables import build_engine


@lru_cache(maxsize=1)
def _default_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return build_engine(settings.database_url, echo=settings.database_echo)


def get_engine() -> Engine:
    """Return the shared engine."""
    return _default_engine()


def get_logger_service() -> LoggerService:
    """Return the logger used as the handlers' side channel."""
    return StandardLoggerService()


def get_author_handler(
    engine: Engine = Depends(get_engine),
    logger: LoggerService = Depends(get_logger_service),
) -> AuthorHandler:
    """Build AuthorHandler with its infrastructure dependencies."""
    return AuthorHandler(repository=SqlAuthorRepository(engine), logger=logger)


def get_book_handler(
    engine: Engine = Depends(get_engine),
    logger: LoggerService = Depends(get_logger_service),
) -> BookHandler:
    """Build BookHandler with its infrastructure dependencies."""
    return BookHandler(repository=SqlBookRepository(engine), logger=logger)
