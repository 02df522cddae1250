"""
Relational schema for the catalog.

Declared with SQLAlchemy Core so the same definitions work on SQLite
(local development, tests) and PostgreSQL.
"""

from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine, RowMapping

from app.domain.catalog.entities import Author, Book

metadata = MetaData()

authors = Table(
    "authors",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("bio", Text, nullable=True),
)

books = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("year", Integer, nullable=True),
    Column("isbn", String(50), nullable=True, unique=True),
    Column("summary", Text, nullable=True),
    Column("image", String(500), nullable=True),
    Column("price", Float, nullable=True),
    Column(
        "author_id",
        Integer,
        ForeignKey("authors.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    ),
)


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """Build a SQLAlchemy engine for the catalog database.

    SQLite does not enforce foreign keys unless asked to on every
    connection, so a connect hook turns them on.

    Args:
        database_url: SQLAlchemy URL, e.g. ``sqlite:///./bookstore.db``.
        echo: Log every SQL statement.
        **kwargs: Passed through to ``create_engine``.
    """
    if database_url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        engine = create_engine(database_url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(database_url, echo=echo, pool_pre_ping=True, **kwargs)


def create_schema(engine: Engine) -> None:
    """Create the catalog tables if they do not exist yet."""
    metadata.create_all(engine)


def author_values(author: Author) -> dict:
    """Column values for an author row, without the id."""
    return {
        "first_name": author.first_name,
        "last_name": author.last_name,
        "bio": author.bio,
    }


def book_values(book: Book) -> dict:
    """Column values for a book row, without the id."""
    return {
        "title": book.title,
        "year": book.year,
        "isbn": book.isbn,
        "summary": book.summary,
        "image": book.image,
        "price": book.price,
        "author_id": book.author_id,
    }


def author_from_row(row: RowMapping, owned_books: list[Book] | None = None) -> Author:
    return Author(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        bio=row["bio"],
        books=owned_books or [],
    )


def book_from_row(row: RowMapping, author: Author | None = None) -> Book:
    return Book(
        id=row["id"],
        title=row["title"],
        year=row["year"],
        isbn=row["isbn"],
        summary=row["summary"],
        image=row["image"],
        price=row["price"],
        author_id=row["author_id"],
        author=author,
    )
