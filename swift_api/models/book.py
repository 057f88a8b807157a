"""
Book Model

The single persisted entity of the Books API.

The id is assigned by the database on insert and never changes. The four
content fields are all required and are replaced together on update.
Title and author carry plain (non-unique) indexes for lookups.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from swift_api.database import Base


class Book(Base):
    """
    Book model representing a catalog entry.

    Table: books

    Fields:
    - title: Book title (required, indexed)
    - author: Author name (required, indexed)
    - date_published: Publication date and time (required)
    - cover_image: Cover image reference, usually a URL (required)

    Example:
        book = Book(
            title="Dune",
            author="Frank Herbert",
            date_published=datetime(1965, 8, 1),
            cover_image="https://example.com/dune.jpg",
        )
    """

    __tablename__ = "books"
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted last row
    __table_args__ = {"sqlite_autoincrement": True}

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # -------------------------------------------------------------------------
    # Content Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String,
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String,
        index=True,
        nullable=False,
        comment="Author name"
    )

    date_published: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        comment="Date of publication"
    )

    cover_image: Mapped[str] = mapped_column(
        String,
        nullable=False,
        comment="Cover image URL"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
