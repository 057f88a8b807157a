"""
Book Persistence Gateway

All reads and writes of Book rows go through BookGateway. Routers never
touch the session directly, which keeps each endpoint to a single gateway
call and makes the storage logic testable without HTTP.

Every call is one transaction, reads included: it ends with a commit (or
a rollback and re-raise on a database error), so the session returns its
connection to the pool before the call returns. The in-memory engine has
a single connection, and a request holding it any longer would block
every other request.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from swift_api.models import Book
from swift_api.schemas import BookInput

logger = logging.getLogger(__name__)

DEFAULT_SKIP = 0
DEFAULT_LIMIT = 100


class BookGateway:
    """
    Thin data-access layer over the books table.

    Lookups that miss return None; translating that into an HTTP 404 is the
    router's job.

    Usage:
        gateway = BookGateway(db)
        book = gateway.create(BookInput(...))
        same = gateway.get(book.id)
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def list(self, skip: int = DEFAULT_SKIP, limit: int = DEFAULT_LIMIT) -> Sequence[Book]:
        """Return up to `limit` books after skipping `skip`, in insertion order."""
        stmt = select(Book).order_by(Book.id).offset(skip).limit(limit)
        books = self.db.execute(stmt).scalars().all()
        self._commit()
        return books

    def get(self, book_id: int) -> Book | None:
        """Return the book with this id, or None."""
        book = self.db.get(Book, book_id)
        self._commit()
        return book

    def count(self) -> int:
        """Number of stored books."""
        total = self.db.execute(select(func.count(Book.id))).scalar() or 0
        self._commit()
        return total

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def create(self, book_in: BookInput) -> Book:
        """Insert a new book and return it with its assigned id."""
        book = Book(
            title=book_in.title,
            author=book_in.author,
            date_published=book_in.date_published,
            cover_image=book_in.cover_image,
        )
        self.db.add(book)
        # The flush inside commit assigns the id; nothing else is server-generated
        self._commit()

        logger.debug(f"Created book {book.id}")
        return book

    def update(self, book_id: int, book_in: BookInput) -> Book | None:
        """
        Overwrite all four content fields of an existing book.

        The lookup and the write share one transaction.

        Returns:
            The updated book, or None if no book has this id
        """
        book = self.db.get(Book, book_id)
        if book is None:
            self._commit()
            return None

        book.title = book_in.title
        book.author = book_in.author
        book.date_published = book_in.date_published
        book.cover_image = book_in.cover_image
        self._commit()

        logger.debug(f"Updated book {book_id}")
        return book

    def delete(self, book_id: int) -> Book | None:
        """
        Remove a book.

        Returns:
            The book as it was before deletion, or None if no book has this id
        """
        book = self.db.get(Book, book_id)
        if book is None:
            self._commit()
            return None

        self.db.delete(book)
        self._commit()

        logger.debug(f"Deleted book {book_id}")
        return book

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
