"""
FastAPI Dependencies Module

Reusable components injected into route handlers with Depends().

Instead of writing:
    def get_book(db: Session = Depends(get_db)):

routes declare:
    def get_book(books: BookStore):
"""

from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.orm import Session

from swift_api.config import get_settings
from swift_api.database import get_db
from swift_api.schemas import BookInput
from swift_api.services.books import DEFAULT_LIMIT, DEFAULT_SKIP, BookGateway
from swift_api.services.validation import ValidationPolicy, ensure_valid

settings = get_settings()

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Persistence Gateway
# =============================================================================
def get_book_gateway(db: DbSession) -> BookGateway:
    """Gateway bound to the request's database session."""
    return BookGateway(db)


BookStore = Annotated[BookGateway, Depends(get_book_gateway)]


# =============================================================================
# Validated Book Input
# =============================================================================
def get_validation_policy() -> ValidationPolicy:
    """Validation policy built from the current settings."""
    return ValidationPolicy.from_settings(get_settings())


Policy = Annotated[ValidationPolicy, Depends(get_validation_policy)]


def get_valid_book_input(book_in: BookInput, policy: Policy) -> BookInput:
    """
    Request body, checked against the validation policy.

    Resolved before the route body runs, so an invalid payload is
    rejected without touching the database.

    Raises:
        BookValidationError: If the payload breaks a policy rule
    """
    return ensure_valid(book_in, policy)


ValidBookInput = Annotated[BookInput, Depends(get_valid_book_input)]


# =============================================================================
# Path and Query Bounds
# =============================================================================
# SQLite integers are signed 64-bit; a larger value cannot even be bound as
# a query parameter, so it is rejected as a 400 before reaching the store.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1

BookId = Annotated[
    int,
    Path(
        ge=SQLITE_MIN_INTEGER,
        le=SQLITE_MAX_INTEGER,
        description="Id assigned to the book on creation",
    ),
]


class OffsetParams:
    """
    skip/limit query parameters for GET /books.

    limit is capped at MAX_LIST_LIMIT so a single request cannot pull the
    whole table. The cap is read from the settings once, when this module
    is imported, so changing MAX_LIST_LIMIT takes effect only after a
    restart.
    """

    def __init__(
        self,
        skip: int = Query(
            default=DEFAULT_SKIP,
            ge=0,
            le=SQLITE_MAX_INTEGER,
            description="Number of books to skip",
            examples=[0, 100],
        ),
        limit: int = Query(
            default=DEFAULT_LIMIT,
            ge=0,
            le=settings.max_list_limit,
            description=f"Maximum number of books to return (max {settings.max_list_limit})",
            examples=[10, 100],
        ),
    ) -> None:
        self.skip = skip
        self.limit = limit


Offset = Annotated[OffsetParams, Depends()]
