"""
Books Router

CRUD endpoints for the book catalog. Each endpoint makes exactly one
BookGateway call and maps the result to a status code:

    POST   /books        201 + Location header, 400 on invalid input
    GET    /books        200, list (skip/limit)
    GET    /books/{id}   200, 404 if unknown
    PUT    /books/{id}   204, 404 if unknown, 400 on invalid input
    DELETE /books/{id}   200 with the deleted book, 404 if unknown

An id outside the 64-bit integer range is a 400, like any other
malformed id. Reads and writes draw on separate per-client rate limits
(429 once exhausted).
"""

from fastapi import APIRouter, HTTPException, Request, Response, status

from swift_api.dependencies import BookId, BookStore, Offset, ValidBookInput
from swift_api.schemas import BookResponse, ValidationErrorResponse
from swift_api.services.rate_limiter import read_limit, write_limit

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
        429: {"description": "Rate limit for book reads or writes exceeded"},
    },
)


# =============================================================================
# Helper Functions
# =============================================================================
def book_not_found(book_id: int) -> HTTPException:
    """Build the 404 raised for an unknown book id."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Book with id {book_id} not found",
    )


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book. The response carries a Location header for the new resource.",
    responses={400: {"model": ValidationErrorResponse}},
    operation_id="CreateBook",
)
@write_limit
def create_book(
    request: Request,
    response: Response,
    book_in: ValidBookInput,
    books: BookStore,
) -> BookResponse:
    """
    Create a new book.

    Args:
        book_in: Validated book data from request body
        books: Book gateway

    Returns:
        Created book including its id
    """
    book = books.create(book_in)
    response.headers["Location"] = f"/books/{book.id}"
    return BookResponse.model_validate(book)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
    description="List books in insertion order using skip/limit.",
    operation_id="GetBooks",
)
@read_limit
def list_books(
    request: Request,
    offset: Offset,
    books: BookStore,
) -> list[BookResponse]:
    """
    List books, skipping `skip` and returning at most `limit`.

    Examples:
        GET /books
        GET /books?skip=20&limit=10
    """
    return [
        BookResponse.model_validate(book)
        for book in books.list(skip=offset.skip, limit=offset.limit)
    ]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    operation_id="GetBook",
)
@read_limit
def get_book(
    request: Request,
    book_id: BookId,
    books: BookStore,
) -> BookResponse:
    """
    Get a single book by its ID.

    Raises:
        HTTPException: 404 if book not found
    """
    book = books.get(book_id)
    if book is None:
        raise book_not_found(book_id)
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a book",
    description="Overwrite all fields of an existing book. Partial updates are not supported.",
    responses={400: {"model": ValidationErrorResponse}},
    operation_id="UpdateBook",
)
@write_limit
def update_book(
    request: Request,
    book_id: BookId,
    book_in: ValidBookInput,
    books: BookStore,
) -> None:
    """
    Replace an existing book.

    Returns 204 No Content on success.

    Raises:
        HTTPException: 404 if book not found
    """
    if books.update(book_id, book_in) is None:
        raise book_not_found(book_id)


@router.delete(
    "/{book_id}",
    response_model=BookResponse,
    summary="Delete a book",
    description="Delete a book and return its final state.",
    operation_id="DeleteBook",
)
@write_limit
def delete_book(
    request: Request,
    book_id: BookId,
    books: BookStore,
) -> BookResponse:
    """
    Delete a book.

    Unlike a bare 204, the deleted record is echoed back so the client
    keeps its last state.

    Raises:
        HTTPException: 404 if book not found
    """
    book = books.delete(book_id)
    if book is None:
        raise book_not_found(book_id)
    return BookResponse.model_validate(book)
