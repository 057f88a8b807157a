"""
Pydantic Schemas Package

Request/response models, kept separate from the SQLAlchemy models so the
API contract can evolve independently of the table layout.
"""

from swift_api.schemas.book import BookInput, BookResponse
from swift_api.schemas.error import FieldViolation, ValidationErrorResponse

__all__ = [
    "BookInput",
    "BookResponse",
    "FieldViolation",
    "ValidationErrorResponse",
]
