"""
Book Pydantic Schemas

JSON bodies use camelCase keys (datePublished, coverImage). Snake_case keys
are accepted on input as well, since populate_by_name is enabled.

Shape rules live here: every field is required and text fields must not be
blank. The configurable rules (length limits, cover URL format) are applied
afterwards by swift_api.services.validation.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BookInput(BaseModel):
    """
    Schema for creating or fully replacing a book.

    PUT uses the same schema as POST: updates always overwrite all four
    fields, there are no partial updates.

    Example request body:
    {
        "title": "Dune",
        "author": "Frank Herbert",
        "datePublished": "1965-08-01T00:00:00",
        "coverImage": "https://example.com/dune.jpg"
    }
    """

    title: str = Field(
        ...,
        min_length=1,
        description="Book title",
        examples=["Dune", "Pride and Prejudice"],
    )

    author: str = Field(
        ...,
        min_length=1,
        description="Author name",
        examples=["Frank Herbert", "Jane Austen"],
    )

    date_published: datetime = Field(
        ...,
        description="Date of publication",
        examples=["1965-08-01T00:00:00"],
    )

    cover_image: str = Field(
        ...,
        min_length=1,
        description="Cover image URL",
        examples=["https://example.com/dune.jpg"],
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("title", "author", "cover_image")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Reject whitespace-only strings and trim surrounding whitespace."""
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()

    @field_validator("date_published")
    @classmethod
    def normalize_timezone(cls, v: datetime) -> datetime:
        """
        Store datetimes as naive UTC.

        SQLite has no timezone-aware datetime type, so an offset would be
        silently dropped on the way in. Converting first keeps the instant.
        """
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class BookResponse(BaseModel):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    date_published: datetime = Field(..., description="Date of publication")
    cover_image: str = Field(..., description="Cover image URL")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dune",
                "author": "Frank Herbert",
                "datePublished": "1965-08-01T00:00:00",
                "coverImage": "https://example.com/dune.jpg",
            }
        },
    )
