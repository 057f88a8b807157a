"""
Error Response Schemas

Every validation failure, whether raised by FastAPI while parsing the
request or by the validation policy, is reported with this body.
"""

from pydantic import BaseModel, Field


class FieldViolation(BaseModel):
    """A single violated constraint."""

    field: str = Field(..., description="Name of the offending field", examples=["title"])
    message: str = Field(..., description="What is wrong with it", examples=["Field required"])


class ValidationErrorResponse(BaseModel):
    """Body of a 400 Bad Request response."""

    detail: str = Field(default="Validation failed")
    errors: list[FieldViolation] = Field(default=[])
