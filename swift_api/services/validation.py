"""
Book Validation Policy

Rules on a BookInput that depend on configuration rather than on the
shape of the payload:

- title/author length limit (ENFORCE_LENGTH_LIMITS, MAX_TEXT_LENGTH)
- coverImage must be an absolute http/https/ftp URL (REQUIRE_COVER_URL)

collect_violations() returns every broken rule at once. Routers call
ensure_valid() from a dependency, before any database work happens.
"""

from pydantic import AnyUrl, BaseModel, TypeAdapter, ValidationError

from swift_api.config import Settings
from swift_api.schemas import BookInput, FieldViolation

ALLOWED_URL_SCHEMES = {"http", "https", "ftp"}

_url_adapter = TypeAdapter(AnyUrl)


class ValidationPolicy(BaseModel):
    """Switchable validation rules for book input."""

    enforce_length_limits: bool = True
    max_text_length: int = 100
    require_cover_url: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "ValidationPolicy":
        return cls(
            enforce_length_limits=settings.enforce_length_limits,
            max_text_length=settings.max_text_length,
            require_cover_url=settings.require_cover_url,
        )


class BookValidationError(Exception):
    """Raised when a BookInput breaks one or more policy rules."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = violations
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Invalid book input: {fields}")


def is_well_formed_url(value: str) -> bool:
    """
    Check that value is an absolute URL with an allowed scheme and a host.

    Examples:
        is_well_formed_url("https://example.com/a.jpg")  # True
        is_well_formed_url("example.com/a.jpg")          # False
        is_well_formed_url("mailto:someone@example.com") # False
    """
    try:
        url = _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return url.scheme in ALLOWED_URL_SCHEMES and bool(url.host)


def collect_violations(
    book_in: BookInput,
    policy: ValidationPolicy,
) -> list[FieldViolation]:
    """
    Apply the policy to a book payload.

    Args:
        book_in: Payload that already passed schema validation
        policy: Active validation policy

    Returns:
        List of violations, empty if the payload is acceptable
    """
    violations: list[FieldViolation] = []

    if policy.enforce_length_limits:
        limit = policy.max_text_length
        for field in ("title", "author"):
            if len(getattr(book_in, field)) > limit:
                violations.append(
                    FieldViolation(
                        field=field,
                        message=f"Must be at most {limit} characters",
                    )
                )

    if policy.require_cover_url and not is_well_formed_url(book_in.cover_image):
        violations.append(
            FieldViolation(
                field="coverImage",
                message="Must be a well-formed http, https or ftp URL",
            )
        )

    return violations


def ensure_valid(book_in: BookInput, policy: ValidationPolicy) -> BookInput:
    """
    Return book_in unchanged if it satisfies the policy.

    Raises:
        BookValidationError: With every violated rule
    """
    violations = collect_violations(book_in, policy)
    if violations:
        raise BookValidationError(violations)
    return book_in
