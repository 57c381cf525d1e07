"""RFC 9457 Problem Details for HTTP APIs.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> error = ErrorDetail(
        ...     field="email",
        ...     code="invalid_email",
        ...     message="Invalid email format",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        request_id: Optional request id echoed from ``X-Request-ID``

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/verification_failed",
        ...     title="Verification Failed",
        ...     status=400,
        ...     detail="Invalid or expired reset code.",
        ...     instance="/api/v1/password-resets",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/verification_failed"],
    )
    title: str = Field(..., description="Short, human-readable summary", examples=["Verification Failed"])
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Invalid or expired reset code."],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/password-resets"],
    )
    errors: list[ErrorDetail] | None = Field(None, description="List of field-specific errors")
    request_id: str | None = Field(None, description="Request id for debugging")
