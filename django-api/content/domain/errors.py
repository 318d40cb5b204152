"""Domain error codes for the content module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    CONTENT_NOT_FOUND = "CONTENT_NOT_FOUND"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message.

    ``detail`` is for logs only and never sent to clients.
    """

    code: ErrorCode
    message: str
    detail: str = ""

    def __str__(self) -> str:
        text = f"{self.code.value}: {self.message}"
        return f"{text} ({self.detail})" if self.detail else text


class TransportError(DomainError):
    """Raised when the CMS answers with a non-2xx status or cannot be reached."""

    def __init__(self, detail: str, status: int | None = None, body: str = "") -> None:
        super().__init__(
            code=ErrorCode.TRANSPORT_ERROR,
            message="Content server unavailable",
            detail=detail,
        )
        self.status = status
        self.body = body


class MalformedResponseError(DomainError):
    """Raised when a CMS payload does not have the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_RESPONSE,
            message="Unexpected response from content server",
            detail=detail,
        )


class ContentNotFoundError(DomainError):
    """Raised when a detail lookup by slug matches nothing."""

    def __init__(self, content_type: str, slug: str) -> None:
        super().__init__(
            code=ErrorCode.CONTENT_NOT_FOUND,
            message=f"{content_type} not found",
        )
        self.content_type = content_type
        self.slug = slug
