"""Exception hierarchy for the Câmara open-data client."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class CamaraClientError(Exception):
    """Base exception for every error raised by the client."""

    message: str

    def __str__(self) -> str:
        return self.message


# ---------------------------------- caller input ----------------------------------#

@dataclass
class InvalidInputError(CamaraClientError, ValueError):
    """Raised when a date, time or identifier supplied by the caller is malformed."""

    value: Any = None


@dataclass
class UnknownOptionError(CamaraClientError, ValueError):
    """Raised when an option key is not accepted by the operation."""

    option: str = ""

    def __str__(self) -> str:
        return f"{self.option} is not a valid option: {self.message}"


@dataclass
class TypeMismatchError(CamaraClientError, TypeError):
    """Raised when an option value does not have the shape its kind requires."""

    option: str = ""
    expected: str = ""

    def __str__(self) -> str:
        return f"{self.option} should be {self.expected}: {self.message}"


# ---------------------------------- upstream data ---------------------------------#

@dataclass
class InvalidLinkError(CamaraClientError):
    """Raised when a page advertises a next page without a usable href."""


@dataclass
class MalformedResponseError(CamaraClientError):
    """Raised when a response body is not a valid {dados, links} envelope."""

    url: Optional[str] = None

    def __str__(self) -> str:
        return f"Malformed response from {self.url}\n{self.message}"


# ---------------------------------- HTTP status -----------------------------------#

@dataclass
class HTTPStatusError(CamaraClientError):
    """Base for non-2xx responses."""

    url: Optional[str] = None
    status_code: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.status_code} for {self.url}: {self.message}"


@dataclass
class BadRequestError(HTTPStatusError):
    """Raised on HTTP 400."""


@dataclass
class NotFoundError(HTTPStatusError):
    """Raised on HTTP 404."""


@dataclass
class UpstreamServerError(HTTPStatusError):
    """Raised on HTTP 5xx. Never retried."""


@dataclass
class UnexpectedStatusError(HTTPStatusError):
    """Raised on any other non-2xx status (including exhausted 429 retries)."""


# ---------------------------------- transport -------------------------------------#

@dataclass
class TransportError(CamaraClientError):
    """Raised when the request never produced an HTTP response."""

    url: Optional[str] = None

    def __str__(self) -> str:
        return f"Request to {self.url} failed: {self.message}"
