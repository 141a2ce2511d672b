from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from postcode_nl.core.models import ApiLimits


class PostcodeError(Exception):
    """Base error for postcode-nl."""


class ValidationError(PostcodeError):
    """Raised when input validation fails. Never reaches the network."""


class InvalidPostcodeFormat(ValidationError):
    def __init__(self, postcode: object) -> None:
        self.postcode = postcode
        super().__init__(f"Postcodes should be formatted as '1234AB', got: {postcode!r}")


class InvalidHouseNumber(ValidationError):
    def __init__(self, house_number: object) -> None:
        self.house_number = house_number
        super().__init__(f"House number must be a positive integer, got: {house_number!r}")


class ClientError(PostcodeError):
    """Raised when a request to the API did not produce a usable result."""


class Unauthorized(ClientError):
    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"API rejected the token (HTTP {status})")


class RateLimited(ClientError):
    """The daily quota or the rate window is exhausted."""

    def __init__(self, limits: ApiLimits) -> None:
        self.limits = limits
        super().__init__("API limits exceeded")


class UnexpectedResponse(ClientError):
    def __init__(self, status: int, detail: str) -> None:
        self.status = status
        self.detail = detail
        super().__init__(f"Received error from API, code: {status}, {detail}")


class InvalidRequest(UnexpectedResponse):
    """The API refused input that passed local validation."""


class DecodeFailure(ClientError):
    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to deserialize API response, {detail}")


class TransportFailure(ClientError):
    """DNS, connect, read or timeout error below the HTTP layer."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Error contacting API, {detail}")
