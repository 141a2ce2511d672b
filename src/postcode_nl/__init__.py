"""postcode-nl: async client for the Netherlands postcode API at postcode.tech."""

from postcode_nl.core.errors import (
    ClientError,
    DecodeFailure,
    InvalidHouseNumber,
    InvalidPostcodeFormat,
    InvalidRequest,
    PostcodeError,
    RateLimited,
    TransportFailure,
    Unauthorized,
    UnexpectedResponse,
    ValidationError,
)
from postcode_nl.core.models import (
    Address,
    ApiLimits,
    Coordinates,
    ExtendedAddress,
    LookupResult,
    LookupStatus,
)
from postcode_nl.core.validation import validate_house_number, validate_postcode
from postcode_nl.infra.http import HttpClient
from postcode_nl.services.postcode_service import PostcodeClient

__all__ = [
    "PostcodeClient",
    "HttpClient",
    "Address",
    "ExtendedAddress",
    "Coordinates",
    "ApiLimits",
    "LookupResult",
    "LookupStatus",
    "validate_postcode",
    "validate_house_number",
    "PostcodeError",
    "ValidationError",
    "InvalidPostcodeFormat",
    "InvalidHouseNumber",
    "ClientError",
    "Unauthorized",
    "RateLimited",
    "UnexpectedResponse",
    "InvalidRequest",
    "DecodeFailure",
    "TransportFailure",
]
