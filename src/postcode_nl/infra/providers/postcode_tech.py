from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, ValidationError as PydanticValidationError

from postcode_nl.core.errors import (
    DecodeFailure,
    InvalidRequest,
    RateLimited,
    Unauthorized,
    UnexpectedResponse,
)
from postcode_nl.core.models import Address, ApiLimits, Coordinates, ExtendedAddress, LookupResult
from postcode_nl.infra.http import HttpClient

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://postcode.tech"
SIMPLE_PATH = "/api/v1/postcode"
FULL_PATH = "/api/v1/postcode/full"

HEADER_RATELIMIT_LIMIT = "x-ratelimit-limit"
HEADER_RATELIMIT_REMAINING = "x-ratelimit-remaining"
HEADER_API_LIMIT = "x-api-limit"
HEADER_API_REMAINING = "x-api-remaining"
HEADER_API_RESET = "x-api-reset"

_DETAIL_MAX_CHARS = 200


class SimpleAddressPayload(BaseModel):
    """Body of /api/v1/postcode. Only street and city are guaranteed."""

    street: str
    city: str
    postcode: str | None = None
    number: int | None = None


class GeoPayload(BaseModel):
    lat: float
    lon: float


class FullAddressPayload(BaseModel):
    postcode: str
    number: int
    street: str
    city: str
    municipality: str
    province: str
    geo: GeoPayload


def _header_int(headers: Mapping[str, str], name: str) -> int | None:
    raw = headers.get(name)
    if raw is None:
        return None
    value = raw.strip()
    # counters only: no sign, no underscores, no non-ASCII digits
    if not (value.isascii() and value.isdigit()):
        log.debug("Ignoring unparsable %s header: %r", name, raw)
        return None
    return int(value)


def extract_limits(headers: Mapping[str, str]) -> ApiLimits:
    """
    Read usage counters from response headers.

    Lookups go through httpx.Headers, so names match case-insensitively.
    Missing or garbled headers leave the field as None.
    """
    if not isinstance(headers, httpx.Headers):
        headers = httpx.Headers(headers)

    reset = headers.get(HEADER_API_RESET)
    return ApiLimits(
        ratelimit_limit=_header_int(headers, HEADER_RATELIMIT_LIMIT),
        ratelimit_remaining=_header_int(headers, HEADER_RATELIMIT_REMAINING),
        api_limit=_header_int(headers, HEADER_API_LIMIT),
        api_remaining=_header_int(headers, HEADER_API_REMAINING),
        api_reset=(reset.strip() or None) if reset is not None else None,
    )


def _excerpt(response: httpx.Response) -> str:
    text = response.text.strip()
    if len(text) > _DETAIL_MAX_CHARS:
        return text[:_DETAIL_MAX_CHARS] + "..."
    return text


def parse_address(payload: Any, *, postcode: str, house_number: int) -> Address:
    """
    Build an Address from a decoded response body.

    The simple endpoint omits postcode and number, so the queried values
    fill in for them. A full payload carries both and they take precedence.
    """
    try:
        body = SimpleAddressPayload.model_validate(payload)
    except PydanticValidationError as e:
        raise DecodeFailure(str(e)) from e

    return Address(
        street=body.street,
        house_number=body.number if body.number is not None else house_number,
        postcode=body.postcode if body.postcode is not None else postcode,
        city=body.city,
    )


def parse_extended_address(payload: Any) -> ExtendedAddress:
    try:
        body = FullAddressPayload.model_validate(payload)
    except PydanticValidationError as e:
        raise DecodeFailure(str(e)) from e

    return ExtendedAddress(
        street=body.street,
        house_number=body.number,
        postcode=body.postcode,
        city=body.city,
        municipality=body.municipality,
        province=body.province,
        coordinates=Coordinates(lat=body.geo.lat, lon=body.geo.lon),
    )


def interpret_response(
    response: httpx.Response,
    *,
    postcode: str,
    house_number: int,
    extended: bool,
) -> LookupResult[Any]:
    """
    Map one API response onto a LookupResult or raise a ClientError.

    200 and 404 are both results; 404 only means no address exists for the
    postcode/number combination.
    """
    status = response.status_code
    limits = extract_limits(response.headers)

    if status == httpx.codes.NOT_FOUND:
        return LookupResult.not_found(limits)

    if status in (httpx.codes.UNAUTHORIZED, httpx.codes.FORBIDDEN):
        raise Unauthorized(status)

    if status == httpx.codes.TOO_MANY_REQUESTS:
        raise RateLimited(limits)

    if status in (httpx.codes.BAD_REQUEST, httpx.codes.UNPROCESSABLE_ENTITY):
        raise InvalidRequest(status, _excerpt(response))

    if status != httpx.codes.OK:
        log.warning("Unexpected API status %s", status)
        raise UnexpectedResponse(status, _excerpt(response))

    try:
        payload = response.json()
    except ValueError as e:
        raise DecodeFailure(f"body is not JSON: {e}") from e

    if extended:
        return LookupResult.found_address(parse_extended_address(payload), limits)
    return LookupResult.found_address(
        parse_address(payload, postcode=postcode, house_number=house_number),
        limits,
    )


class PostcodeTechProvider:
    def __init__(self, *, http: HttpClient, api_token: str, base_url: str = DEFAULT_BASE_URL) -> None:
        self._http = http
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")

    async def lookup(self, postcode: str, house_number: int, *, extended: bool) -> LookupResult[Any]:
        """
        Query the API for an already validated postcode and house number.

        Exactly one request is sent. Nothing is retried.
        """
        url = self._base_url + (FULL_PATH if extended else SIMPLE_PATH)
        params = {"postcode": postcode, "number": str(house_number)}
        headers = {"Authorization": f"Bearer {self._api_token}"}

        log.debug("GET %s postcode=%s number=%s", url, postcode, house_number)
        response = await self._http.get(url, params=params, headers=headers)
        log.debug("API answered %s for %s %s", response.status_code, postcode, house_number)

        return interpret_response(
            response,
            postcode=postcode,
            house_number=house_number,
            extended=extended,
        )
