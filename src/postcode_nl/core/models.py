from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Generic, Iterator, TypeVar


@dataclass(frozen=True)
class Address:
    street: str
    house_number: int
    postcode: str
    city: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ExtendedAddress:
    street: str
    house_number: int
    postcode: str
    city: str
    municipality: str
    province: str
    coordinates: Coordinates

    def to_address(self) -> Address:
        """Basic address subset, equal to what the simple endpoint reports."""
        return Address(
            street=self.street,
            house_number=self.house_number,
            postcode=self.postcode,
            city=self.city,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ApiLimits:
    """
    Usage counters reported by the API with every response.

    Values come straight from response headers. A field is None when the
    header was missing or could not be parsed. The length of the rate
    window is not reported and is not assumed here.
    """

    ratelimit_limit: int | None = None
    ratelimit_remaining: int | None = None
    api_limit: int | None = None
    api_remaining: int | None = None
    api_reset: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


A = TypeVar("A", Address, ExtendedAddress)


@dataclass(frozen=True)
class LookupResult(Generic[A]):
    """
    Outcome of a lookup that reached the API and got a usable answer.

    NOT_FOUND is a regular result: the request still counted against the
    quota, so limits are always present. Failures are raised, not returned.
    """

    status: LookupStatus
    address: A | None
    limits: ApiLimits

    @classmethod
    def found_address(cls, address: A, limits: ApiLimits) -> LookupResult[A]:
        return cls(status=LookupStatus.FOUND, address=address, limits=limits)

    @classmethod
    def not_found(cls, limits: ApiLimits) -> LookupResult[A]:
        return cls(status=LookupStatus.NOT_FOUND, address=None, limits=limits)

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def __iter__(self) -> Iterator[Any]:
        # address, limits = await client.get_address(...)
        yield self.address
        yield self.limits

    def to_dict(self) -> dict[str, Any]:
        return {
            "found": self.found,
            "address": self.address.to_dict() if self.address else None,
            "limits": self.limits.to_dict(),
        }
