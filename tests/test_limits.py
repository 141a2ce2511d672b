from __future__ import annotations

import httpx

from postcode_nl.core.models import ApiLimits
from postcode_nl.infra.providers.postcode_tech import extract_limits


def test_all_headers_present():
    limits = extract_limits(
        httpx.Headers(
            {
                "X-RateLimit-Limit": "600",
                "X-RateLimit-Remaining": "12",
                "X-Api-Limit": "10000",
                "X-Api-Remaining": "9000",
                "X-Api-Reset": "2026-10-18T00:00:00+02:00",
            }
        )
    )
    assert limits == ApiLimits(
        ratelimit_limit=600,
        ratelimit_remaining=12,
        api_limit=10000,
        api_remaining=9000,
        api_reset="2026-10-18T00:00:00+02:00",
    )


def test_header_names_are_case_insensitive():
    limits = extract_limits({"x-ratelimit-remaining": "5", "X-API-REMAINING": "77"})
    assert limits.ratelimit_remaining == 5
    assert limits.api_remaining == 77


def test_garbled_values_become_none():
    limits = extract_limits(
        {
            "X-RateLimit-Limit": "lots",
            "X-RateLimit-Remaining": "",
            "X-Api-Limit": "10000.5",
            "X-Api-Remaining": " 42 ",
            "X-Api-Reset": "   ",
        }
    )
    assert limits.ratelimit_limit is None
    assert limits.ratelimit_remaining is None
    assert limits.api_limit is None
    assert limits.api_remaining == 42
    assert limits.api_reset is None


def test_no_headers():
    assert extract_limits({}) == ApiLimits()


def test_counters_accept_plain_digits_only():
    limits = extract_limits(
        {
            "X-RateLimit-Limit": "+600",
            "X-RateLimit-Remaining": "-3",
            "X-Api-Limit": "10_000",
            "X-Api-Remaining": "９８",
        }
    )
    assert limits == ApiLimits()
