from __future__ import annotations

import re

from postcode_nl.core.errors import InvalidHouseNumber, InvalidPostcodeFormat

# Four digits, not starting with zero, then two letters. No spaces anywhere.
_POSTCODE = re.compile(r"^[1-9][0-9]{3}[A-Za-z]{2}$")

MAX_HOUSE_NUMBER = 99999


def validate_postcode(postcode: str) -> str:
    """
    Check a Dutch postcode before it is sent to the API.

    Input is not trimmed or otherwise repaired: '1012 RJ' and ' 1012RJ' are
    rejected. Letters are accepted in any case and returned upper-cased.

    Raises InvalidPostcodeFormat.
    """
    if not isinstance(postcode, str) or not _POSTCODE.fullmatch(postcode):
        raise InvalidPostcodeFormat(postcode)
    return postcode.upper()


def validate_house_number(house_number: int) -> int:
    """Raises InvalidHouseNumber unless 1 <= house_number <= MAX_HOUSE_NUMBER."""
    # bool is an int subclass; True is not a house number
    if isinstance(house_number, bool) or not isinstance(house_number, int):
        raise InvalidHouseNumber(house_number)
    if not 1 <= house_number <= MAX_HOUSE_NUMBER:
        raise InvalidHouseNumber(house_number)
    return house_number


def validate_query(postcode: str, house_number: int) -> tuple[str, int]:
    return validate_postcode(postcode), validate_house_number(house_number)
