from __future__ import annotations

import pytest

from postcode_nl.core.errors import InvalidHouseNumber, InvalidPostcodeFormat, ValidationError
from postcode_nl.core.validation import (
    MAX_HOUSE_NUMBER,
    validate_house_number,
    validate_postcode,
    validate_query,
)


@pytest.mark.parametrize("pc", ["1012RJ", "1012rj", "1012Rj", "9999ZZ", "1000AA", "5611AZ"])
def test_valid_postcodes(pc: str):
    assert validate_postcode(pc) == pc.upper()


@pytest.mark.parametrize(
    "pc",
    [
        "abcdEF",
        "0123AB",
        "1012 RJ",
        " 1012RJ",
        "1012RJ ",
        "1012RJ\n",
        "101RJ",
        "10123RJ",
        "1012R",
        "1012RJX",
        "RJ1012",
        "1012R1",
        "",
        "１０１２RJ",
    ],
)
def test_invalid_postcodes(pc: str):
    with pytest.raises(InvalidPostcodeFormat) as exc_info:
        validate_postcode(pc)
    assert exc_info.value.postcode == pc


@pytest.mark.parametrize("pc", [None, 1012, b"1012RJ"])
def test_postcode_must_be_str(pc: object):
    with pytest.raises(InvalidPostcodeFormat):
        validate_postcode(pc)  # type: ignore[arg-type]


@pytest.mark.parametrize("n", [1, 2, 147, 1000, MAX_HOUSE_NUMBER])
def test_valid_house_numbers(n: int):
    assert validate_house_number(n) == n


@pytest.mark.parametrize("n", [0, -1, -147, MAX_HOUSE_NUMBER + 1])
def test_out_of_range_house_numbers(n: int):
    with pytest.raises(InvalidHouseNumber) as exc_info:
        validate_house_number(n)
    assert exc_info.value.house_number == n


@pytest.mark.parametrize("n", [True, False, 1.0, "147", "147A", None])
def test_house_number_must_be_int(n: object):
    with pytest.raises(InvalidHouseNumber):
        validate_house_number(n)  # type: ignore[arg-type]


def test_validation_errors_share_a_base():
    assert issubclass(InvalidPostcodeFormat, ValidationError)
    assert issubclass(InvalidHouseNumber, ValidationError)


def test_validate_query_checks_postcode_first():
    with pytest.raises(InvalidPostcodeFormat):
        validate_query("0000AA", 0)
    assert validate_query("1012rj", 147) == ("1012RJ", 147)
