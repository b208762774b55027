import pytest

from school_service.validation import validate_input


def test_valid_input_returns_none() -> None:
    assert validate_input("Green Valley", "12 Main Rd", 18.7, 78.9) is None
    assert validate_input("Green Valley", "12 Main Rd", 0, -180) is None


def test_empty_name_is_rejected_first() -> None:
    assert validate_input("", "addr", 1, 2) == "Name must be a non-empty string."
    assert validate_input("   ", "", "x", "y") == "Name must be a non-empty string."


def test_address_must_be_non_empty_text() -> None:
    assert validate_input("n", "  ", 1, 2) == "Address must be a non-empty string."
    assert validate_input("n", 42, 1, 2) == "Address must be a non-empty string."


def test_latitude_must_be_a_number() -> None:
    assert validate_input("n", "a", "x", 2) == "Latitude must be a valid number."
    assert validate_input("n", "a", "18.5", 2) == "Latitude must be a valid number."
    assert validate_input("n", "a", None, 2) == "Latitude must be a valid number."


def test_longitude_must_be_a_number() -> None:
    assert validate_input("n", "a", 1, None) == "Longitude must be a valid number."


@pytest.mark.parametrize("value", [float("nan"), float("inf"), True, 10**400])
def test_non_coordinate_numbers_are_rejected(value) -> None:
    assert validate_input("n", "a", value, 2) == "Latitude must be a valid number."
    assert validate_input("n", "a", 2, value) == "Longitude must be a valid number."
