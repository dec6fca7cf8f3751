import pytest

from parking_lot.validation import (
    optional,
    validate_color,
    validate_make,
    validate_model,
    validate_owner_contact,
    validate_owner_name,
    validate_registration_number,
)


@pytest.mark.parametrize("value", ["ABC", "LEA1234", "X1Y2Z3W4V5"])
def test_valid_registration_numbers(value):
    assert validate_registration_number(value) == value


@pytest.mark.parametrize("value, message", [
    ("AB", "at least 3"),
    ("ABCDEFGHIJK", "exceed 10"),
    ("0ABC12", "start with '0'"),
    ("AB-123", "alphanumeric"),
    ("AB 123", "alphanumeric"),
])
def test_invalid_registration_numbers(value, message):
    with pytest.raises(ValueError, match=message):
        validate_registration_number(value)


def test_owner_name():
    assert validate_owner_name("Faria Khan") == "Faria Khan"
    for bad, message in [
        ("", "empty"),
        ("R2D2", "letters and spaces"),
        (" Aqsa", "start or end"),
        ("Aqsa  Ali", "consecutive"),
        ("A" * 101, "exceed 100"),
    ]:
        with pytest.raises(ValueError, match=message):
            validate_owner_name(bad)


def test_vehicle_fields():
    assert validate_make("Land Rover") == "Land Rover"
    assert validate_model("Civic 2020") == "Civic 2020"
    assert validate_color("Dark Blue") == "Dark Blue"

    with pytest.raises(ValueError, match="letters and spaces"):
        validate_make("BMW3")
    with pytest.raises(ValueError, match="format is invalid"):
        validate_model("X" * 51)
    with pytest.raises(ValueError, match="format is invalid"):
        validate_color("Red ")
    with pytest.raises(ValueError, match="empty"):
        validate_color("")


def test_owner_contact():
    assert validate_owner_contact("03001234567") == "03001234567"
    for bad in ["", "12345", "1" * 16, "0300-123456"]:
        with pytest.raises(ValueError):
            validate_owner_contact(bad)


def test_optional_skips_empty():
    check = optional(validate_make)
    assert check("") == ""
    assert check("Toyota") == "Toyota"
    with pytest.raises(ValueError):
        check("T0yota")
