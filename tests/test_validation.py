from datetime import date, datetime, timedelta, timezone

import pytest

from vehicle_registry.core.validation import (
    MESSAGES,
    client_rules,
    is_car_number,
    is_egyptian_phone,
    normalize_record,
    parse_birth_date,
    validate_record,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

VALID = {
    "username": "Ali",
    "phoneNumber": "01012345678",
    "birthDate": "1990-01-01",
    "gender": "male",
    "carNumber": "12345",
    "carType": "Sedan",
}


@pytest.mark.parametrize("phone", [
    "01012345678",
    "01112345678",
    "01212345678",
    "01512345678",
    "+201012345678",
    "1012345678",
])
def test_egyptian_phone_accepted(phone):
    assert is_egyptian_phone(phone)


@pytest.mark.parametrize("phone", [
    "",
    "01312345678",        # 3 is not an operator digit
    "0101234567",         # one digit short
    "010123456789",       # one digit long
    "+2001012345678",     # both prefixes
    "+2101012345678",
    "00201012345678",
    "02012345678",        # must start with 1 after the prefix
    "0101234567a",
    "01012345678\n",
    " 01012345678",
])
def test_egyptian_phone_rejected(phone):
    assert not is_egyptian_phone(phone)


@pytest.mark.parametrize("car_number", ["1", "12", "1234", "12345678", "00000000"])
def test_car_number_accepted(car_number):
    assert is_car_number(car_number)


@pytest.mark.parametrize("car_number", ["", "123456789", "12a45", "12 45", "-123", "١٢٣", "12345\n"])
def test_car_number_rejected(car_number):
    assert not is_car_number(car_number)


def test_validators_reject_non_strings():
    assert not is_egyptian_phone(1012345678)
    assert not is_car_number(12345)


def test_valid_record_has_no_errors():
    assert validate_record(VALID, NOW) == []


def test_missing_fields_reported_in_field_order():
    errors = validate_record({}, NOW)
    assert [e.field for e in errors] == [
        "username", "phoneNumber", "birthDate", "gender", "carNumber", "carType",
    ]
    assert errors[0].message == "Username is required"
    assert errors[-1].message == "Car type is required"


def test_empty_string_counts_as_missing():
    errors = validate_record({**VALID, "carType": ""}, NOW)
    assert [(e.field, e.message) for e in errors] == [("carType", "Car type is required")]


@pytest.mark.parametrize("field,value,message", [
    ("username", "A", MESSAGES["username"]["minLength"]),
    ("username", "x" * 51, MESSAGES["username"]["maxLength"]),
    ("carType", "S", MESSAGES["carType"]["minLength"]),
    ("carType", "y" * 51, MESSAGES["carType"]["maxLength"]),
    ("phoneNumber", "12345", MESSAGES["phoneNumber"]["pattern"]),
    ("carNumber", "ABC123", MESSAGES["carNumber"]["pattern"]),
    ("gender", "other", "Gender must be either male or female"),
    ("birthDate", "not-a-date", "Please enter a valid birth date"),
    ("birthDate", "2030-01-01", "Birth date must be in the past"),
])
def test_single_field_errors(field, value, message):
    errors = validate_record({**VALID, field: value}, NOW)
    assert len(errors) == 1
    assert errors[0].field == field
    assert errors[0].message == message


def test_length_bounds_are_inclusive():
    assert validate_record({**VALID, "username": "Al", "carType": "z" * 50}, NOW) == []


def test_birth_date_must_be_strictly_in_the_past():
    assert validate_record({**VALID, "birthDate": NOW.isoformat()}, NOW)[0].field == "birthDate"
    earlier = (NOW - timedelta(seconds=1)).isoformat()
    assert validate_record({**VALID, "birthDate": earlier}, NOW) == []


def test_birth_date_defaults_to_current_time():
    tomorrow = (date.today() + timedelta(days=2)).isoformat()
    errors = validate_record({**VALID, "birthDate": tomorrow})
    assert errors[0].message == "Birth date must be in the past"


def test_parse_birth_date_formats():
    assert parse_birth_date("1990-01-01") == datetime(1990, 1, 1, tzinfo=timezone.utc)
    assert parse_birth_date("1990-01-01T10:30:00Z") == datetime(1990, 1, 1, 10, 30, tzinfo=timezone.utc)
    assert parse_birth_date(date(1990, 1, 1)) == datetime(1990, 1, 1, tzinfo=timezone.utc)
    assert parse_birth_date("01/01/1990") is None
    assert parse_birth_date(None) is None


def test_normalize_trims_text_fields():
    normalized = normalize_record({**VALID, "username": "  Ali  ", "carNumber": " 123 ", "birthDate": " 1990-01-01 "})
    assert normalized["username"] == "Ali"
    assert normalized["carNumber"] == "123"
    assert normalized["birthDate"] == "1990-01-01"
    assert validate_record(normalized, NOW) == []


def test_whitespace_only_username_is_missing_after_normalizing():
    errors = validate_record(normalize_record({**VALID, "username": "   "}), NOW)
    assert errors[0].message == "Username is required"


def test_client_rules_mirror_server_rules():
    rules = client_rules()
    assert rules["fieldOrder"][0] == "username"
    phone = rules["fields"]["phoneNumber"]
    assert phone["pattern"] == r"^(?:\+20|0)?1[0125][0-9]{8}$"
    assert phone["messages"]["pattern"] == MESSAGES["phoneNumber"]["pattern"]
    assert rules["fields"]["carNumber"]["pattern"] == "^[0-9]{1,8}$"
    assert rules["fields"]["username"]["minLength"] == 2
    assert rules["fields"]["carType"]["maxLength"] == 50
    assert rules["fields"]["gender"]["choices"] == ["male", "female"]
    assert rules["fields"]["birthDate"]["past"] is True


@pytest.mark.parametrize("value", [
    "9999-12-31T23:00:00-05:00",
    "0001-01-01T00:00:00+05:00",
])
def test_birth_date_outside_datetime_range_is_invalid(value):
    assert parse_birth_date(value) is None
    errors = validate_record({**VALID, "birthDate": value}, NOW)
    assert [(e.field, e.message) for e in errors] == [("birthDate", "Please enter a valid birth date")]
