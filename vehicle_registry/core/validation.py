"""
Field rules for a record.

The same constants feed the server-side validator and the browser client,
which downloads them from ``GET /api/rules``.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Optional

from pydantic import BaseModel

from vehicle_registry.db.models.record_model import Gender

PHONE_PATTERN = r"(?:\+20|0)?1[0125][0-9]{8}"
CAR_NUMBER_PATTERN = r"[0-9]{1,8}"

TEXT_MIN_LENGTH = 2
TEXT_MAX_LENGTH = 50

FIELD_ORDER = ("username", "phoneNumber", "birthDate", "gender", "carNumber", "carType")
TEXT_FIELDS = ("username", "phoneNumber", "carNumber", "carType")

MESSAGES = {
    "username": {
        "required": "Username is required",
        "minLength": "Username must be at least 2 characters long",
        "maxLength": "Username cannot exceed 50 characters",
    },
    "phoneNumber": {
        "required": "Phone number is required",
        "pattern": "Please enter a valid Egyptian phone number (e.g., 01012345678 or +201012345678)",
    },
    "birthDate": {
        "required": "Birth date is required",
        "invalid": "Please enter a valid birth date",
        "past": "Birth date must be in the past",
    },
    "gender": {
        "required": "Gender is required",
        "choices": "Gender must be either male or female",
    },
    "carNumber": {
        "required": "Car number is required",
        "pattern": "Car number must contain only numbers (1-8 digits)",
    },
    "carType": {
        "required": "Car type is required",
        "minLength": "Car type must be at least 2 characters long",
        "maxLength": "Car type cannot exceed 50 characters",
    },
}

_phone_re = re.compile(PHONE_PATTERN)
_car_number_re = re.compile(CAR_NUMBER_PATTERN)


class FieldError(BaseModel):
    field: str
    message: str


def is_egyptian_phone(value: str) -> bool:
    return isinstance(value, str) and _phone_re.fullmatch(value) is not None


def is_car_number(value: str) -> bool:
    return isinstance(value, str) and _car_number_re.fullmatch(value) is not None


def parse_birth_date(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 date or datetime into an aware UTC datetime, or None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            parsed = datetime.combine(date.fromisoformat(value), time.min)
        except ValueError:
            try:
                parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # offset pushes the value outside the datetime range
        return None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _text_length(field: str, value: str) -> Optional[str]:
    if len(value) < TEXT_MIN_LENGTH:
        return MESSAGES[field]["minLength"]
    if len(value) > TEXT_MAX_LENGTH:
        return MESSAGES[field]["maxLength"]
    return None


# ------------------ Per-field Validators ------------------ #

def validate_username(value: Any, now: datetime) -> Optional[str]:
    return _text_length("username", value)


def validate_phone_number(value: Any, now: datetime) -> Optional[str]:
    if not is_egyptian_phone(value):
        return MESSAGES["phoneNumber"]["pattern"]
    return None


def validate_birth_date(value: Any, now: datetime) -> Optional[str]:
    parsed = parse_birth_date(value)
    if parsed is None:
        return MESSAGES["birthDate"]["invalid"]
    if parsed >= now:
        return MESSAGES["birthDate"]["past"]
    return None


def validate_gender(value: Any, now: datetime) -> Optional[str]:
    if value not in [g.value for g in Gender]:
        return MESSAGES["gender"]["choices"]
    return None


def validate_car_number(value: Any, now: datetime) -> Optional[str]:
    if not is_car_number(value):
        return MESSAGES["carNumber"]["pattern"]
    return None


def validate_car_type(value: Any, now: datetime) -> Optional[str]:
    return _text_length("carType", value)


FIELD_VALIDATORS: dict[str, Callable[[Any, datetime], Optional[str]]] = {
    "username": validate_username,
    "phoneNumber": validate_phone_number,
    "birthDate": validate_birth_date,
    "gender": validate_gender,
    "carNumber": validate_car_number,
    "carType": validate_car_type,
}


# ------------------ Record-level ------------------ #

def normalize_record(values: dict) -> dict:
    """Trim text fields; other values are passed through untouched."""
    normalized = dict(values)
    for field in TEXT_FIELDS:
        if isinstance(normalized.get(field), str):
            normalized[field] = normalized[field].strip()
    if isinstance(normalized.get("birthDate"), str):
        normalized["birthDate"] = normalized["birthDate"].strip()
    return normalized


def validate_record(values: dict, now: Optional[datetime] = None) -> list[FieldError]:
    """Validate every field of a full record, at most one error per field."""
    now = now or datetime.now(timezone.utc)
    errors = []
    for field in FIELD_ORDER:
        value = values.get(field)
        if _is_blank(value):
            message = MESSAGES[field]["required"]
        else:
            message = FIELD_VALIDATORS[field](value, now)
        if message:
            errors.append(FieldError(field=field, message=message))
    return errors


def client_rules() -> dict:
    text_rule = {"required": True, "minLength": TEXT_MIN_LENGTH, "maxLength": TEXT_MAX_LENGTH}
    fields = {
        "username": dict(text_rule),
        "phoneNumber": {"required": True, "pattern": f"^{PHONE_PATTERN}$"},
        "birthDate": {"required": True, "past": True},
        "gender": {"required": True, "choices": [g.value for g in Gender]},
        "carNumber": {"required": True, "pattern": f"^{CAR_NUMBER_PATTERN}$"},
        "carType": dict(text_rule),
    }
    for field, rule in fields.items():
        rule["messages"] = MESSAGES[field]
    return {"fieldOrder": list(FIELD_ORDER), "fields": fields}
