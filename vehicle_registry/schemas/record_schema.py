from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from vehicle_registry.core.validation import FieldError
from vehicle_registry.db.models.record_model import Gender


class RecordIn(BaseModel):
    """Raw request body. Rules are applied by the validation module, not here."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    username: Optional[str] = None
    phone_number: Optional[str] = None
    birth_date: Optional[str] = None
    gender: Optional[str] = None
    car_number: Optional[str] = None
    car_type: Optional[str] = None


class RecordOut(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: UUID
    username: str
    phone_number: str
    birth_date: date
    gender: Gender
    car_number: str
    car_type: str
    created_at: datetime
    updated_at: datetime


class RecordResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: RecordOut


class RecordListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[RecordOut]


class AckResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[list[FieldError]] = None
