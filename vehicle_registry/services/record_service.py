# vehicle_registry/services/record_service.py

import logging
import uuid
from datetime import datetime
from typing import Optional

from vehicle_registry.core.exceptions import (
    DuplicateFieldException,
    RecordNotFoundException,
    RecordValidationException,
)
from vehicle_registry.core.validation import normalize_record, parse_birth_date, validate_record
from vehicle_registry.repositories.record_repo import COLUMNS, DuplicateValueError, RecordRepository
from vehicle_registry.schemas.record_schema import RecordIn, RecordOut

logger = logging.getLogger(__name__)


def parse_record_id(record_id: str) -> Optional[uuid.UUID]:
    try:
        return uuid.UUID(str(record_id))
    except ValueError:
        return None


def to_wire(record: dict) -> dict:
    """Stored row -> wire field names, used to re-validate a merged update."""
    birth_date = record["birth_date"]
    return {
        "username": record["username"],
        "phoneNumber": record["phone_number"],
        "birthDate": birth_date.isoformat() if birth_date else None,
        "gender": getattr(record["gender"], "value", record["gender"]),
        "carNumber": record["car_number"],
        "carType": record["car_type"],
    }


def to_columns(values: dict) -> dict:
    columns = {}
    for field, value in values.items():
        if field == "birthDate":
            value = parse_birth_date(value).date()
        columns[COLUMNS[field]] = value
    return columns


class RecordService:
    def __init__(self, record_repo: RecordRepository):
        self.record_repo = record_repo

    async def list_records(self) -> list[RecordOut]:
        records = await self.record_repo.list_all()
        return [RecordOut.model_validate(record) for record in records]

    async def get_record(self, record_id: str) -> RecordOut:
        record = await self._get_or_404(record_id)
        return RecordOut.model_validate(record)

    async def create_record(self, record_in: RecordIn, now: Optional[datetime] = None) -> RecordOut:
        values = normalize_record(record_in.model_dump(by_alias=True))
        self._check(values, now)
        await self._ensure_unique(values)

        try:
            created = await self.record_repo.create(to_columns(values))
        except DuplicateValueError as e:
            raise DuplicateFieldException(e.field)
        logger.info(f"Record {created['id']} created")
        return RecordOut.model_validate(created)

    async def update_record(self, record_id: str, record_in: RecordIn, now: Optional[datetime] = None) -> RecordOut:
        existing = await self._get_or_404(record_id)

        changes = normalize_record(record_in.model_dump(by_alias=True, exclude_unset=True))
        merged = {**to_wire(existing), **changes}
        self._check(merged, now)

        current = to_wire(existing)
        changed = {field: value for field, value in changes.items() if value != current[field]}
        await self._ensure_unique(changed, exclude_id=existing["id"])

        try:
            updated = await self.record_repo.update(existing["id"], to_columns(changes))
        except DuplicateValueError as e:
            raise DuplicateFieldException(e.field)
        if updated is None:
            # removed between the lookup and the write
            raise RecordNotFoundException()
        logger.info(f"Record {existing['id']} updated ({', '.join(changes) or 'no fields'})")
        return RecordOut.model_validate(updated)

    async def delete_record(self, record_id: str) -> None:
        parsed = parse_record_id(record_id)
        if parsed is None or not await self.record_repo.delete(parsed):
            raise RecordNotFoundException()
        logger.info(f"Record {parsed} deleted")

    # ------------------ Helpers ------------------ #

    async def _get_or_404(self, record_id: str) -> dict:
        parsed = parse_record_id(record_id)
        record = await self.record_repo.get_by_id(parsed) if parsed else None
        if record is None:
            raise RecordNotFoundException()
        return record

    @staticmethod
    def _check(values: dict, now: Optional[datetime]):
        errors = validate_record(values, now)
        if errors:
            logger.info(f"Record rejected: {[e.field for e in errors]}")
            raise RecordValidationException(errors)

    async def _ensure_unique(self, values: dict, exclude_id: Optional[uuid.UUID] = None):
        if "phoneNumber" in values:
            existing = await self.record_repo.get_by_phone(values["phoneNumber"])
            if existing and existing["id"] != exclude_id:
                raise DuplicateFieldException("phoneNumber")
        if "carNumber" in values:
            existing = await self.record_repo.get_by_car_number(values["carNumber"])
            if existing and existing["id"] != exclude_id:
                raise DuplicateFieldException("carNumber")
