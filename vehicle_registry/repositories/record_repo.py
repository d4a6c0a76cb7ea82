import uuid
from typing import Optional

from asyncpg import Connection, UniqueViolationError

# wire field -> column
COLUMNS = {
    "username": "username",
    "phoneNumber": "phone_number",
    "birthDate": "birth_date",
    "gender": "gender",
    "carNumber": "car_number",
    "carType": "car_type",
}

UNIQUE_CONSTRAINTS = {
    "uq_records_phone_number": "phoneNumber",
    "uq_records_car_number": "carNumber",
}


class DuplicateValueError(Exception):
    def __init__(self, field: str):
        super().__init__(f"Duplicate value for {field}")
        self.field = field


def _duplicate_field(error: UniqueViolationError) -> str:
    constraint = getattr(error, "constraint_name", None) or ""
    if constraint in UNIQUE_CONSTRAINTS:
        return UNIQUE_CONSTRAINTS[constraint]
    return "carNumber" if "car" in constraint else "phoneNumber"


class RecordRepository:
    """asyncpg access to the ``records`` table; rows come back as plain dicts."""

    def __init__(self, conn: Connection):
        self.conn = conn

    # ------------------ Retrieval Methods ------------------ #

    async def list_all(self) -> list[dict]:
        sql = "SELECT * FROM records ORDER BY created_at DESC;"
        records = await self.conn.fetch(sql)
        return [dict(record) for record in records]

    async def get_by_id(self, record_id: uuid.UUID) -> Optional[dict]:
        sql = "SELECT * FROM records WHERE id = $1;"
        record = await self.conn.fetchrow(sql, record_id)
        return dict(record) if record else None

    async def get_by_phone(self, phone_number: str) -> Optional[dict]:
        sql = "SELECT * FROM records WHERE phone_number = $1;"
        record = await self.conn.fetchrow(sql, phone_number)
        return dict(record) if record else None

    async def get_by_car_number(self, car_number: str) -> Optional[dict]:
        sql = "SELECT * FROM records WHERE car_number = $1;"
        record = await self.conn.fetchrow(sql, car_number)
        return dict(record) if record else None

    # ------------------ Mutation Methods ------------------ #

    async def create(self, record_in: dict) -> dict:
        sql = """
            INSERT INTO records (id, username, phone_number, birth_date, gender, car_number, car_type)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            RETURNING *;
        """
        try:
            record = await self.conn.fetchrow(
                sql,
                uuid.uuid4(),
                record_in["username"],
                record_in["phone_number"],
                record_in["birth_date"],
                record_in["gender"],
                record_in["car_number"],
                record_in["car_type"],
            )
        except UniqueViolationError as e:
            raise DuplicateValueError(_duplicate_field(e))
        return dict(record)

    async def update(self, record_id: uuid.UUID, changes: dict) -> Optional[dict]:
        assignments = []
        args = [record_id]
        for column, value in changes.items():
            args.append(value)
            assignments.append(f"{column} = ${len(args)}")
        assignments.append("updated_at = now()")

        sql = f"UPDATE records SET {', '.join(assignments)} WHERE id = $1 RETURNING *;"
        try:
            record = await self.conn.fetchrow(sql, *args)
        except UniqueViolationError as e:
            raise DuplicateValueError(_duplicate_field(e))
        return dict(record) if record else None

    async def delete(self, record_id: uuid.UUID) -> bool:
        sql = "DELETE FROM records WHERE id = $1 RETURNING id;"
        deleted = await self.conn.fetchval(sql, record_id)
        return deleted is not None
