from fastapi import Depends
from asyncpg import Connection

from vehicle_registry.db.session import get_db_connection
from vehicle_registry.repositories.record_repo import RecordRepository
from vehicle_registry.services.record_service import RecordService


def get_record_repo(conn: Connection = Depends(get_db_connection)) -> RecordRepository:
    return RecordRepository(conn)


def get_record_service(
        record_repo: RecordRepository = Depends(get_record_repo),
) -> RecordService:
    return RecordService(record_repo)
