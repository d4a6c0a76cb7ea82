import logging
import traceback

from fastapi import APIRouter, Depends, HTTPException, status

from vehicle_registry.api.deps import get_record_service
from vehicle_registry.core.exceptions import ServerFailureException
from vehicle_registry.schemas.record_schema import (
    AckResponse,
    RecordIn,
    RecordListResponse,
    RecordResponse,
)
from vehicle_registry.services.record_service import RecordService

router = APIRouter(prefix="/api/records", tags=["records"])


@router.get("", response_model=RecordListResponse)
async def list_records(record_svc: RecordService = Depends(get_record_service)):
    try:
        records = await record_svc.list_records()
        return RecordListResponse(data=records, count=len(records))
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Error fetching records: {e}\n{traceback.format_exc()}")
        raise ServerFailureException("Error fetching records", e)


@router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
        body: RecordIn,
        record_svc: RecordService = Depends(get_record_service),
):
    try:
        record = await record_svc.create_record(body)
        return RecordResponse(message="Record created successfully", data=record)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Error creating record: {e}\n{traceback.format_exc()}")
        raise ServerFailureException("Error creating record", e)


@router.get("/{record_id}", response_model=RecordResponse)
async def get_record(record_id: str, record_svc: RecordService = Depends(get_record_service)):
    try:
        record = await record_svc.get_record(record_id)
        return RecordResponse(data=record)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Error fetching record {record_id}: {e}\n{traceback.format_exc()}")
        raise ServerFailureException("Error fetching record", e)


@router.patch("/{record_id}", response_model=RecordResponse)
async def update_record(
        record_id: str,
        body: RecordIn,
        record_svc: RecordService = Depends(get_record_service),
):
    try:
        record = await record_svc.update_record(record_id, body)
        return RecordResponse(message="Record updated successfully", data=record)
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Error updating record {record_id}: {e}\n{traceback.format_exc()}")
        raise ServerFailureException("Error updating record", e)


@router.delete("/{record_id}", response_model=AckResponse)
async def delete_record(record_id: str, record_svc: RecordService = Depends(get_record_service)):
    try:
        await record_svc.delete_record(record_id)
        return AckResponse(message="Record deleted successfully")
    except HTTPException:
        raise
    except Exception as e:
        logging.error(f"Error deleting record {record_id}: {e}\n{traceback.format_exc()}")
        raise ServerFailureException("Error deleting record", e)
