from datetime import datetime, timezone

from fastapi import APIRouter

from vehicle_registry.core.config import settings
from vehicle_registry.core.exceptions import ApiEndpointNotFoundException
from vehicle_registry.core.validation import client_rules
from vehicle_registry.db import session

router = APIRouter(prefix="/api", tags=["system"])

ENDPOINTS = {
    "records": {
        "GET /api/records": "Get all records",
        "POST /api/records": "Create new record",
        "GET /api/records/:id": "Get record by ID",
        "PATCH /api/records/:id": "Update record",
        "DELETE /api/records/:id": "Delete record",
    },
    "system": {
        "GET /api/health": "Health check",
        "GET /api/rules": "Validation rules used by the web client",
        "GET /api": "API information",
    },
}


@router.get("/health")
async def health_check():
    connected = await session.is_connected()
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "Connected" if connected else "Disconnected",
        "environment": settings.ENVIRONMENT,
        "version": settings.VERSION,
    }


@router.get("")
async def api_info():
    return {
        "message": settings.APP_NAME,
        "version": settings.VERSION,
        "endpoints": ENDPOINTS,
    }


@router.get("/rules")
async def validation_rules():
    return {"success": True, "data": client_rules()}


@router.api_route(
    "",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def api_not_found(path: str = ""):
    raise ApiEndpointNotFoundException()
