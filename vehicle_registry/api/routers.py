# vehicle_registry/api/routers.py
from fastapi import APIRouter
from vehicle_registry.api.endpoints import records, system

router = APIRouter()

router.include_router(records.router)
router.include_router(system.router)
