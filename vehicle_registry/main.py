import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from vehicle_registry.api import routers
from vehicle_registry.core.config import settings
from vehicle_registry.db.session import connect_db_pool, close_db_pool
from vehicle_registry.middleware.error_handlers import register_exception_handlers
from vehicle_registry.middleware.request_logging import RequestLoggingMiddleware

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        await connect_db_pool()
    except Exception:
        # keep serving; health reports the store as disconnected and requests retry the pool
        logger.warning("Starting without a database connection.")
    yield
    await close_db_pool()

app = FastAPI(
    title=settings.APP_NAME,
    description="Manage people and their vehicle registrations",
    version=settings.VERSION,
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(routers.router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.api_route(
    "/{full_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def client_shell(full_path: str):
    return FileResponse(STATIC_DIR / "index.html")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
