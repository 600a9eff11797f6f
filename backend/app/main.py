import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.errors import install_error_handlers
from app.models import Base  # noqa: F401 - register models
from app.routers import (
    area_managers,
    geocode,
    health,
    menu,
    offers,
    orders,
    outlet_timings,
    parent_merchant,
    register_store,
    store_progress,
    store_status,
    stores,
    upload,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Gatimitra MX API",
    description="Merchant onboarding and store management for the Gatimitra partner dashboard",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(health.router, prefix="/health")
app.include_router(parent_merchant.router, prefix="/api/parent-merchant")
app.include_router(register_store.router, prefix="/api/register-store")
app.include_router(store_progress.router, prefix="/api/store/progress")
app.include_router(store_status.router, prefix="/api")
app.include_router(stores.router, prefix="/api/stores")
app.include_router(outlet_timings.router, prefix="/api/outlet-timings")
app.include_router(upload.router, prefix="/api/upload")
app.include_router(geocode.router, prefix="/api/geocode")
app.include_router(menu.router, prefix="/api")
app.include_router(offers.router, prefix="/api")
app.include_router(orders.router, prefix="/api")
app.include_router(area_managers.router, prefix="/api/area-managers")

# Local storage backend serves uploaded files directly
if settings.STORAGE_BACKEND.strip().lower() == "local":
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")
