from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app.core.config import settings
from app.core.database import DatabaseManager
from app.api.errors import register_exception_handlers
from app.api.routes import (
    auth_router, cars_router, brands_router,
    car_models_router, dropdowns_router
)
from app.services.init_service import InitService


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting up {settings.app_name} v{settings.version}...")

    await DatabaseManager.init()
    await InitService.init_roles()
    await InitService.create_default_users()

    try:
        yield
    finally:
        logger.info("Shutting down...")
        await DatabaseManager.close()

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    lifespan=lifespan,
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}

app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(cars_router, prefix="/cars", tags=["Cars"])
app.include_router(brands_router, prefix="/brands", tags=["Brands"])
app.include_router(car_models_router, prefix="/models", tags=["Models"])
app.include_router(dropdowns_router, prefix="/dropdowns", tags=["Dropdowns"])

if not settings.s3_enabled:
    # local image storage is served by the app itself
    app.mount(settings.media_url, StaticFiles(directory=settings.media_root, check_dir=False), name="media")


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        reload=settings.debug
    )
