import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api_routers.v1 import api_router
from app.features.downloads.routes.download import router as download_router
from app.features.health.routes.health import router as health_router
from app.features.landing.routes.landing import router as landing_router
from app.platform.config import settings
from app.platform.db.session import init_models
from app.platform.exceptions import add_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_TABLES:
        await init_models()
    yield


app = FastAPI(
    title=f"{settings.APP_NAME} Lead Capture API",
    description="Landing page lead capture with single-use ebook downloads",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)


@app.get("/api", tags=["Info"])
def api_info():
    return {
        "app_name": f"{settings.APP_NAME} Lead Capture API",
        "description": "Collects visitor details in exchange for a one-time ebook download.",
        "version": "1.0.0",
        "docs_url": "/docs",
        "api_base": "/api/v1",
    }


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)

static_dir = Path(settings.STATIC_DIR)
static_dir.mkdir(parents=True, exist_ok=True)

# Logo, cover image and the ebook itself
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

app.include_router(landing_router)
app.include_router(download_router)
app.include_router(health_router)
app.include_router(api_router, prefix="/api/v1")
