"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload

Each MediaLibs resource is an independent service; ENABLED_SERVICES selects
which of them this process serves (all by default).
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.routes import adverts, advertisers, auth, loans, medias, stocks, users
from db import init_db
from settings import settings

logger = logging.getLogger(__name__)

SERVICE_MODULES = {
    "adverts": adverts,
    "advertisers": advertisers,
    "auth": auth,
    "loans": loans,
    "medias": medias,
    "stocks": stocks,
    "users": users,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database tables on startup."""
    init_db()
    yield


def create_app(services: Optional[Iterable[str]] = None) -> FastAPI:
    """Build the API serving `services` (defaults to ENABLED_SERVICES)."""
    enabled = list(services if services is not None else settings.ENABLED_SERVICES)
    unknown = [name for name in enabled if name not in SERVICE_MODULES]
    if unknown:
        raise ValueError(f"Unknown services: {', '.join(unknown)}")

    app = FastAPI(
        title="MediaLibs Services API",
        description="CRUD services for a media lending library",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS middleware for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for name in enabled:
        module = SERVICE_MODULES[name]
        app.include_router(module.router, prefix=module.BASE_PATH, tags=[name])
        logger.info("Serving %s under %s", name, module.BASE_PATH)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "MediaLibs Services API", "services": enabled}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()
