"""AirWatch - Air Quality API."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.errors import register_exception_handlers

settings = get_settings()
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: create tables and load placeholder data
    from app.database import Base, engine
    from app.services.airquality import load_placeholder_data

    # Import all models so they're registered with Base
    from app import models  # noqa: F401

    configure_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    load_placeholder_data()
    logger.info(f"{settings.app_name} started")

    yield
    # Shutdown: cleanup if needed


def create_application() -> FastAPI:
    from app.api import airquality, auth, users

    app = FastAPI(
        title=settings.app_name,
        description="Air quality readings, alerts and user accounts",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    app.include_router(auth.router, prefix="/api")
    app.include_router(users.router, prefix="/api")
    app.include_router(airquality.router, prefix="/api")

    return app


app = create_application()
