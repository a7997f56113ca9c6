# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.v1 import auth_router, bootcamp_router
from .core.config import get_settings
from .infrastructure.db.mongo_connection import ensure_indexes, close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Ensures MongoDB indexes on startup and releases the shared HTTP client
    and the database client on shutdown.
    """
    try:
        await ensure_indexes()
    except PyMongoError as e:
        # Don't fail app startup if MongoDB is not reachable yet
        logger.warning(f"Could not ensure MongoDB indexes: {e}")

    yield

    await close_shared_http_client()
    close_database()
    logger.info("Application shutdown complete")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - Error handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Bootcamp API",
        version="1.0.0",
        description="Bootcamp directory backend with ownership-based access control",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(bootcamp_router, prefix="/api/v1/bootcamps")

    # Stored bootcamp photos (directory may not exist until the first upload)
    application.mount(
        "/uploads",
        StaticFiles(directory=settings.file_upload_path, check_dir=False),
        name="uploads",
    )

    @application.get("/", include_in_schema=False)
    async def root():
        return {"success": True, "message": "Bootcamp API is running"}

    return application


# Create application instance
app = create_application()
