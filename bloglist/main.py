# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api import auth_router, blog_router, user_router
from .api.error_handlers import register_error_handlers
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .domain.exceptions import StoreError
from .domain.repositories.user_registry import UserRegistry
from .infrastructure.db.mongo_connection import close_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Declares the username unique index on startup and closes the MongoDB
    client on shutdown.
    """
    user_registry = get_container().get(UserRegistry)
    try:
        await user_registry.ensure_indexes()
    except StoreError as e:
        # Serve anyway; registration retries the index before inserting
        logger.error(f"Could not ensure user indexes at startup: {e.message}")

    yield

    close_connection()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Error handlers and API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Blog List API",
        version="1.0.0",
        description="Blog list backend with user registration",
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

    application.include_router(blog_router, prefix="/api/blogs")
    application.include_router(user_router, prefix="/api/users")
    application.include_router(auth_router, prefix="/api/login")

    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    return application


# Create application instance
app = create_application()
