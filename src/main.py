"""Main FastAPI application entry point."""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.request_context import RequestContextMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Portfolio Content API\n\n"
            "Serves the content of a creative professional's portfolio site: "
            "the owner profile, skills, projects and the contact inbox.\n\n"
            "### Media\n"
            "Images and media are kept in object storage. Responses carry "
            "short-lived signed URLs; admins obtain an upload URL from "
            "`POST /api/v1/uploads` and reference the returned `file_id`.\n\n"
            "### Authentication\n"
            "Reads and contact submissions are public. Editing endpoints "
            "require a valid JWT in the Authorization header:\n"
            "```\nAuthorization: Bearer <your_token>\n```"
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "profile",
                "description": "Portfolio owner profile",
            },
            {
                "name": "skills",
                "description": "Skills section operations",
            },
            {
                "name": "projects",
                "description": "Project gallery operations",
            },
            {
                "name": "contact",
                "description": "Contact form and inbox",
            },
            {
                "name": "uploads",
                "description": "Signed upload URLs for media files",
            },
        ],
    )

    # LIFO order: last added = outermost
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    logger.debug("app_created", environment=settings.app_env)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
