from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdftools.api.errors import register_error_handlers
from pdftools.api.v1.api import api_router
from pdftools.core.config import settings
from pdftools.core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    if not settings.TESTING:
        setup_logging()
    yield


def create_app() -> FastAPI:
    """Factory to create FastAPI app instance."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description="API for splitting, merging and inspecting PDFs "
        "and converting images to PDF",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[
                str(origin) for origin in settings.BACKEND_CORS_ORIGINS
            ],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            # Let browser clients read the download metadata
            expose_headers=[
                "Content-Disposition",
                "X-Page-Count",
                "X-Status-Message",
            ],
        )

    register_error_handlers(app)

    # Mount API routers
    app.include_router(api_router, prefix=settings.API_V1_STR)

    # Internal system endpoints
    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        return {
            "message": "Welcome to the PDF Toolkit API",
            "version": settings.PROJECT_VERSION,
            "docs": "/docs",
        }

    @app.get(f"{settings.API_V1_STR}/health", include_in_schema=False)
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
