"""FastAPI application factory for screenmap."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import config
from ..core.logger import log
from .routes import analysis_router, elements_router, pointer_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="screenmap API",
        description="Screen text analysis and pointer automation API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    @app.middleware("http")
    async def log_requests(request, call_next):
        log.info(f"API Request: {request.method} {request.url}")
        response = await call_next(request)
        log.info(f"API Response: {response.status_code}")
        return response

    # Include routers
    app.include_router(analysis_router, prefix="/api/v1/analysis", tags=["analysis"])
    app.include_router(elements_router, prefix="/api/v1/elements", tags=["elements"])
    app.include_router(pointer_router, prefix="/api/v1/pointer", tags=["pointer"])

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "screenmap API",
            "version": "0.1.0"
        }

    log.info("FastAPI application created successfully")
    return app


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    config.validate_config()
    uvicorn.run(create_app(), host=config.api_host, port=config.api_port)


if __name__ == "__main__":
    run()
