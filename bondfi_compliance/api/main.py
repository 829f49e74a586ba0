"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from bondfi_compliance.api.dependencies import build_engine
from bondfi_compliance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from bondfi_compliance.api.v1 import issuers, bonds
from bondfi_compliance.infrastructure.observability.logging import setup_logging
from bondfi_compliance.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    The engine is built once here, so a bad threshold fails at startup.
    """
    engine = build_engine()

    app = FastAPI(
        title="BondFi Compliance",
        description="Issuer verification and bond approval service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.engine = engine

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(issuers.router, prefix="/v1", tags=["issuers"])
    app.include_router(bonds.router, prefix="/v1", tags=["bonds"])

    return app


app = create_app()
