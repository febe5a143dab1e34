"""FastAPI application serving DNS lookups as JSON."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dohresolver import __version__
from dohresolver.api.routers import health, query
from dohresolver.config import Settings
from dohresolver.core.base import BaseResolver
from dohresolver.core.exceptions import QueryValidationError
from dohresolver.core.models import ValidationErrorBody
from dohresolver.core.system import SystemResolver

logger = logging.getLogger(__name__)


# Shared state
class AppState:
    settings: Settings | None = None
    resolver: BaseResolver | None = None


state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    state.settings = Settings.from_env()
    state.resolver = SystemResolver(nameservers=state.settings.nameservers)
    await state.resolver.connect()
    logger.info(
        f"DoH server listening on http://{state.settings.host}:{state.settings.port}"
    )

    yield

    # Shutdown
    if state.resolver:
        await state.resolver.disconnect()
        state.resolver = None


# Create FastAPI app
app = FastAPI(
    title="DoH Resolver API",
    description="DNS lookups (A, AAAA, MX, TXT, CNAME, PTR) as a JSON envelope",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(query.router, tags=["Query"])
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.exception_handler(QueryValidationError)
async def validation_error_handler(request: Request, exc: QueryValidationError):
    """Rejected requests get a plain ``{"error": ...}`` body."""
    logger.debug(f"Rejected {request.url.path}?{request.url.query}: {exc}")
    return JSONResponse(
        status_code=400,
        content=ValidationErrorBody(error=str(exc)).model_dump(),
    )


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "DoH Resolver API",
        "version": __version__,
        "endpoint": "/dns-query",
    }


def get_resolver() -> BaseResolver:
    """Dependency to get the resolver backend."""
    if not state.resolver:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return state.resolver


def run(host: str = "0.0.0.0", port: int = 3000, reload: bool = False, log_level: str = "info"):
    """Run the API server."""
    uvicorn.run(
        "dohresolver.api.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    settings = Settings.from_env()
    run(settings.host, settings.port, log_level=settings.log_level)
