"""Main FastAPI application entry point.

Run with:
    uvicorn horizons.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from horizons.core.config import get_settings
from horizons.core.container import get_cache, get_logger
from horizons.core.result import Failure, Success
from horizons.domain.protocols import CacheProtocol
from horizons.presentation.routers.api.v1 import v1_router
from horizons.presentation.routers.api.v1.errors import register_exception_handlers

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan.

    Startup does not connect to Redis: the adapter connects on first use.
    Shutdown releases the connection pool.
    """
    logger = get_logger()
    logger.info("application_started", environment=settings.environment.value)

    yield

    await get_cache().close()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Horizons HR backend: verification codes, invitations and signature links",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# RFC 9457 error responses
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/health")
async def health(cache: CacheProtocol = Depends(get_cache)) -> JSONResponse:
    """Health check for monitoring and load balancers (pings Redis)."""
    match await cache.ping():
        case Success():
            return JSONResponse(content={"status": "healthy", "cache": "ok"})
        case Failure():
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "degraded", "cache": "unavailable"},
            )
