"""FastAPI application entry point for the Coin Ticker API."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from coinapi.config import Settings, settings as default_settings
from coinapi.db.neo4j_client import Neo4jClient
from coinapi.exceptions import InvalidRange, StoreUnavailable
from coinapi.models.ticker import TIMESTAMP_FORMAT
from coinapi.repositories.ticker_repository import TickerRepository
from coinapi.services.ticker_service import TickerService
from coinapi.api.routes import coins, health

logger = logging.getLogger(__name__)


async def invalid_range_handler(request: Request, exc: InvalidRange) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=400,
        content={
            "detail": str(exc),
            "start": exc.start.strftime(TIMESTAMP_FORMAT),
            "end": exc.end.strftime(TIMESTAMP_FORMAT),
            "max_days": exc.max_days,
        },
    )


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})


def create_app(
    settings: Settings = default_settings,
    client: Optional[Neo4jClient] = None,
) -> FastAPI:
    """Build the application and wire client, repository and service."""
    client = client or Neo4jClient.from_settings(settings)
    repository = TickerRepository(client)
    service = TickerService(repository, max_range_days=settings.MAX_RANGE_DAYS)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup and shutdown."""
        # Startup
        await client.connect()
        try:
            yield
        finally:
            # Shutdown
            await client.disconnect()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Time-bounded coin ticker history backed by Neo4j",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.db_client = client
    app.state.ticker_service = service

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_engine_header(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"{request.method} {request.url.path} failed: {e!r}")
            response = JSONResponse(status_code=500, content={"detail": "Internal Server Error"})
        response.headers["X-Engine"] = settings.ENGINE_HEADER
        return response

    app.add_exception_handler(InvalidRange, invalid_range_handler)
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(coins.router, prefix="/coins", tags=["Coins"])

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
        }

    return app


app = create_app()


def configure_logging(level: str) -> None:
    """Process-wide logging setup; level names are case-insensitive."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Entry point for `python -m coinapi.main`."""
    configure_logging(default_settings.LOG_LEVEL)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
