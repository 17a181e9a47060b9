"""
FastAPI Application Setup.

Application factory for the Farm Ledger REST API. Serve it with any ASGI
server using the factory, e.g. ``uvicorn --factory farm_ledger.api.app:create_app``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from farm_ledger import __version__
from farm_ledger.api.middleware.logging import RequestLoggingMiddleware
from farm_ledger.api.routes import consumers, farmers, health, products, transactions
from farm_ledger.api.schemas.exceptions import APIException, to_api_exception
from farm_ledger.config import LedgerSettings, create_store
from farm_ledger.core.exceptions import FarmLedgerError
from farm_ledger.registry.ledger import FarmLedger
from farm_ledger.store.base import LedgerStore

logger = logging.getLogger(__name__)


def _error_response(exc: APIException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "type": exc.error_type,
                "message": exc.message,
                "detail": exc.detail,
            }
        },
    )


def create_app(
    store: LedgerStore | None = None,
    settings: LedgerSettings | None = None,
    title: str = "Farm Ledger API",
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Store to serve; built from settings when omitted
        settings: Runtime settings; read from FL_* variables when omitted
        title: Application title for OpenAPI docs

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or LedgerSettings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    owns_store = store is None
    ledger_store = store if store is not None else create_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Farm Ledger API starting up...")
        logger.info(f"Version: {__version__}")
        logger.info(f"Store backend: {ledger_store.backend_name}")

        yield

        logger.info("Farm Ledger API shutting down...")
        if owns_store:
            ledger_store.close()

    app = FastAPI(
        title=title,
        description="Register and query farmers, consumers, products and transactions",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.ledger = FarmLedger(ledger_store)

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(health.router, prefix="/health", tags=["Health"])
    app.include_router(farmers, prefix="/api/v1/farmers", tags=["Farmers"])
    app.include_router(consumers, prefix="/api/v1/consumers", tags=["Consumers"])
    app.include_router(products, prefix="/api/v1/products", tags=["Products"])
    app.include_router(transactions, prefix="/api/v1/transactions", tags=["Transactions"])

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
        """Handle API exceptions with proper error responses."""
        return _error_response(exc)

    @app.exception_handler(FarmLedgerError)
    async def ledger_exception_handler(request: Request, exc: FarmLedgerError) -> JSONResponse:
        """Map registry and store errors onto HTTP status codes."""
        api_exc = to_api_exception(exc)
        if api_exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return _error_response(api_exc)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "type": "internal_error",
                    "message": "An unexpected error occurred",
                    "detail": str(exc) if logger.isEnabledFor(logging.DEBUG) else None,
                }
            },
        )

    @app.get("/", tags=["Root"])
    def root() -> dict[str, object]:
        """Root endpoint with API information."""
        return {
            "name": "Farm Ledger API",
            "version": __version__,
            "store_backend": ledger_store.backend_name,
            "docs": "/docs",
            "health": "/health",
        }

    return app
