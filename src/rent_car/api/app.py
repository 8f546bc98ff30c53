"""
rent_car.api.app

FastAPI app factory for the car-rental order service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/exception handlers.
- Create and dispose shared infrastructure (DB engine, session factory, order service).
- Act as the single composition root: each service gets its own typed storage here.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from rent_car.api.envelope import respond
from rent_car.api.routers.health import router as health_router
from rent_car.api.routers.orders import router as orders_router
from rent_car.db.init_db import init_db
from rent_car.db.repositories.orders import SqlOrderStorage
from rent_car.db.session import create_engine, create_sessionmaker
from rent_car.errors import ServiceError
from rent_car.observability.logging import configure_logging, get_logger
from rent_car.observability.middleware import RequestContextMiddleware
from rent_car.services.order_service import OrderService
from rent_car.settings import Settings

log = get_logger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def _request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return respond(
        "error while reading request body", HTTP_400_BAD_REQUEST, _format_validation_errors(exc)
    )


async def _service_error_handler(_: Request, exc: ServiceError) -> JSONResponse:
    # Reached for errors raised by dependencies (invalid path id, bad pagination).
    return respond("error while validating request", exc.status_code, str(exc))


async def _unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    # Last resort so even unexpected failures keep the envelope shape.
    log.exception("unhandled_error")
    return respond(
        "internal error", HTTP_500_INTERNAL_SERVER_ERROR, f"{type(exc).__name__}: {exc}"
    )


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        app.state.order_service = OrderService(
            storage=SqlOrderStorage(app.state.sessionmaker),
            timeout_seconds=settings.context_timeout_seconds,
        )
        if settings.env in ("dev", "test"):
            # Prod schemas are managed outside the service process.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Rent Car Order Service",
        version="0.1.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestContextMiddleware)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    app.include_router(health_router, tags=["health"])
    app.include_router(orders_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Business logic stays in services; this file only wires things together.
