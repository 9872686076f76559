"""FastAPI wiring shared by the four services: error mapping, health and startup."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.collection import Collection

from product_common.config import load_settings
from product_common.errors import InvalidProductId, StoreError
from product_common.ids import ProductId
from product_common.logging_config import setup_logging
from product_common.mongo import connect, products_collection

logger = logging.getLogger(__name__)


def path_product_id(product_id: str) -> ProductId:
    """Path dependency: parse ``{product_id}`` before the body is looked at."""
    return ProductId.parse(product_id)


def install_error_handlers(app: FastAPI, operation: str) -> None:
    """Map input errors to 400 and store errors to 500 for ``app``."""

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        reasons = "; ".join(error.get("msg", "") for error in exc.errors())
        return JSONResponse(status_code=400, content={"detail": f"invalid json: {reasons}"})

    @app.exception_handler(InvalidProductId)
    async def invalid_id(request: Request, exc: InvalidProductId) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": "invalid id format"})

    @app.exception_handler(StoreError)
    async def store_failure(request: Request, exc: StoreError) -> JSONResponse:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": f"{operation} error: {exc}"})


def health_router(label: str) -> APIRouter:
    router = APIRouter()

    @router.get("/health", response_class=PlainTextResponse)
    def health() -> str:
        return f"{label} service OK"

    return router


def mongo_lifespan(service: str, build_service: Callable[[Collection, float], Any]):
    """Lifespan that connects to MongoDB once and puts the service on ``app.state``.

    Any configuration or connection error propagates, which stops the server
    before it accepts traffic.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = load_settings(service)
        setup_logging(settings.log_level)
        client = await run_in_threadpool(connect, settings.mongo)
        collection = products_collection(client, settings.mongo)
        app.state.service = build_service(collection, settings.mongo.timeout_seconds)
        logger.info("%s service ready", service.capitalize())
        try:
            yield
        finally:
            client.close()

    return lifespan


def get_service(request: Request) -> Any:
    return request.app.state.service


def serve(service: str, app: FastAPI) -> None:
    """Run ``app`` with uvicorn on the service's configured host and port."""
    settings = load_settings(service)
    setup_logging(settings.log_level)
    logger.info("%s service listening on %s:%s", service.capitalize(), settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
