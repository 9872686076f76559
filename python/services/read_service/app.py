"""Read Service: FastAPI application that lists products."""

from __future__ import annotations

from fastapi import Depends, FastAPI

from product_common.http import get_service, health_router, install_error_handlers, mongo_lifespan
from product_common.models import Product
from product_common.repository import ReadRepository

from read_service.repository import MongoReadRepository
from read_service.service import ProductService


def _build_service(collection, timeout_seconds: float) -> ProductService:
    return ProductService(MongoReadRepository(collection, timeout_seconds))


def create_app(repository: ReadRepository | None = None) -> FastAPI:
    lifespan = None if repository is not None else mongo_lifespan("read", _build_service)
    app = FastAPI(title="Read Service", version="0.3.0", lifespan=lifespan)
    if repository is not None:
        app.state.service = ProductService(repository)

    install_error_handlers(app, "read")
    app.include_router(health_router("Read"))

    @app.get("/products", response_model=list[Product])
    def list_products(service: ProductService = Depends(get_service)):
        return service.get_all()

    return app


app = create_app()
