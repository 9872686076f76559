"""Create Service: FastAPI application that inserts products."""

from __future__ import annotations

from fastapi import Depends, FastAPI

from product_common.http import get_service, health_router, install_error_handlers, mongo_lifespan
from product_common.models import Product, ProductCreate
from product_common.repository import CreateRepository

from create_service.repository import MongoCreateRepository
from create_service.service import ProductService


def _build_service(collection, timeout_seconds: float) -> ProductService:
    return ProductService(MongoCreateRepository(collection, timeout_seconds))


def create_app(repository: CreateRepository | None = None) -> FastAPI:
    """Build the app. Without ``repository`` it connects to MongoDB on startup."""
    lifespan = None if repository is not None else mongo_lifespan("create", _build_service)
    app = FastAPI(title="Create Service", version="0.3.0", lifespan=lifespan)
    if repository is not None:
        app.state.service = ProductService(repository)

    install_error_handlers(app, "create")
    app.include_router(health_router("Create"))

    @app.post("/products", response_model=Product, status_code=201)
    def create_product(payload: ProductCreate, service: ProductService = Depends(get_service)):
        product_id = service.create(payload)
        return Product(id=product_id.value, **payload.model_dump())

    return app


app = create_app()
