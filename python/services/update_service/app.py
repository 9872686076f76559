"""Update Service: FastAPI application that applies partial product updates."""

from __future__ import annotations

from fastapi import Depends, FastAPI

from product_common.http import (
    get_service,
    health_router,
    install_error_handlers,
    mongo_lifespan,
    path_product_id,
)
from product_common.ids import ProductId
from product_common.models import ProductUpdate, StatusResponse
from product_common.repository import UpdateRepository

from update_service.repository import MongoUpdateRepository
from update_service.service import ProductService


def _build_service(collection, timeout_seconds: float) -> ProductService:
    return ProductService(MongoUpdateRepository(collection, timeout_seconds))


def create_app(repository: UpdateRepository | None = None) -> FastAPI:
    lifespan = None if repository is not None else mongo_lifespan("update", _build_service)
    app = FastAPI(title="Update Service", version="0.3.0", lifespan=lifespan)
    if repository is not None:
        app.state.service = ProductService(repository)

    install_error_handlers(app, "update")
    app.include_router(health_router("Update"))

    @app.put("/products/{product_id:path}", response_model=StatusResponse)
    def update_product(
        payload: ProductUpdate,
        product_id: ProductId = Depends(path_product_id),
        service: ProductService = Depends(get_service),
    ):
        service.update_product(product_id, payload.name, payload.description)
        return StatusResponse(status="updated")

    return app


app = create_app()
