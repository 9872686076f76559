"""Delete Service: FastAPI application that removes products."""

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
from product_common.models import StatusResponse
from product_common.repository import DeleteRepository

from delete_service.repository import MongoDeleteRepository
from delete_service.service import ProductService


def _build_service(collection, timeout_seconds: float) -> ProductService:
    return ProductService(MongoDeleteRepository(collection, timeout_seconds))


def create_app(repository: DeleteRepository | None = None) -> FastAPI:
    lifespan = None if repository is not None else mongo_lifespan("delete", _build_service)
    app = FastAPI(title="Delete Service", version="0.3.0", lifespan=lifespan)
    if repository is not None:
        app.state.service = ProductService(repository)

    install_error_handlers(app, "delete")
    app.include_router(health_router("Delete"))

    @app.delete("/products/{product_id:path}", response_model=StatusResponse)
    def delete_product(
        product_id: ProductId = Depends(path_product_id),
        service: ProductService = Depends(get_service),
    ):
        service.delete_product(product_id)
        return StatusResponse(status="deleted")

    return app


app = create_app()
