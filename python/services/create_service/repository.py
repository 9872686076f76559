"""MongoDB-backed create repository."""

from __future__ import annotations

from pymongo.collection import Collection

from product_common.ids import ProductId
from product_common.models import ProductCreate
from product_common.mongo import store_call
from product_common.repository import CreateRepository


class MongoCreateRepository(CreateRepository):
    def __init__(self, collection: Collection, timeout_seconds: float | None = None):
        self._collection = collection
        self._timeout_seconds = timeout_seconds

    def create(self, product: ProductCreate) -> ProductId:
        with store_call(self._timeout_seconds):
            result = self._collection.insert_one(product.model_dump())
        return ProductId.from_object_id(result.inserted_id)
