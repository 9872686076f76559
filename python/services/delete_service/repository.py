"""MongoDB-backed delete repository."""

from __future__ import annotations

from pymongo.collection import Collection

from product_common.ids import ProductId
from product_common.mongo import store_call
from product_common.repository import DeleteRepository


class MongoDeleteRepository(DeleteRepository):
    def __init__(self, collection: Collection, timeout_seconds: float | None = None):
        self._collection = collection
        self._timeout_seconds = timeout_seconds

    def delete_by_id(self, product_id: ProductId) -> int:
        with store_call(self._timeout_seconds):
            result = self._collection.delete_one({"_id": product_id.to_object_id()})
        return result.deleted_count
