"""MongoDB-backed update repository."""

from __future__ import annotations

from typing import Any

from pymongo.collection import Collection

from product_common.ids import ProductId
from product_common.mongo import store_call
from product_common.repository import UpdateRepository


class MongoUpdateRepository(UpdateRepository):
    def __init__(self, collection: Collection, timeout_seconds: float | None = None):
        self._collection = collection
        self._timeout_seconds = timeout_seconds

    def update_by_id(self, product_id: ProductId, fields: dict[str, Any]) -> int:
        with store_call(self._timeout_seconds):
            result = self._collection.update_one({"_id": product_id.to_object_id()}, {"$set": fields})
        return result.matched_count
