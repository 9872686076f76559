"""MongoDB-backed read repository."""

from __future__ import annotations

from pydantic import ValidationError
from pymongo.collection import Collection

from product_common.errors import StoreError
from product_common.models import Product
from product_common.mongo import store_call
from product_common.repository import ReadRepository


class MongoReadRepository(ReadRepository):
    def __init__(self, collection: Collection, timeout_seconds: float | None = None):
        self._collection = collection
        self._timeout_seconds = timeout_seconds

    def find_all(self) -> list[Product]:
        with store_call(self._timeout_seconds):
            documents = list(self._collection.find({}))
        try:
            return [Product.from_document(document) for document in documents]
        except ValidationError as exc:
            raise StoreError(f"cannot decode product document: {exc}") from exc
