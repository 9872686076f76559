"""In-memory product store used in tests and for running a service without MongoDB."""

from __future__ import annotations

import threading
from typing import Any

from product_common.errors import StoreError
from product_common.ids import ProductId
from product_common.models import Product, ProductCreate
from product_common.repository import (
    CreateRepository,
    DeleteRepository,
    ReadRepository,
    UpdateRepository,
)


class InMemoryProductStore(CreateRepository, ReadRepository, UpdateRepository, DeleteRepository):
    """Dict-backed store with the same semantics as the MongoDB repositories.

    Set ``fail_with`` to a reason string to make every call raise
    ``StoreError`` with that text, simulating a lost connection.
    """

    def __init__(self, products: list[Product] | None = None, fail_with: str | None = None):
        self._lock = threading.Lock()
        self._documents: dict[str, dict[str, Any]] = {}
        self.fail_with = fail_with
        for product in products or []:
            product_id = product.id or ProductId.new().value
            self._documents[product_id] = product.model_dump(exclude={"id"})

    def _check(self) -> None:
        if self.fail_with is not None:
            raise StoreError(self.fail_with)

    def create(self, product: ProductCreate) -> ProductId:
        self._check()
        product_id = ProductId.new()
        with self._lock:
            self._documents[product_id.value] = product.model_dump()
        return product_id

    def find_all(self) -> list[Product]:
        self._check()
        with self._lock:
            return [Product(id=key, **doc) for key, doc in self._documents.items()]

    def update_by_id(self, product_id: ProductId, fields: dict[str, Any]) -> int:
        self._check()
        with self._lock:
            document = self._documents.get(product_id.value)
            if document is None:
                return 0
            document.update(fields)
            return 1

    def delete_by_id(self, product_id: ProductId) -> int:
        self._check()
        with self._lock:
            return 1 if self._documents.pop(product_id.value, None) is not None else 0

    def __len__(self) -> int:
        return len(self._documents)
