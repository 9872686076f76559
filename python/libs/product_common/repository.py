"""Storage capabilities the product services depend on.

Each service needs exactly one of these. The MongoDB implementations live
with their service; ``product_common.memory`` implements all of them for
tests and local runs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from product_common.ids import ProductId
from product_common.models import Product, ProductCreate


class CreateRepository(ABC):
    @abstractmethod
    def create(self, product: ProductCreate) -> ProductId:
        """Insert one product and return the id the store assigned."""


class ReadRepository(ABC):
    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every stored product; an empty list when there are none."""


class UpdateRepository(ABC):
    @abstractmethod
    def update_by_id(self, product_id: ProductId, fields: dict[str, Any]) -> int:
        """Set only ``fields`` on the product. Returns the matched count, 0 is not an error."""


class DeleteRepository(ABC):
    @abstractmethod
    def delete_by_id(self, product_id: ProductId) -> int:
        """Remove at most one product. Returns the deleted count, 0 is not an error."""
