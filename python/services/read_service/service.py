"""Read-all use case."""

from __future__ import annotations

import logging

from product_common.models import Product
from product_common.repository import ReadRepository

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repository: ReadRepository):
        self.repository = repository

    def get_all(self) -> list[Product]:
        products = self.repository.find_all()
        logger.debug("Read %d products", len(products))
        return products
