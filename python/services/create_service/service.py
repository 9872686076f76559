"""Create use case."""

from __future__ import annotations

import logging

from product_common.ids import ProductId
from product_common.models import ProductCreate
from product_common.repository import CreateRepository

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repository: CreateRepository):
        self.repository = repository

    def create(self, product: ProductCreate) -> ProductId:
        """Store ``product``. Store errors propagate unchanged."""
        product_id = self.repository.create(product)
        logger.info("Created product %s", product_id)
        return product_id
