"""Delete use case."""

from __future__ import annotations

import logging

from product_common.ids import ProductId
from product_common.repository import DeleteRepository

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repository: DeleteRepository):
        self.repository = repository

    def delete_product(self, product_id: ProductId) -> None:
        """Delete by id. Deleting a product that is already gone succeeds."""
        deleted = self.repository.delete_by_id(product_id)
        logger.info("Delete of product %s removed %d document(s)", product_id, deleted)
