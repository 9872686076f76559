"""Partial update use case.

The field set follows an asymmetric rule kept for compatibility with
existing clients: an empty ``name`` leaves the stored name alone, while an
empty ``description`` clears the stored description.
"""

from __future__ import annotations

import logging
from typing import Any

from product_common.ids import ProductId
from product_common.repository import UpdateRepository

logger = logging.getLogger(__name__)


def build_update_fields(name: str, description: str) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if name != "":
        fields["name"] = name
    fields["description"] = description
    return fields


class ProductService:
    def __init__(self, repository: UpdateRepository):
        self.repository = repository

    def update_product(self, product_id: ProductId, name: str, description: str) -> None:
        """Apply the partial update. A missing product is not an error."""
        fields = build_update_fields(name, description)
        matched = self.repository.update_by_id(product_id, fields)
        if matched:
            logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(fields)))
        else:
            logger.info("Update of product %s matched nothing", product_id)
