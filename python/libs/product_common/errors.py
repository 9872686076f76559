"""Error types shared by the product services."""

from __future__ import annotations


class ProductError(Exception):
    """Base class for product service errors."""


class InvalidProductId(ProductError):
    """Raised when a path identifier is not a valid product id."""

    def __init__(self, raw: object):
        super().__init__(f"invalid id format: {raw!r}")
        self.raw = raw


class StoreError(ProductError):
    """A document store call failed. The message is the store's own reason."""


class StoreUnavailable(StoreError):
    """The store could not be reached at startup."""
