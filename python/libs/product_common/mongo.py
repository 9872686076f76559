"""MongoDB connection handling for the product services."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import pymongo
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from product_common.config import MongoSettings
from product_common.errors import StoreError, StoreUnavailable

logger = logging.getLogger(__name__)

PRODUCTS_COLLECTION = "products"


def connect(settings: MongoSettings) -> MongoClient:
    """Create a client and ping the server once.

    Raises:
        StoreUnavailable: If the server does not answer within
            ``settings.connect_timeout_seconds``.
    """
    timeout_ms = int(settings.connect_timeout_seconds * 1000)
    client: MongoClient = MongoClient(
        settings.uri,
        serverSelectionTimeoutMS=timeout_ms,
        connectTimeoutMS=timeout_ms,
        retryWrites=False,
        retryReads=False,
    )
    logger.info("Connecting to MongoDB at %s:%s (db=%s)", settings.host, settings.port, settings.database)
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise StoreUnavailable(f"cannot ping MongoDB: {exc}") from exc
    return client


def products_collection(client: MongoClient, settings: MongoSettings) -> Collection:
    return client[settings.database][PRODUCTS_COLLECTION]


@contextmanager
def store_call(timeout_seconds: float | None) -> Iterator[None]:
    """Bound a store call by ``timeout_seconds`` and surface failures as ``StoreError``.

    The original driver message is kept as the error text.
    """
    try:
        with pymongo.timeout(timeout_seconds):
            yield
    except PyMongoError as exc:
        raise StoreError(str(exc)) from exc
