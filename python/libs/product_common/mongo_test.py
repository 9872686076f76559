from unittest.mock import MagicMock

import pytest
from pymongo import _csot
from pymongo.errors import AutoReconnect, NetworkTimeout, ServerSelectionTimeoutError

from product_common import mongo
from product_common.config import MongoSettings
from product_common.errors import StoreError, StoreUnavailable

SETTINGS = MongoSettings(username="root", password="secret", host="mongo", database="testdb")


def test_store_call_keeps_driver_message():
    with pytest.raises(StoreError, match="connection refused") as excinfo:
        with mongo.store_call(1.0):
            raise AutoReconnect("connection refused")
    assert isinstance(excinfo.value.__cause__, AutoReconnect)


def test_store_call_reports_timeouts():
    with pytest.raises(StoreError, match="timed out"):
        with mongo.store_call(0.5):
            raise NetworkTimeout("operation timed out")


def test_store_call_leaves_other_errors_alone():
    with pytest.raises(KeyError):
        with mongo.store_call(None):
            raise KeyError("name")


def test_connect_pings_server(monkeypatch):
    client_cls = MagicMock()
    monkeypatch.setattr(mongo, "MongoClient", client_cls)

    client = mongo.connect(SETTINGS)

    assert client is client_cls.return_value
    client.admin.command.assert_called_once_with("ping")
    args, kwargs = client_cls.call_args
    assert args[0] == SETTINGS.uri
    assert kwargs["serverSelectionTimeoutMS"] == 10000
    assert kwargs["retryWrites"] is False


def test_connect_failure_is_fatal(monkeypatch):
    client_cls = MagicMock()
    client_cls.return_value.admin.command.side_effect = ServerSelectionTimeoutError("no servers available")
    monkeypatch.setattr(mongo, "MongoClient", client_cls)

    with pytest.raises(StoreUnavailable, match="no servers available"):
        mongo.connect(SETTINGS)
    client_cls.return_value.close.assert_called_once()


def test_products_collection():
    client = MagicMock()
    mongo.products_collection(client, SETTINGS)
    client.__getitem__.assert_called_once_with("testdb")
    client.__getitem__.return_value.__getitem__.assert_called_once_with("products")


def test_store_call_sets_deadline():
    assert _csot.get_timeout() is None
    with mongo.store_call(2.5):
        assert _csot.get_timeout() == 2.5
    assert _csot.get_timeout() is None
