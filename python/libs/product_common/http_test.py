from unittest.mock import MagicMock

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from product_common import http
from product_common.errors import StoreUnavailable


@pytest.fixture
def mongo_env(monkeypatch):
    monkeypatch.setenv("MONGO_ROOT_USERNAME", "root")
    monkeypatch.setenv("MONGO_ROOT_PASSWORD", "secret")
    monkeypatch.setenv("MONGO_HOST", "mongo")
    monkeypatch.setenv("MONGO_DB", "testdb")
    monkeypatch.setenv("MONGO_TIMEOUT_SECONDS", "2.5")
    return monkeypatch


def _app(build_service):
    app = FastAPI(lifespan=http.mongo_lifespan("read", build_service))
    app.include_router(http.health_router("Read"))

    @app.get("/timeout")
    def timeout(service=Depends(http.get_service)):
        return {"timeout": service}

    return app


def test_lifespan_builds_service_and_closes_client(mongo_env):
    client = MagicMock()
    mongo_env.setattr(http, "connect", MagicMock(return_value=client))
    seen = {}

    def build(collection, timeout_seconds):
        seen["collection"] = collection
        return timeout_seconds

    with TestClient(_app(build)) as test_client:
        assert test_client.get("/timeout").json() == {"timeout": 2.5}
        assert test_client.get("/health").text == "Read service OK"

    assert seen["collection"] is client["testdb"]["products"]
    client.close.assert_called_once()


def test_lifespan_startup_failure_is_fatal(mongo_env):
    mongo_env.setattr(http, "connect", MagicMock(side_effect=StoreUnavailable("cannot ping MongoDB")))

    with pytest.raises(StoreUnavailable):
        with TestClient(_app(lambda collection, timeout_seconds: None)):
            pass


def test_path_product_id_rejects_garbage():
    app = FastAPI()
    http.install_error_handlers(app, "delete")

    @app.delete("/products/{product_id}")
    def delete(product_id=Depends(http.path_product_id)):
        return {"id": str(product_id)}

    client = TestClient(app)
    assert client.delete("/products/xyz").status_code == 400
    good = "65a1b2c3d4e5f60718293a4b"
    assert client.delete(f"/products/{good}").json() == {"id": good}
