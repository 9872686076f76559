"""Process configuration for the product services.

Values are read once at startup from the environment, after loading an
optional ``.env`` file. Missing required values raise ``ConfigurationError``
so the process never starts half-configured.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import quote_plus

from dotenv import load_dotenv

SERVICE_PORTS = {
    "create": ("CREATE_SERVICE_PORT", 8081),
    "read": ("READ_SERVICE_PORT", 8082),
    "update": ("UPDATE_SERVICE_PORT", 8083),
    "delete": ("DELETE_SERVICE_PORT", 8084),
}


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


def _get_required_env(key: str) -> str:
    value = os.environ.get(key)
    if not value:
        raise ConfigurationError(f"Required environment variable '{key}' is not set.")
    return value


def _get_number_env(key: str, default: float, cast=int):
    raw = os.environ.get(key)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable '{key}' must be a number, got {raw!r}.") from exc


@dataclass(frozen=True)
class MongoSettings:
    """MongoDB connection settings."""

    username: str
    password: str
    host: str
    port: int = 27017
    database: str = "parcialdb"
    timeout_seconds: float = 5.0
    connect_timeout_seconds: float = 10.0

    @property
    def uri(self) -> str:
        return (
            f"mongodb://{quote_plus(self.username)}:{quote_plus(self.password)}"
            f"@{self.host}:{self.port}/?authSource=admin"
        )


@dataclass(frozen=True)
class ServiceSettings:
    """Settings for one service process."""

    name: str
    host: str
    port: int
    log_level: str
    mongo: MongoSettings


def load_mongo_settings() -> MongoSettings:
    return MongoSettings(
        username=_get_required_env("MONGO_ROOT_USERNAME"),
        password=_get_required_env("MONGO_ROOT_PASSWORD"),
        host=_get_required_env("MONGO_HOST"),
        port=_get_number_env("MONGO_PORT", 27017),
        database=os.environ.get("MONGO_DB") or "parcialdb",
        timeout_seconds=_get_number_env("MONGO_TIMEOUT_SECONDS", 5.0, float),
        connect_timeout_seconds=_get_number_env("MONGO_CONNECT_TIMEOUT_SECONDS", 10.0, float),
    )


def load_settings(service: str) -> ServiceSettings:
    """Load the settings for ``service`` (one of ``SERVICE_PORTS``).

    Raises:
        ConfigurationError: If a required value is missing or malformed.
    """
    if service not in SERVICE_PORTS:
        raise ConfigurationError(f"Unknown service '{service}'.")

    load_dotenv()

    port_key, default_port = SERVICE_PORTS[service]
    return ServiceSettings(
        name=service,
        host=os.environ.get("SERVICE_HOST") or "0.0.0.0",
        port=_get_number_env(port_key, default_port),
        log_level=os.environ.get("LOG_LEVEL") or "INFO",
        mongo=load_mongo_settings(),
    )
