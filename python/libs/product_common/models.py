"""Shared Pydantic models used across the product services."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# BSON integers are signed 64-bit.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ProductBase(BaseModel):
    name: str = ""
    description: str = ""
    price: float = 0.0
    stock: int = Field(0, ge=INT64_MIN, le=INT64_MAX)


class ProductCreate(ProductBase):
    """Body of POST /products. Any client-supplied id is dropped.

    Validation is strict: ``"9.99"`` is not a price and ``true`` is not a
    stock count. JSON integers are still accepted as prices.
    """

    model_config = ConfigDict(strict=True)

    @field_validator("price", mode="before")
    @classmethod
    def _integer_price(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError as exc:
                raise ValueError("price is out of range") from exc
        return value


class Product(ProductBase):
    id: str | None = None

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> Any:
        # Older documents were written with a numeric description.
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> Product:
        data = dict(document)
        raw_id = data.pop("_id", None)
        return cls(id=str(raw_id) if raw_id is not None else None, **data)


class ProductUpdate(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = ""
    description: str = ""


class StatusResponse(BaseModel):
    status: str
