"""Opaque product identifier.

Services only ever see ``ProductId``. The MongoDB repositories are the one
place that turns it into a native ``ObjectId`` and back.
"""

from __future__ import annotations

from dataclasses import dataclass

from bson import ObjectId

from product_common.errors import InvalidProductId


@dataclass(frozen=True)
class ProductId:
    value: str

    @classmethod
    def parse(cls, raw: str) -> ProductId:
        if not isinstance(raw, str) or not ObjectId.is_valid(raw):
            raise InvalidProductId(raw)
        return cls(raw.lower())

    @classmethod
    def new(cls) -> ProductId:
        return cls(str(ObjectId()))

    @classmethod
    def from_object_id(cls, object_id: ObjectId) -> ProductId:
        return cls(str(object_id))

    def to_object_id(self) -> ObjectId:
        return ObjectId(self.value)

    def __str__(self) -> str:
        return self.value
