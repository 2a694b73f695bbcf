# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator

from ..base.property import PropertyBase
from ..config import settings
from ..sentinel import MaybeUndefined, Undefined
from .item_group import ItemGroup
from .property_list import PropertyList, as_property_list

__all__ = ("Collection", "CollectionInfo", "Variable")

# keys a collection keeps inside its ``info`` block on the wire
INFO_KEYS = ("id", "name", "description", "version", "schema")


class Variable(PropertyBase):
    key: MaybeUndefined[str] = Undefined
    value: MaybeUndefined[Any] = Undefined
    type: MaybeUndefined[str] = Undefined


class CollectionInfo(PropertyBase):
    """Entries of the ``info`` block that the collection does not flatten.

    Holds exporter fields such as ``updatedAt`` as extras so they survive
    a round trip. Prefixed keys of the block land in this node's meta.
    """


def coerce_info(value: Any) -> CollectionInfo:
    if isinstance(value, CollectionInfo):
        return value
    if value is None or value is Undefined:
        return CollectionInfo()
    return CollectionInfo(value)


class Collection(ItemGroup):
    """The root of a tree.

    Descriptive fields arrive in an ``info`` block. The ones named in
    ``INFO_KEYS`` are flattened onto the collection, everything else in
    the block is kept on ``info``, and ``to_json`` rebuilds the block
    from both. Meta such as ``_postman_id`` is read from that block as
    well and written back into it.
    """

    version: MaybeUndefined[Any] = Undefined
    schema_: MaybeUndefined[str] = Field(default=Undefined, alias="schema")
    info: CollectionInfo = Field(default=None, validate_default=True)
    variables: PropertyList = Field(
        default=None, alias="variable", validate_default=True
    )

    @classmethod
    def _coerce_definition(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        info = data.get("info")
        rest = dict(data)
        if isinstance(info, Mapping):
            rest.update({k: info[k] for k in INFO_KEYS if k in info})
            rest["info"] = {
                k: v for k, v in info.items() if k not in INFO_KEYS
            }
        return rest

    @field_validator("info", mode="before")
    def _validate_info(cls, value: Any) -> CollectionInfo:
        return coerce_info(value)

    @field_validator("variables", mode="before")
    def _validate_variables(cls, value: Any) -> PropertyList:
        return as_property_list(value, Variable)

    def to_json(self) -> dict[str, Any]:
        data = super().to_json()
        extra = data.pop("info", {})
        info = {
            f"{settings.META_PREFIX}{k}": v for k, v in self.meta().items()
        }
        if "schema_" in data:
            data["schema"] = data.pop("schema_")
        for key in INFO_KEYS:
            if key in data:
                info[key] = data.pop(key)
        info.update(extra)
        return {"info": info, **data}
