# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import Field, field_validator

from ..base.property import PropertyBase
from ..sentinel import MaybeUndefined, Undefined
from .auth import Auth
from .event import Event
from .item import Item
from .property_list import PropertyList, as_property_list
from .request import coerce_auth

__all__ = ("ItemGroup",)


def item_or_group(definition: Any) -> Item | ItemGroup:
    """Builds a folder when the definition holds members, else an item."""
    if isinstance(definition, Mapping) and "item" in definition:
        return ItemGroup(definition)
    return Item(definition)


class ItemGroup(PropertyBase):
    """A folder of items and nested folders.

    The member lists are always present and serialize as ``[]`` when
    empty, so the output can carry ``item``/``event`` keys the input lacked.
    """

    id: MaybeUndefined[str] = Undefined
    name: MaybeUndefined[str] = Undefined
    description: MaybeUndefined[Any] = Undefined
    auth: MaybeUndefined[Auth | None] = Undefined
    items: PropertyList = Field(
        default=None, alias="item", validate_default=True
    )
    events: PropertyList = Field(
        default=None, alias="event", validate_default=True
    )

    @field_validator("auth", mode="before")
    def _validate_auth(cls, value: Any) -> Any:
        return coerce_auth(value)

    @field_validator("items", mode="before")
    def _validate_items(cls, value: Any) -> PropertyList:
        return as_property_list(value, item_or_group)

    @field_validator("events", mode="before")
    def _validate_events(cls, value: Any) -> PropertyList:
        return as_property_list(value, Event)

    def for_each_item(self, callback: Callable[[Item], Any]) -> None:
        """Calls ``callback`` on every item, descending into sub-folders."""
        for member in self.items:
            if isinstance(member, ItemGroup):
                member.for_each_item(callback)
            else:
                callback(member)

    @staticmethod
    def is_item_group(obj: Any = None) -> bool:
        return isinstance(obj, ItemGroup)
