# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .auth import Auth
from .collection import Collection, CollectionInfo, Variable
from .event import Event
from .item import Item
from .item_group import ItemGroup
from .property_list import PropertyList
from .request import Request, Response
from .script import Script

__all__ = (
    "Auth",
    "Collection",
    "CollectionInfo",
    "Event",
    "Item",
    "ItemGroup",
    "PropertyList",
    "Request",
    "Response",
    "Script",
    "Variable",
)
