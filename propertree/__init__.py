# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._errors import InvalidOwnerError, PropertreeError, SerializationError
from .base import (
    PropertyBase,
    PropertyDefinition,
    SerialKind,
    Serializable,
    attach_owner,
    dumps,
    to_json,
)
from .collection import (
    Auth,
    Collection,
    CollectionInfo,
    Event,
    Item,
    ItemGroup,
    PropertyList,
    Request,
    Response,
    Script,
    Variable,
)
from .config import settings
from .sentinel import Undefined
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.LOG_LEVEL)

__all__ = (
    "Auth",
    "Collection",
    "CollectionInfo",
    "Event",
    "InvalidOwnerError",
    "Item",
    "ItemGroup",
    "PropertreeError",
    "PropertyBase",
    "PropertyDefinition",
    "PropertyList",
    "Request",
    "Response",
    "Script",
    "SerialKind",
    "Serializable",
    "SerializationError",
    "Undefined",
    "Variable",
    "__version__",
    "attach_owner",
    "dumps",
    "settings",
    "to_json",
)
