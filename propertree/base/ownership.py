# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, PrivateAttr

from .._errors import InvalidOwnerError

__all__ = (
    "Ownable",
    "attach_owner",
    "owner_of",
)

logger = logging.getLogger(__name__)

# values that can never act as a container
_SCALARS = (str, bytes, bytearray, int, float, complex, bool)


class Ownable(BaseModel):
    """Base for anything that can be attached into a container.

    The link lives in a private attribute, so it is invisible to field
    iteration, ``model_dump`` and the canonical serializer.
    """

    _parent: Any = PrivateAttr(default=None)

    def set_parent(self, parent: Any) -> None:
        """Accepts an object and sets it as the container of this one."""
        if parent is None or isinstance(parent, _SCALARS):
            logger.debug(
                "Ignoring ownership link of type %s on %s",
                type(parent).__name__,
                type(self).__name__,
            )
            return
        self._parent = parent


def attach_owner(node: Any, container: Any) -> None:
    if not isinstance(node, Ownable):
        raise InvalidOwnerError(
            f"{type(node).__name__} cannot hold an ownership link",
            details={"type": type(node).__name__},
        )
    node.set_parent(container)


def owner_of(obj: Any) -> Any:
    """Returns the container ``obj`` is attached to, or ``None``."""
    if isinstance(obj, Ownable):
        return obj._parent
    return None
