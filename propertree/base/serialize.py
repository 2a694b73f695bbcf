# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, ClassVar

import orjson
from pydantic import BaseModel

from .._errors import SerializationError
from ..sentinel import is_undefined

__all__ = (
    "SerialKind",
    "Serializable",
    "kind_of",
    "clone_element",
    "serialize_fields",
    "to_json",
    "dumps",
)

logger = logging.getLogger(__name__)


class SerialKind(str, Enum):
    """How the canonical serializer treats a field value."""

    PLAIN = "plain"
    NODE = "node"
    LIST = "list"


class Serializable(ABC):
    """Anything that renders its own canonical JSON."""

    serial_kind: ClassVar[SerialKind] = SerialKind.NODE

    @property
    def serialize_as_plural(self) -> bool:
        """Lists flagged here keep their plural key on the wire."""
        return False

    @abstractmethod
    def to_json(self) -> Any: ...


def kind_of(value: Any) -> SerialKind:
    if isinstance(value, Serializable):
        return value.serial_kind
    return SerialKind.PLAIN


def _deepcopy(key: str, value: Any) -> Any:
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error) as e:
        logger.debug("Field %r holds an uncopyable %s", key, type(value))
        raise SerializationError.for_key(key, value, cause=e) from e


def clone_element(value: Any, key: str = "") -> Any:
    """Returns a plain structural copy of ``value``.

    Nested containers are walked so that nodes inside plain dicts and
    lists are projected through their own ``to_json``.
    """
    if isinstance(value, Serializable):
        return value.to_json()
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return {k: clone_element(v, key) for k, v in value.items()}
    if isinstance(value, list):
        return [clone_element(v, key) for v in value]
    if isinstance(value, tuple):
        return tuple(clone_element(v, key) for v in value)
    return _deepcopy(key, value)


def serialize_fields(fields: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """The shared canonical projection over ``(key, value)`` pairs."""
    out: dict[str, Any] = {}
    for key, value in fields:
        # None/False/0 are kept
        if is_undefined(value):
            continue

        kind = kind_of(value)
        if (
            kind is SerialKind.LIST
            and not value.serialize_as_plural
            and key.endswith("s")
        ):
            key = key[:-1]

        if kind is not SerialKind.PLAIN:
            out[key] = value.to_json()
        elif isinstance(value, str):
            out[key] = value
        else:
            out[key] = clone_element(value, key)
    return out


def _own_fields(obj: Any) -> Iterable[tuple[str, Any]]:
    if isinstance(obj, BaseModel):
        # PropertyList overrides __iter__ to yield its members
        return BaseModel.__iter__(obj)
    if isinstance(obj, Mapping):
        return obj.items()
    if hasattr(obj, "__dict__"):
        return ((k, v) for k, v in vars(obj).items() if not k.startswith("_"))
    return ()


def to_json(obj: Any) -> dict[str, Any]:
    """Canonical JSON of a node, a plain mapping, or a plain object.

    Uses the same rules as ``PropertyBase.to_json`` so callers holding a
    raw object get the exact wire shape a node would produce.
    """
    return serialize_fields(_own_fields(obj))


def dumps(obj: Any, *, indent: bool = False) -> str:
    """Renders the canonical JSON of ``obj`` as JSON text."""
    data = obj.to_json() if isinstance(obj, Serializable) else to_json(obj)
    option = orjson.OPT_INDENT_2 if indent else None
    try:
        return orjson.dumps(data, option=option).decode("utf-8")
    except TypeError as e:
        raise SerializationError(
            f"Canonical JSON is not encodable: {e}", cause=e
        ) from e
