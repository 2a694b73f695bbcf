# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Mapping
from typing import Any, ClassVar

from pydantic import ConfigDict, PrivateAttr, model_validator
from typing_extensions import Self

from . import ancestry
from .meta import merge_defined, split_definition
from .ownership import Ownable
from .serialize import SerialKind, Serializable, to_json

__all__ = ("PropertyBase",)


class PropertyBase(Ownable, Serializable):
    """Base of every entity in a collection tree.

    A node is built from a raw definition. Keys of the definition that
    carry the meta prefix are moved into a private meta mapping, the rest
    become model fields. Containers attach nodes through ``set_parent``,
    after which inherited values can be resolved upwards with
    ``find_in_parents`` and the whole subtree rendered back to its wire
    shape with ``to_json``.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        extra="allow",
    )

    serial_kind: ClassVar[SerialKind] = SerialKind.NODE

    _meta: dict[str, Any] | None = PrivateAttr(default=None)

    def __init__(self, definition: Any = None, /, **data: Any) -> None:
        if definition is None:
            definition = data
        elif data:
            # keywords override the expanded shorthand
            expanded = type(self)._coerce_definition(definition)
            if not isinstance(expanded, Mapping):
                raise TypeError(
                    f"{type(self).__name__} cannot merge keyword fields "
                    f"into a {type(definition).__name__} definition"
                )
            definition = {**expanded, **data}
        self.__pydantic_validator__.validate_python(
            definition, self_instance=self
        )

    @model_validator(mode="wrap")
    @classmethod
    def _split_definition(cls, data: Any, handler: Callable) -> Self:
        if isinstance(data, cls):
            return handler(data)

        parsed = split_definition(data, coerce=cls._coerce_definition)
        meta = cls._initial_meta(data)

        instance = handler(parsed.fields)
        if meta is not None:
            instance._meta = merge_defined(meta, parsed.meta)
        elif parsed.meta:
            instance._meta = parsed.meta
        return instance

    @classmethod
    def _coerce_definition(cls, data: Any) -> Any:
        """Turns shorthand input (strings, lists) into a mapping."""
        return data

    @classmethod
    def _initial_meta(cls, data: Any) -> dict[str, Any] | None:
        """Meta a subtype assembles before the extracted keys merge in."""
        return None

    def model_post_init(self, __context: Any) -> None:
        super().model_post_init(__context)
        # containers and nested nodes held in fields are owned by this node
        for _, value in self:
            if isinstance(value, Ownable):
                value.set_parent(self)

    @classmethod
    def class_name(cls, full: bool = False) -> str:
        if full:
            return f"{cls.__module__}.{cls.__qualname__}"
        return cls.__name__

    def __bool__(self) -> bool:
        """Nodes are always considered truthy."""
        return True

    def meta(self, *keys: str) -> dict[str, Any]:
        """Returns the meta keys associated with the node.

        With no arguments a deep copy of the whole mapping is returned;
        otherwise only the requested keys that are present.
        """
        meta = self._meta or {}
        if keys:
            return {k: meta[k] for k in keys if k in meta}
        return copy.deepcopy(meta)

    def parent(self) -> Any:
        return ancestry.logical_parent(self)

    def iter_parents(self, include_root: bool = False) -> Iterator[Any]:
        return ancestry.iter_parents(self, include_root=include_root)

    def for_each_parent(
        self, iterator: Callable[[Any], Any], include_root: bool = False
    ) -> None:
        """Invokes ``iterator`` for every parent in the parent chain.

        Args:
            iterator: Called once per ancestor, nearest first.
            include_root: Also visit the topmost container (the
                collection), which is skipped by default.
        """
        ancestry.for_each_parent(self, iterator, include_root=include_root)

    def find_parent_containing(self, name: str) -> Any:
        return ancestry.find_parent_containing(self, name)

    def find_in_parents(self, name: str) -> Any:
        """Looks ``name`` up locally, then in each ancestor up the chain."""
        return ancestry.find_in_parents(self, name)

    def to_json(self) -> dict[str, Any]:
        """Returns the wire-format representation of this node."""
        return to_json(self)
