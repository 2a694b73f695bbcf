# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, ClassVar

from pydantic import ConfigDict, Field, PrivateAttr

from ..base.ownership import Ownable
from ..base.serialize import SerialKind, Serializable, clone_element

__all__ = ("PropertyList", "as_property_list")


class PropertyList(Ownable, Serializable):
    """Ordered members of a node, e.g. the items of a folder.

    Members are attached to the list itself, and the list is attached to
    the node holding it, so a member's logical parent is that node. On the
    wire a list is stored under the singular form of the field name
    (``items`` -> ``item``) unless ``serialize_as_plural`` is set.

    Attributes:
        members (list):
            The members, in insertion order.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    serial_kind: ClassVar[SerialKind] = SerialKind.LIST

    members: list[Any] = Field(default_factory=list)
    _member_type: Callable[[Any], Any] | None = PrivateAttr(default=None)
    _plural: bool = PrivateAttr(default=False)

    def __init__(
        self,
        member_type: Callable[[Any], Any] | None = None,
        populate: Iterable[Any] | None = None,
        *,
        serialize_as_plural: bool = False,
    ) -> None:
        super().__init__()
        self._member_type = member_type
        self._plural = serialize_as_plural
        for item in populate or ():
            self.add(item)

    @property
    def serialize_as_plural(self) -> bool:
        return self._plural

    def _coerce(self, item: Any) -> Any:
        if self._member_type is None or isinstance(item, Ownable):
            return item
        return self._member_type(item)

    def add(self, item: Any) -> Any:
        """Appends ``item``, building it through the member type if raw."""
        member = self._coerce(item)
        if isinstance(member, Ownable):
            member.set_parent(self)
        self.members.append(member)
        return member

    def all(self) -> list[Any]:
        return list(self.members)

    def find(self, predicate: Callable[[Any], bool]) -> Any:
        return next((m for m in self.members if predicate(m)), None)

    def filter(self, predicate: Callable[[Any], bool]) -> list[Any]:
        return [m for m in self.members if predicate(m)]

    def to_json(self) -> list[Any]:
        return [clone_element(m) for m in self.members]

    def __iter__(self) -> Iterator[Any]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __getitem__(self, index: int) -> Any:
        return self.members[index]

    def __bool__(self) -> bool:
        return True


def as_property_list(
    value: Any, member_type: Callable[[Any], Any] | None
) -> PropertyList:
    """Field validator helper: wraps raw members in a ``PropertyList``."""
    if isinstance(value, PropertyList):
        return value
    if value is None:
        return PropertyList(member_type)
    if not isinstance(value, list):
        value = [value]
    return PropertyList(member_type, value)
