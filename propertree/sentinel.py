# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

T = TypeVar("T")

__all__ = (
    "Undefined",
    "UndefinedType",
    "MaybeUndefined",
    "is_undefined",
)


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, Any] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class UndefinedType(metaclass=_SingletonMeta):
    """Marks a node field that was never given a value.

    Fields holding this value are left out of the canonical JSON,
    whereas ``None``, ``False`` and ``0`` are kept.

    Example:
        >>> node = Item({"name": "x"})
        >>> node.description is Undefined
        True
    """

    __slots__ = ()

    def __deepcopy__(self, memo):  # copy & deepcopy both noop
        return self

    def __copy__(self):
        return self

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "Undefined"


Undefined: Final = UndefinedType()
"""A node field that was never set."""

MaybeUndefined = Union[T, UndefinedType]


def is_undefined(value: Any) -> bool:
    return value is Undefined
