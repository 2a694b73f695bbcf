# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Upward lookups over the ownership-link chain.

A node's link points at its container (usually a ``PropertyList``), and the
container's link points at the node that owns it. The logical parent is
therefore two hops away, while attribute lookups walk every single hop.

Cyclic links are not detected; whoever attaches nodes keeps the tree
acyclic.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from .ownership import owner_of

__all__ = (
    "logical_parent",
    "iter_parents",
    "for_each_parent",
    "find_parent_containing",
    "find_in_parents",
)


def logical_parent(node: Any) -> Any:
    """Returns the conceptual owner of ``node``, or ``None``."""
    container = owner_of(node)
    if container is None:
        return None
    return owner_of(container)


def _parent_of(obj: Any) -> Any:
    # only nodes expose a logical parent; anything else ends the chain
    from .property import PropertyBase

    if isinstance(obj, PropertyBase):
        return obj.parent()
    return None


def iter_parents(node: Any, *, include_root: bool = False) -> Iterator[Any]:
    """Yields ancestors nearest first.

    The topmost ancestor (the one without a parent of its own) is only
    yielded when ``include_root`` is set.
    """
    parent = logical_parent(node)
    grandparent = _parent_of(parent) if parent is not None else None

    while parent is not None and (grandparent is not None or include_root):
        yield parent
        parent = grandparent
        grandparent = _parent_of(parent) if parent is not None else None


def for_each_parent(
    node: Any,
    iterator: Callable[[Any], Any],
    *,
    include_root: bool = False,
) -> None:
    if not callable(iterator):
        return
    for parent in iter_parents(node, include_root=include_root):
        iterator(parent)


def find_parent_containing(node: Any, name: str) -> Any:
    """Returns the closest object, ``node`` included, with a truthy ``name``.

    A falsy value such as ``False`` or ``{}`` does not stop the search.
    """
    current = node
    while current is not None:
        if getattr(current, name, None):
            return current
        current = owner_of(current)
    return None


def find_in_parents(node: Any, name: str) -> Any:
    owner = find_parent_containing(node, name)
    return getattr(owner, name) if owner is not None else None
