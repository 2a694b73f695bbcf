# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Splits raw definitions into ordinary fields and side-channel meta.

Keys carrying the reserved prefix (``_`` by default) never become fields.
They are unprefixed and kept in a separate meta mapping, so that
``{"name": "x", "_postman_id": "42"}`` becomes
``PropertyDefinition(fields={"name": "x"}, meta={"postman_id": "42"})``.
Container documents keep their meta under ``info``; when an ``info``
mapping is present, meta is read from there instead, even if it is empty.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ..config import settings

__all__ = (
    "PropertyDefinition",
    "is_meta_key",
    "unprefix_meta_key",
    "extract_meta",
    "merge_defined",
    "split_definition",
)


@dataclass(slots=True, frozen=True)
class PropertyDefinition:
    """A raw definition parsed into its two halves."""

    fields: dict[str, Any] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)


def _prefix(prefix: str | None) -> str:
    return prefix if prefix is not None else settings.META_PREFIX


def is_meta_key(key: Any, prefix: str | None = None) -> bool:
    p = _prefix(prefix)
    return isinstance(key, str) and key.startswith(p) and key != p


def unprefix_meta_key(key: str, prefix: str | None = None) -> str:
    return key.lstrip(_prefix(prefix))


def extract_meta(definition: Any, prefix: str | None = None) -> dict[str, Any]:
    """Collects unprefixed meta keys from a definition.

    Args:
        definition: Raw input. Anything that is not a mapping yields ``{}``.
        prefix: Meta marker, defaults to ``settings.META_PREFIX``.

    Returns:
        dict: Meta entries in source key order; a later key wins when two
            keys unprefix to the same name.
    """
    if not isinstance(definition, Mapping):
        return {}

    info = definition.get("info")
    src = info if isinstance(info, Mapping) else definition

    return {
        unprefix_meta_key(k, prefix): v
        for k, v in src.items()
        if is_meta_key(k, prefix)
    }


def merge_defined(
    existing: dict[str, Any], incoming: Mapping[str, Any]
) -> dict[str, Any]:
    """Fills keys of ``existing`` that are missing or ``None``."""
    for k, v in incoming.items():
        if existing.get(k) is None:
            existing[k] = v
    return existing


def split_definition(
    definition: Any,
    prefix: str | None = None,
    *,
    coerce: Callable[[Any], Any] | None = None,
) -> PropertyDefinition:
    """Parses a raw definition into a ``PropertyDefinition``.

    Meta is always read from ``definition`` as given. Fields are read from
    ``coerce(definition)`` when a coercion hook is passed, which lets a
    subtype expand shorthand input (a bare string, a list) or flatten
    nested blocks without losing the meta carried there.
    """
    meta = extract_meta(definition, prefix)
    if coerce is not None:
        definition = coerce(definition)
    if not isinstance(definition, Mapping):
        return PropertyDefinition(meta=meta)

    p = _prefix(prefix)
    fields = {
        k: v
        for k, v in definition.items()
        if not (isinstance(k, str) and k.startswith(p))
    }
    return PropertyDefinition(fields, meta)
