# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .ancestry import (
    find_in_parents,
    find_parent_containing,
    for_each_parent,
    iter_parents,
    logical_parent,
)
from .meta import PropertyDefinition, extract_meta, merge_defined, split_definition
from .ownership import Ownable, attach_owner, owner_of
from .property import PropertyBase
from .serialize import SerialKind, Serializable, dumps, kind_of, to_json

__all__ = (
    "PropertyBase",
    "PropertyDefinition",
    "Ownable",
    "SerialKind",
    "Serializable",
    "attach_owner",
    "dumps",
    "extract_meta",
    "find_in_parents",
    "find_parent_containing",
    "for_each_parent",
    "iter_parents",
    "kind_of",
    "logical_parent",
    "merge_defined",
    "owner_of",
    "split_definition",
    "to_json",
)
