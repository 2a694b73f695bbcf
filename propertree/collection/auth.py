# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

from ..base.property import PropertyBase
from ..sentinel import MaybeUndefined, Undefined

__all__ = ("Auth",)


class Auth(PropertyBase):
    """Authorization descriptor.

    The parameters of a scheme live under a key named after its type,
    e.g. ``{"type": "basic", "basic": {"username": "a"}}``.
    """

    type: MaybeUndefined[str] = Undefined

    def parameters(self) -> dict[str, Any]:
        if not self.type:
            return {}
        block = (self.model_extra or {}).get(self.type)
        if isinstance(block, list):
            # list form: [{"key": ..., "value": ...}, ...]
            return {
                p["key"]: p.get("value")
                for p in block
                if isinstance(p, dict) and "key" in p
            }
        return dict(block) if isinstance(block, dict) else {}

    @staticmethod
    def is_auth(obj: Any) -> bool:
        return isinstance(obj, Auth)
