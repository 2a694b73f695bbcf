# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from ..base.property import PropertyBase
from ..sentinel import MaybeUndefined, Undefined
from .script import Script, coerce_script

__all__ = ("Event",)


class Event(PropertyBase):
    """Binds a script to a lifecycle hook such as ``prerequest``."""

    id: MaybeUndefined[str] = Undefined
    listen: MaybeUndefined[str] = Undefined
    script: MaybeUndefined[Script | None] = Undefined
    disabled: MaybeUndefined[bool] = Undefined

    @field_validator("script", mode="before")
    def _validate_script(cls, value: Any) -> Any:
        return coerce_script(value)
