# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import field_validator

from ..base.property import PropertyBase
from ..sentinel import MaybeUndefined, Undefined

__all__ = ("Script",)

DEFAULT_SCRIPT_TYPE = "text/javascript"


def _lines(source: str) -> list[str]:
    return source.split("\n")


class Script(PropertyBase):
    """A script attached to an event.

    Accepts a full definition, a bare source string, or a list of lines.
    """

    type: str = DEFAULT_SCRIPT_TYPE
    src: MaybeUndefined[Any] = Undefined
    exec: MaybeUndefined[list[str]] = Undefined

    @classmethod
    def _coerce_definition(cls, data: Any) -> Any:
        if isinstance(data, (str, list)):
            return {"type": DEFAULT_SCRIPT_TYPE, "exec": data}
        return data

    @field_validator("exec", mode="before")
    def _split_exec(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _lines(value)
        return value

    def to_source(self) -> str | None:
        """Returns the script body, or ``None`` when it has no ``exec``."""
        if isinstance(self.exec, list):
            return "\n".join(self.exec)
        return None

    @staticmethod
    def is_script(obj: Any) -> bool:
        return isinstance(obj, Script)


def coerce_script(value: Any) -> Any:
    if value is Undefined or value is None or isinstance(value, Script):
        return value
    if isinstance(value, (str, list, Mapping)):
        return Script(value)
    return value
