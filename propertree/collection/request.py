# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import field_validator

from ..base.property import PropertyBase
from ..sentinel import MaybeUndefined, Undefined
from .auth import Auth

__all__ = ("Request", "Response", "coerce_auth")


def coerce_auth(value: Any) -> Any:
    if isinstance(value, Mapping) and not isinstance(value, Auth):
        return Auth(value)
    return value


class Request(PropertyBase):
    """An HTTP request definition. A bare string is taken as the URL."""

    url: MaybeUndefined[Any] = Undefined
    method: str = "GET"
    header: MaybeUndefined[Any] = Undefined
    body: MaybeUndefined[Any] = Undefined
    auth: MaybeUndefined[Auth | None] = Undefined

    @classmethod
    def _coerce_definition(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"url": data}
        return data

    @field_validator("method", mode="before")
    def _upper_method(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("auth", mode="before")
    def _validate_auth(cls, value: Any) -> Any:
        return coerce_auth(value)


class Response(PropertyBase):
    """A recorded response, kept as given."""

    name: MaybeUndefined[str] = Undefined
    code: MaybeUndefined[int] = Undefined
