# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from ..base.property import PropertyBase
from ..sentinel import MaybeUndefined, Undefined
from .auth import Auth
from .event import Event
from .property_list import PropertyList, as_property_list
from .request import Request, Response

__all__ = ("Item",)


class Item(PropertyBase):
    """A single request together with its recorded responses and events.

    ``responses`` and ``events`` always exist, so ``to_json`` emits
    ``response: []`` and ``event: []`` even for a definition without them.
    """

    id: MaybeUndefined[str] = Undefined
    name: MaybeUndefined[str] = Undefined
    description: MaybeUndefined[Any] = Undefined
    request: MaybeUndefined[Request] = Undefined
    responses: PropertyList = Field(
        default=None, alias="response", validate_default=True
    )
    events: PropertyList = Field(
        default=None, alias="event", validate_default=True
    )

    @field_validator("request", mode="before")
    def _validate_request(cls, value: Any) -> Any:
        if value is Undefined or isinstance(value, Request):
            return value
        return Request(value)

    @field_validator("responses", mode="before")
    def _validate_responses(cls, value: Any) -> PropertyList:
        return as_property_list(value, Response)

    @field_validator("events", mode="before")
    def _validate_events(cls, value: Any) -> PropertyList:
        return as_property_list(value, Event)

    def get_auth(self) -> Auth | None:
        """Returns the auth that applies to this item.

        A non-empty auth on the request wins; otherwise the nearest
        folder or collection with an auth provides it.
        """
        request_auth = getattr(self.request, "auth", None)
        if Auth.is_auth(request_auth) and request_auth.type:
            return request_auth
        return self.find_in_parents("auth")

    def get_events(self, name: str | None = None) -> list[Event]:
        """Returns the events listening on ``name``, or all when falsy."""
        if not name:
            return self.events.all()
        return self.events.filter(lambda e: e.listen == name)

    @staticmethod
    def is_item(obj: Any = None) -> bool:
        return isinstance(obj, Item)
