# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "PropertreeError",
    "SerializationError",
    "InvalidOwnerError",
)


class PropertreeError(Exception):
    default_message: ClassVar[str] = "propertree error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class SerializationError(PropertreeError):
    """Raised when a field value cannot be projected to plain data."""

    default_message = "Serialization failed"

    @classmethod
    def for_key(
        cls,
        key: str,
        value: Any,
        *,
        cause: Exception | None = None,
    ) -> "SerializationError":
        details = {"key": key, "type": type(value).__name__}
        return cls(
            f"Cannot serialize field '{key}' of type {type(value).__name__}",
            details=details,
            cause=cause,
        )


class InvalidOwnerError(PropertreeError):
    """Raised when an ownership link is attached to a non-ownable object."""

    default_message = "Object cannot hold an ownership link"
