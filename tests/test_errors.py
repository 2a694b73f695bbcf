# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for propertree error classes."""

from propertree._errors import (
    InvalidOwnerError,
    PropertreeError,
    SerializationError,
)


class TestPropertreeError:
    def test_default_initialization(self):
        error = PropertreeError()
        assert str(error) == "propertree error"
        assert error.message == "propertree error"
        assert error.details == {}

    def test_with_details(self):
        error = PropertreeError("Error", details={"key": "value"})
        assert error.details == {"key": "value"}

    def test_with_cause(self):
        cause = ValueError("Original error")
        error = PropertreeError("Wrapped error", cause=cause)
        assert error.get_cause() is cause
        assert error.__cause__ is cause

    def test_to_dict(self):
        error = PropertreeError("Error", details={"a": 1})
        assert error.to_dict() == {
            "error": "PropertreeError",
            "message": "Error",
            "details": {"a": 1},
        }

    def test_to_dict_with_cause(self):
        error = PropertreeError("Error", cause=ValueError("boom"))
        assert error.to_dict(include_cause=True)["cause"] == "ValueError('boom')"


class TestSerializationError:
    def test_for_key(self):
        cause = TypeError("cannot pickle")
        error = SerializationError.for_key("handle", object(), cause=cause)
        assert isinstance(error, PropertreeError)
        assert error.details == {"key": "handle", "type": "object"}
        assert "handle" in error.message
        assert error.get_cause() is cause

    def test_default_message(self):
        assert SerializationError().message == "Serialization failed"


def test_invalid_owner_error_default_message():
    assert InvalidOwnerError().message == "Object cannot hold an ownership link"
