# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import pytest


@pytest.fixture
def nested_collection_definition():
    """Collection with two folders (one nested) and a root-level request."""
    return {
        "info": {
            "_postman_id": "e5f2e9cf-173b-c60a-7336-ac804a87d762",
            "name": "nested-collection",
            "schema": "https://schema.getpostman.com/json/collection/v2.0.0/",
        },
        "item": [
            {
                "id": "F1-id",
                "name": "F1",
                "item": [
                    {"id": "F1.R1-id", "name": "F1.R1", "request": "https://postman-echo.com/get"},
                    {"id": "F1.R2-id", "name": "F1.R2", "request": "https://postman-echo.com/get"},
                ],
            },
            {
                "id": "F2-id",
                "name": "F2",
                "item": [
                    {
                        "id": "F2.F3-id",
                        "name": "F2.F3",
                        "item": [
                            {
                                "id": "F2.F3.R1-id",
                                "name": "F2.F3.R1",
                                "request": "https://postman-echo.com/get",
                            }
                        ],
                    },
                    {"id": "F2.R1-id", "name": "F2.R1", "request": "https://postman-echo.com/get"},
                ],
            },
            {"id": "R1-id", "name": "R1", "request": "https://postman-echo.com/get"},
        ],
    }


@pytest.fixture
def raw_item():
    """A request item with responses and both kinds of script events."""
    return {
        "id": "my-item",
        "name": "A simple GET request",
        "description": "Fetches the echo endpoint",
        "request": {
            "url": "https://postman-echo.com/get",
            "method": "GET",
            "header": [{"key": "Accept", "value": "application/json"}],
        },
        "response": [
            {"name": "200 ok", "code": 200, "body": "{}"},
        ],
        "event": [
            {"listen": "prerequest", "script": "my-global-script-1"},
            {
                "listen": "test",
                "script": {
                    "type": "text/javascript",
                    "exec": "tests['ok'] = true;\nconsole.log('done');",
                },
            },
        ],
    }
