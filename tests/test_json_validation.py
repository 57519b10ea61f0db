"""Tests for JSON body validation."""

from __future__ import annotations

import json

from ddog import Builder, is_body_valid_json

VALID_BODY = """{
    "series": [{
        "metric": "rpc_latency",
        "type": 1,
        "source_type_name": "worker",
        "resources": [{ "name": "latency", "type": "time" }],
        "points": [
            { "timestamp": 1660157680, "value": 10.0 },
            { "timestamp": 1660157680, "value": 5.0 },
            { "timestamp": 1660157680, "value": 15.0 }
        ]
    }]
}"""

# Trailing comma after the last point
INVALID_BODY = """{
    "series": [{
        "metric": "rpc_latency",
        "points": [
            { "timestamp": 1660157680, "value": 10.0 },
            { "timestamp": 1660157680, "value": 15.0 },
        ]
    }]
}"""


def test_valid_json_returns_none() -> None:
    assert Builder.is_body_valid_json(VALID_BODY) is None
    assert is_body_valid_json("[]") is None
    assert is_body_valid_json(b'{"status": "ok"}') is None


def test_trailing_comma_returns_decode_error() -> None:
    error = Builder.is_body_valid_json(INVALID_BODY)

    assert isinstance(error, json.JSONDecodeError)


def test_empty_body_is_invalid() -> None:
    assert isinstance(is_body_valid_json(""), json.JSONDecodeError)


def test_undecodable_bytes_return_decode_error() -> None:
    body = b"\xff\xfe{"

    assert isinstance(is_body_valid_json(body), UnicodeDecodeError)
    assert isinstance(Builder.is_body_valid_json(body), ValueError)
