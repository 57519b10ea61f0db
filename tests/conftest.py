from __future__ import annotations

import asyncio
from typing import Any, Callable, Iterator, List, Optional

import httpx
import pytest


def _build_mock_client(
    status_code: int = 200,
    json_body: Any = None,
    text: Optional[str] = None,
    captured: Optional[List[httpx.Request]] = None,
    raises: Optional[Callable[[httpx.Request], Exception]] = None,
) -> httpx.AsyncClient:
    def _handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        if raises is not None:
            raise raises(request)
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        return httpx.Response(status_code, text=text or "")

    return httpx.AsyncClient(transport=httpx.MockTransport(_handler))


class MockClientFactory:
    """Builds mocked clients and closes all of them on `close()`."""

    def __init__(self) -> None:
        self.clients: List[httpx.AsyncClient] = []

    def __call__(self, *args: Any, **kwargs: Any) -> httpx.AsyncClient:
        client = _build_mock_client(*args, **kwargs)
        self.clients.append(client)
        return client

    def close(self) -> None:
        for client in self.clients:
            if not client.is_closed:
                asyncio.run(client.aclose())


@pytest.fixture
def mock_client() -> Iterator[MockClientFactory]:
    factory = MockClientFactory()
    yield factory
    factory.close()


@pytest.fixture
def captured() -> List[httpx.Request]:
    return []


TAGS_BODY = {
    "data": {
        "type": "manage_tags",
        "id": "test.metric.latency",
        "attributes": {
            "aggregations": [{"space": "sum", "time": "sum"}],
            "created_at": "2020-03-25T09:48:37.463835Z",
            "include_percentiles": True,
            "metric_type": "count",
            "modified_at": "2020-03-25T09:48:37.463835Z",
            "tags": ["app", "datacenter"],
        },
    }
}

SERIES_PAYLOAD = """{
    "series": [{
        "metric": "rpc_latency",
        "type": 1,
        "points": [
            { "timestamp": 1660157680, "value": 10.0 },
            { "timestamp": 1660157680, "value": 5.0 }
        ]
    }]
}"""
