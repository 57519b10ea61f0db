"""Metric routes - a single metric addressed by name, under v1 or v2."""
import logging
from typing import Optional

import httpx

from ddog.infrastructure.datadog.base_route import HeaderItems, ResponseT, Route
from ddog.schemas.metrics import MetricMetadataResponse, MetricResponse

logger = logging.getLogger(__name__)


class _NamedMetricRoute(Route[ResponseT]):
    def __init__(
        self,
        metric_name: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[HeaderItems] = None,
    ):
        self.name = metric_name
        super().__init__(client=client, headers=headers)

    def metric_name(self, metric_name: str):
        logger.info(f"📊 {self.target()}: metric name set to {metric_name}")
        self.name = metric_name
        return self

    def route(self, route: str):
        return self.metric_name(route)

    def _missing_parameter(self) -> Optional[str]:
        return None if self.name else "metric_name"


class MetricRoute(_NamedMetricRoute[MetricResponse]):
    """`POST v2/metrics/{metric_name}`, 200 on success."""

    method = "POST"
    success_status = 200
    response_model = MetricResponse

    @classmethod
    def target(cls) -> str:
        return "v2/metrics/{metric_name}"

    def path(self) -> str:
        return f"v2/metrics/{self.name or ''}"


class MetricMetadataRoute(_NamedMetricRoute[MetricMetadataResponse]):
    """`GET v1/metrics/{metric_name}` - metadata for one metric."""

    method = "GET"
    success_status = 200
    response_model = MetricMetadataResponse

    @classmethod
    def target(cls) -> str:
        return "v1/metrics/{metric_name}"

    def path(self) -> str:
        return f"v1/metrics/{self.name or ''}"
