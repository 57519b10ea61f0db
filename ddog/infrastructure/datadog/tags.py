"""Tags route - creates a tag configuration for a metric."""
import logging
from typing import Optional

import httpx

from ddog.infrastructure.datadog.base_route import HeaderItems, Route
from ddog.schemas.metrics import TagsResponse

logger = logging.getLogger(__name__)


class TagsRoute(Route[TagsResponse]):
    """
    `POST v2/metrics/{metric_name}/tags`

    Creates and defines a list of queryable tag keys for an existing
    count/gauge/rate/distribution metric. Optionally includes percentile
    aggregations on a distribution metric or custom aggregations on a count,
    rate, or gauge metric. Requires `DD-API-KEY` and a `DD-APPLICATION-KEY`
    whose user holds the Manage Tags for Metrics permission.

    Responds with one of 201, 400, 403, 409 or 429; only 201 is parsed.
    """

    method = "POST"
    success_status = 201
    response_model = TagsResponse

    def __init__(
        self,
        metric_name: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[HeaderItems] = None,
    ):
        self.name = metric_name
        super().__init__(client=client, headers=headers)

    @classmethod
    def target(cls) -> str:
        return "v2/metrics/{metric_name}/tags"

    def path(self) -> str:
        return f"v2/metrics/{self.name or ''}/tags"

    def metric_name(self, metric_name: str) -> "TagsRoute":
        logger.info(f"🏷️ {self.target()}: metric name set to {metric_name}")
        self.name = metric_name
        return self

    def route(self, route: str) -> "TagsRoute":
        """Override the metric name. Prefer `metric_name()`."""
        return self.metric_name(route)

    def _missing_parameter(self) -> Optional[str]:
        return None if self.name else "metric_name"
