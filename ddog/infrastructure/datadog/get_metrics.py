"""GetMetrics route - lists metrics actively reporting since a given time."""
import logging
from typing import Any, Dict, Optional

import httpx

from ddog.infrastructure.datadog.base_route import HeaderItems, Route
from ddog.schemas.metrics import GetMetricsResponse

logger = logging.getLogger(__name__)


class GetMetricsRoute(Route[GetMetricsResponse]):
    """
    `GET v1/metrics?from=...&host=...&tag_filter=...`

    Args:
        from_: POSIX seconds to list active metrics from.
        host: Optional hostname to filter the list by.
        tag_filter: Optional tag filter expression, e.g. `env:prod`.

    Requires `DD-API-KEY` and `DD-APPLICATION-KEY`.
    """

    method = "GET"
    success_status = 200
    response_model = GetMetricsResponse

    def __init__(
        self,
        from_: int = 0,
        host: Optional[str] = None,
        tag_filter: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[HeaderItems] = None,
    ):
        self.from_ = from_
        self.host = host
        self.tag_filter = tag_filter
        super().__init__(client=client, headers=headers)

    @classmethod
    def target(cls) -> str:
        return "v1/metrics"

    def path(self) -> str:
        return "v1/metrics"

    def set_from(self, from_: int) -> "GetMetricsRoute":
        logger.info(f"⏰ {self.target()}: from set to {from_}")
        self.from_ = from_
        return self

    def set_host(self, host: str) -> "GetMetricsRoute":
        logger.info(f"🖥️ {self.target()}: host set to {host}")
        self.host = host
        return self

    def set_tag_filter(self, tag_filter: str) -> "GetMetricsRoute":
        logger.info(f"🏷️ {self.target()}: tag filter set to {tag_filter}")
        self.tag_filter = tag_filter
        return self

    def _params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"from": str(self.from_)}
        if self.host:
            params["host"] = self.host
        if self.tag_filter:
            params["tag_filter"] = self.tag_filter
        return params
