"""
ddog - a typed client for the Datadog metrics API.

Build a request with `Builder`, pick an endpoint, set headers and body, then
await `execute()` for a `(status_code, result)` pair.
"""

from ddog.builder import Builder
from ddog.config import EnvConfig, Settings
from ddog.domain.entities import ApiVersion, Endpoint
from ddog.exceptions import DdogError, UnsupportedApiVersionError
from ddog.infrastructure.datadog import (
    BASE_API_URL,
    DistributionRoute,
    GetMetricsRoute,
    MetricMetadataRoute,
    MetricRoute,
    Route,
    SeriesRoute,
    TagsRoute,
)
from ddog.schemas import ExecutionResult, RouteError
from ddog.utils import configure_logging, is_body_valid_json

__version__ = "0.1.0"

__all__ = [
    "ApiVersion",
    "BASE_API_URL",
    "Builder",
    "DdogError",
    "DistributionRoute",
    "Endpoint",
    "EnvConfig",
    "ExecutionResult",
    "GetMetricsRoute",
    "MetricMetadataRoute",
    "MetricRoute",
    "Route",
    "RouteError",
    "SeriesRoute",
    "Settings",
    "TagsRoute",
    "UnsupportedApiVersionError",
    "configure_logging",
    "is_body_valid_json",
]
