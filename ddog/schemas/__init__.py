"""
Pydantic models for the Datadog metrics endpoints.

Response models, request body helpers, and the result/error types
returned by route execution.
"""

from .errors import ErrorCode, ExecutionResult, RouteError
from .metrics import (
    Aggregation,
    DistributionResponse,
    GetMetricsResponse,
    MetricMetadataResponse,
    MetricResponse,
    MetricTag,
    MetricType,
    SeriesResponse,
    SpaceAggregation,
    TagsResponse,
    TimeAggregation,
)
from .requests import (
    DistributionPayload,
    DistributionSeries,
    MetricPoint,
    MetricResource,
    MetricSeries,
    SeriesPayload,
    TagConfigAttributes,
    TagConfigData,
    TagConfigPayload,
)

__all__ = [
    "Aggregation",
    "DistributionPayload",
    "DistributionResponse",
    "DistributionSeries",
    "ErrorCode",
    "ExecutionResult",
    "GetMetricsResponse",
    "MetricMetadataResponse",
    "MetricPoint",
    "MetricResource",
    "MetricResponse",
    "MetricSeries",
    "MetricTag",
    "MetricType",
    "RouteError",
    "SeriesPayload",
    "SeriesResponse",
    "SpaceAggregation",
    "TagConfigAttributes",
    "TagConfigData",
    "TagConfigPayload",
    "TagsResponse",
    "TimeAggregation",
]
