"""Datadog API routes, one class per endpoint."""

from .base_route import API_KEY_HEADER, APPLICATION_KEY_HEADER, BASE_API_URL, Route
from .distribution import DistributionRoute
from .get_metrics import GetMetricsRoute
from .metric import MetricMetadataRoute, MetricRoute
from .series import SeriesRoute
from .tags import TagsRoute

__all__ = [
    "API_KEY_HEADER",
    "APPLICATION_KEY_HEADER",
    "BASE_API_URL",
    "DistributionRoute",
    "GetMetricsRoute",
    "MetricMetadataRoute",
    "MetricRoute",
    "Route",
    "SeriesRoute",
    "TagsRoute",
]
