"""
Response models for the Datadog metrics endpoints.

Each model mirrors the JSON document returned by the vendor for a successful
call. Instances are only ever produced by validating a response body and are
frozen afterwards.
"""

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class MetricType(str, Enum):
    """The type of a metric."""
    GAUGE = "gauge"
    COUNT = "count"
    RATE = "rate"
    DISTRIBUTION = "distribution"


class SpaceAggregation(str, Enum):
    """A space aggregation for use in query."""
    AVG = "avg"
    MAX = "max"
    MIN = "min"
    SUM = "sum"


class TimeAggregation(str, Enum):
    """A time aggregation for use in query."""
    AVG = "avg"
    COUNT = "count"
    MAX = "max"
    MIN = "min"
    SUM = "sum"


class MetricTag(str, Enum):
    """The metric tag configuration resource type."""
    MANAGE_TAGS = "manage_tags"


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Aggregation(FrozenModel):
    """A queryable aggregation combination for a count, rate, or gauge metric."""
    space: SpaceAggregation = Field(..., description="Space aggregation")
    time: TimeAggregation = Field(..., description="Time aggregation")


class SeriesResponse(FrozenModel):
    """Response of `POST v2/series`."""
    errors: List[Any] = Field(default_factory=list, description="Errors reported for the payload")


class DistributionResponse(FrozenModel):
    """Response of `POST v1/distribution_points`."""
    status: str = Field(..., description="Acceptance status, e.g. 'ok'")


class GetMetricsResponse(FrozenModel):
    """Response of `GET v1/metrics`."""
    from_: str = Field(..., alias="from", description="Time the listing starts from (POSIX seconds)")
    metrics: List[str] = Field(default_factory=list, description="Active metric names")


class TagsResponseAttributes(FrozenModel):
    """Definition of a metric tag configuration."""
    tags: List[str] = Field(default_factory=list, description="Queryable tag keys")
    metric_type: Optional[MetricType] = Field(None, description="The metric's type")
    created_at: Optional[datetime] = Field(None, description="Creation time")
    modified_at: Optional[datetime] = Field(None, description="Last modification time")
    included_percentiles: Optional[bool] = Field(
        None,
        validation_alias=AliasChoices("included_percentiles", "include_percentiles"),
        description="Whether percentiles are included for a distribution metric",
    )
    aggregations: List[Aggregation] = Field(default_factory=list, description="Queryable aggregations")


class TagsResponseData(FrozenModel):
    type: MetricTag = Field(..., description="Resource type")
    id: str = Field(..., description="The metric name")
    attributes: TagsResponseAttributes


class TagsResponse(FrozenModel):
    """Response of `POST v2/metrics/{metric_name}/tags`."""
    data: TagsResponseData


class MetricResponseData(FrozenModel):
    type: str = Field(..., description="Resource type")
    id: str = Field(..., description="The metric name")
    attributes: TagsResponseAttributes = Field(default_factory=TagsResponseAttributes)


class MetricResponse(FrozenModel):
    """Response of `POST v2/metrics/{metric_name}`."""
    data: MetricResponseData


class MetricMetadataResponse(FrozenModel):
    """Response of `GET v1/metrics/{metric_name}`."""
    description: Optional[str] = None
    short_name: Optional[str] = None
    integration: Optional[str] = None
    statsd_interval: Optional[int] = None
    per_unit: Optional[str] = None
    type: Optional[str] = None
    unit: Optional[str] = None
