"""
Request body models for the Datadog metrics endpoints.

These are optional helpers: any route accepts a raw JSON string as its body,
but passing one of these models to `Route.body()` serializes it with the exact
field names the vendor expects.
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from ddog.schemas.metrics import Aggregation, MetricTag, MetricType


class MetricPoint(BaseModel):
    timestamp: int = Field(..., description="POSIX timestamp in seconds")
    value: float


class MetricResource(BaseModel):
    name: str
    type: str


class MetricSeries(BaseModel):
    """A single time series submitted to `v2/series`.

    `type` is the vendor's intake enum: 0 unspecified, 1 count, 2 rate, 3 gauge.
    """
    metric: str
    points: List[MetricPoint]
    type: Optional[int] = Field(None, ge=0, le=3)
    interval: Optional[int] = None
    unit: Optional[str] = None
    tags: Optional[List[str]] = None
    source_type_name: Optional[str] = None
    resources: Optional[List[MetricResource]] = None
    metadata: Optional[Dict[str, Any]] = None


class SeriesPayload(BaseModel):
    series: List[MetricSeries]


class DistributionSeries(BaseModel):
    """Distribution points: each point is `[timestamp, [values...]]`."""
    metric: str
    points: List[Tuple[int, List[float]]]
    host: Optional[str] = None
    tags: Optional[List[str]] = None
    type: str = "distribution"


class DistributionPayload(BaseModel):
    series: List[DistributionSeries]


class TagConfigAttributes(BaseModel):
    tags: List[str] = Field(default_factory=list)
    metric_type: MetricType
    include_percentiles: Optional[bool] = None
    aggregations: Optional[List[Aggregation]] = None


class TagConfigData(BaseModel):
    type: MetricTag = MetricTag.MANAGE_TAGS
    id: str
    attributes: TagConfigAttributes


class TagConfigPayload(BaseModel):
    data: TagConfigData
