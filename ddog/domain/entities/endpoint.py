"""Endpoint Entity - the closed set of routes a Builder can select."""
from enum import Enum


class Endpoint(str, Enum):
    SERIES = "series"
    DISTRIBUTION = "distribution"
    TAGS = "tags"
    GET_METRICS = "get_metrics"
    METRIC = "metric"

    def __str__(self) -> str:
        return self.value
