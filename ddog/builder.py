"""
Builder - the entry point for constructing Datadog API requests.

The builder selects an API version and hands out the route for a requested
endpoint. Builder methods return a new builder, so a configured builder can be
shared and specialised without affecting other call chains:

    builder = Builder().with_api_key(api_key)
    status, result = await (
        builder.v2()
        .post_series()
        .with_header("Content-Type", "application/json")
        .body(payload)
        .execute()
    )
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

import httpx

from ddog import config
from ddog.config import EnvConfig, Settings
from ddog.domain.entities import ApiVersion, Endpoint
from ddog.exceptions import UnsupportedApiVersionError
from ddog.infrastructure.datadog import (
    API_KEY_HEADER,
    APPLICATION_KEY_HEADER,
    DistributionRoute,
    GetMetricsRoute,
    MetricMetadataRoute,
    MetricRoute,
    Route,
    SeriesRoute,
    TagsRoute,
)
from ddog.utils import configure_logging
from ddog.utils import is_body_valid_json as _is_body_valid_json

logger = logging.getLogger(__name__)

HeaderList = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class Builder:
    """Selects an API version and produces routes for it."""

    version: ApiVersion = field(default_factory=ApiVersion.default)
    headers: HeaderList = ()
    client: Optional[httpx.AsyncClient] = field(default=None, compare=False, repr=False)

    @classmethod
    def new(cls, client: Optional[httpx.AsyncClient] = None) -> "Builder":
        return cls(client=client)

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None
    ) -> "Builder":
        """Create a builder carrying the credentials found in `Settings`."""
        settings = settings or config.settings
        builder = cls(client=client).with_env(EnvConfig.from_settings(settings))
        if settings.TRACING_SUBSCRIBER:
            builder = builder.with_logging(settings.DDOG_LOG_LEVEL)
        return builder

    # Version selection

    def v1(self) -> "Builder":
        return replace(self, version=ApiVersion.V1)

    def v2(self) -> "Builder":
        return replace(self, version=ApiVersion.V2)

    def with_version(self, version: Union[ApiVersion, str]) -> "Builder":
        return replace(self, version=ApiVersion(version))

    # Headers inherited by every route this builder produces

    def with_header(self, key: str, value: str) -> "Builder":
        kept = tuple((k, v) for k, v in self.headers if k.lower() != key.lower())
        return replace(self, headers=kept + ((key, value),))

    def with_headers(self, headers: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> "Builder":
        items = headers.items() if isinstance(headers, Mapping) else headers
        builder = self
        for key, value in items:
            builder = builder.with_header(key, value)
        return builder

    def with_api_key(self, key: str) -> "Builder":
        return self.with_header(API_KEY_HEADER, key)

    def with_application_key(self, key: str) -> "Builder":
        return self.with_header(APPLICATION_KEY_HEADER, key)

    def with_env(self, env: EnvConfig) -> "Builder":
        builder = self
        if env.api_key:
            builder = builder.with_api_key(env.api_key)
        if env.application_key:
            builder = builder.with_application_key(env.application_key)
        return builder

    def with_logging(self, level: Union[int, str] = logging.INFO) -> "Builder":
        configure_logging(level)
        logger.info(f"🔧 Logging enabled at level {level}")
        return self

    # Endpoint selection

    def _ensure_version(self, endpoint: Endpoint, *supported: ApiVersion) -> None:
        if self.version not in supported:
            logger.error(f"❌ {endpoint} is not available for API {self.version}")
            raise UnsupportedApiVersionError(
                str(endpoint), str(self.version), [str(v) for v in supported]
            )

    def _route_kwargs(self) -> dict:
        return {"client": self.client, "headers": list(self.headers)}

    def post_series(self) -> SeriesRoute:
        """`POST v2/series` (v2 only)."""
        self._ensure_version(Endpoint.SERIES, ApiVersion.V2)
        return SeriesRoute(**self._route_kwargs())

    def post_distribution(self) -> DistributionRoute:
        """`POST v1/distribution_points`, available from either version."""
        self._ensure_version(Endpoint.DISTRIBUTION, ApiVersion.V1, ApiVersion.V2)
        return DistributionRoute(**self._route_kwargs())

    def create_new_tag_config(self, metric_name: Optional[str] = None) -> TagsRoute:
        """`POST v2/metrics/{metric_name}/tags` (v2 only)."""
        self._ensure_version(Endpoint.TAGS, ApiVersion.V2)
        return TagsRoute(metric_name, **self._route_kwargs())

    def get_metrics(
        self, from_: int, host: Optional[str] = None, tag_filter: Optional[str] = None
    ) -> GetMetricsRoute:
        """`GET v1/metrics` (v1 only)."""
        self._ensure_version(Endpoint.GET_METRICS, ApiVersion.V1)
        return GetMetricsRoute(from_, host, tag_filter, **self._route_kwargs())

    def metrics(self, metric_name: Optional[str] = None) -> Union[MetricRoute, MetricMetadataRoute]:
        """A single metric by name: metadata under v1, `POST v2/metrics/{name}` under v2."""
        if self.version == ApiVersion.V1:
            return MetricMetadataRoute(metric_name, **self._route_kwargs())
        return MetricRoute(metric_name, **self._route_kwargs())

    def select(self, endpoint: Union[Endpoint, str], **params: Any) -> Route:
        """Dispatch an `Endpoint` to its selector, passing `params` through."""
        endpoint = Endpoint(endpoint)
        if endpoint == Endpoint.SERIES:
            return self.post_series()
        if endpoint == Endpoint.DISTRIBUTION:
            return self.post_distribution()
        if endpoint == Endpoint.TAGS:
            return self.create_new_tag_config(params.get("metric_name"))
        if endpoint == Endpoint.GET_METRICS:
            return self.get_metrics(
                params.get("from_", 0), params.get("host"), params.get("tag_filter")
            )
        return self.metrics(params.get("metric_name"))

    @staticmethod
    def is_body_valid_json(body: Union[str, bytes]) -> Optional[ValueError]:
        """Return the JSON parse error for `body`, or None when it is valid."""
        return _is_body_valid_json(body)
