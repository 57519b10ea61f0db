"""Tests for version selection and endpoint routing in the Builder."""

from __future__ import annotations

import asyncio
import logging

import pytest

from ddog import (
    ApiVersion,
    Builder,
    DistributionRoute,
    Endpoint,
    EnvConfig,
    GetMetricsRoute,
    MetricMetadataRoute,
    MetricRoute,
    RouteError,
    SeriesRoute,
    Settings,
    TagsRoute,
    UnsupportedApiVersionError,
)

from .conftest import TAGS_BODY


def test_new_builder_defaults_to_v2_without_headers() -> None:
    builder = Builder.new()

    assert builder.version == ApiVersion.V2
    assert Builder().version == ApiVersion.default()
    assert builder.headers == ()


def test_version_selection_returns_new_builder() -> None:
    builder = Builder()
    v1 = builder.v1()

    assert v1.version == ApiVersion.V1
    assert builder.version == ApiVersion.V2
    assert v1.v2() == builder
    assert Builder().with_version("v1") == v1


@pytest.mark.parametrize(
    "version, endpoint, params, route_type, path",
    [
        (ApiVersion.V2, Endpoint.SERIES, {}, SeriesRoute, "v2/series"),
        (ApiVersion.V1, Endpoint.DISTRIBUTION, {}, DistributionRoute, "v1/distribution_points"),
        (ApiVersion.V2, Endpoint.DISTRIBUTION, {}, DistributionRoute, "v1/distribution_points"),
        (ApiVersion.V2, Endpoint.TAGS, {"metric_name": "rpc_latency"}, TagsRoute, "v2/metrics/rpc_latency/tags"),
        (ApiVersion.V1, Endpoint.GET_METRICS, {"from_": 0}, GetMetricsRoute, "v1/metrics"),
        (ApiVersion.V2, Endpoint.METRIC, {"metric_name": "rpc_latency"}, MetricRoute, "v2/metrics/rpc_latency"),
        (ApiVersion.V1, Endpoint.METRIC, {"metric_name": "rpc_latency"}, MetricMetadataRoute, "v1/metrics/rpc_latency"),
    ],
)
def test_select_returns_route_with_vendor_path(version, endpoint, params, route_type, path) -> None:
    route = Builder(version=version).select(endpoint, **params)

    assert isinstance(route, route_type)
    assert route.path() == path
    assert route.url == f"https://api.datadoghq.com/api/{path}"


@pytest.mark.parametrize(
    "version, endpoint, params",
    [
        (ApiVersion.V1, Endpoint.SERIES, {}),
        (ApiVersion.V1, Endpoint.TAGS, {"metric_name": "rpc_latency"}),
        (ApiVersion.V2, Endpoint.GET_METRICS, {"from_": 0}),
    ],
)
def test_select_unsupported_version_raises_typed_error(version, endpoint, params) -> None:
    with pytest.raises(UnsupportedApiVersionError) as excinfo:
        Builder(version=version).select(endpoint, **params)

    assert excinfo.value.endpoint == str(endpoint)
    assert excinfo.value.version == str(version)


def test_named_selectors_match_select() -> None:
    assert isinstance(Builder().v2().post_series(), SeriesRoute)
    assert isinstance(Builder().v1().post_distribution(), DistributionRoute)
    assert Builder().v2().create_new_tag_config("my.metric").path() == "v2/metrics/my.metric/tags"
    assert isinstance(Builder().v1().get_metrics(10, host="web-1"), GetMetricsRoute)
    with pytest.raises(UnsupportedApiVersionError):
        Builder().v1().post_series()


def test_select_accepts_endpoint_names() -> None:
    assert isinstance(Builder().select("series"), SeriesRoute)


def test_select_tags_without_metric_name_defers_to_execute(captured, mock_client) -> None:
    client = mock_client(201, TAGS_BODY, captured=captured)
    route = Builder(client=client).select(Endpoint.TAGS)

    assert isinstance(route, TagsRoute)
    assert route.name is None

    status, result = asyncio.run(route.execute())

    assert status == 400
    assert isinstance(result, RouteError)
    assert result.error_code == "MISSING_PARAMETER"
    assert captured == []


def test_builder_headers_are_inherited_by_routes() -> None:
    builder = (
        Builder()
        .with_header("Accept", "application/json")
        .with_api_key("first")
        .with_api_key("second")
        .with_application_key("app")
    )

    route = builder.post_series()

    assert route.request_headers["Accept"] == "application/json"
    assert route.request_headers.get_list("DD-API-KEY") == ["second"]
    assert route.request_headers["DD-APPLICATION-KEY"] == "app"


def test_route_headers_override_builder_headers() -> None:
    route = Builder().with_api_key("builder").post_series().with_api_key("route")

    assert route.request_headers.get_list("DD-API-KEY") == ["route"]


def test_with_headers_accepts_mapping_and_pairs() -> None:
    builder = Builder().with_headers({"Accept": "application/json"}).with_headers(
        [("Content-Type", "application/json")]
    )

    assert builder.headers == (
        ("Accept", "application/json"),
        ("Content-Type", "application/json"),
    )


def test_with_env_applies_credentials() -> None:
    builder = Builder().with_env(EnvConfig(api_key="key", application_key="app"))

    assert dict(builder.headers) == {"DD-API-KEY": "key", "DD-APPLICATION-KEY": "app"}


def test_with_env_skips_missing_credentials() -> None:
    assert Builder().with_env(EnvConfig()).headers == ()


def test_from_settings_reads_credentials(monkeypatch) -> None:
    monkeypatch.setenv("DD_API_KEY", "env-key")
    monkeypatch.setenv("DD_APP_KEY", "env-app")
    monkeypatch.delenv("DD_APPLICATION_KEY", raising=False)

    builder = Builder.from_settings(Settings(_env_file=None))

    assert dict(builder.headers) == {"DD-API-KEY": "env-key", "DD-APPLICATION-KEY": "env-app"}


def test_with_logging_configures_ddog_logger() -> None:
    Builder().with_logging(logging.DEBUG)

    assert logging.getLogger("ddog").level == logging.DEBUG
