"""Series route - submits time series points to `v2/series`."""
from ddog.infrastructure.datadog.base_route import Route
from ddog.schemas.metrics import SeriesResponse


class SeriesRoute(Route[SeriesResponse]):
    """
    `POST v2/series`

    Submits metric time series that can be graphed on dashboards. Requires
    `DD-API-KEY`. A 202 response carries `{"errors": [...]}`.
    """

    method = "POST"
    success_status = 202
    response_model = SeriesResponse

    @classmethod
    def target(cls) -> str:
        return "v2/series"

    def path(self) -> str:
        return "v2/series"
