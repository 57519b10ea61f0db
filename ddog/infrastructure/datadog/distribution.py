"""Distribution route - submits distribution points to `v1/distribution_points`."""
from ddog.infrastructure.datadog.base_route import Route
from ddog.schemas.metrics import DistributionResponse


class DistributionRoute(Route[DistributionResponse]):
    """
    `POST v1/distribution_points`

    The distribution intake only exists under v1. Requires `DD-API-KEY`.
    A 202 response carries `{"status": "ok"}`.
    """

    method = "POST"
    success_status = 202
    response_model = DistributionResponse

    @classmethod
    def target(cls) -> str:
        return "v1/distribution_points"

    def path(self) -> str:
        return "v1/distribution_points"
