"""Base Datadog route with common request/response functionality."""
import json
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from ddog.schemas.errors import ErrorCode, ExecutionResult, RouteError

logger = logging.getLogger(__name__)

BASE_API_URL = "https://api.datadoghq.com/api/"

API_KEY_HEADER = "DD-API-KEY"
APPLICATION_KEY_HEADER = "DD-APPLICATION-KEY"

ResponseT = TypeVar("ResponseT", bound=BaseModel)
HeaderItems = Union[Mapping[str, str], Iterable[Tuple[str, str]]]
BodyT = Union[str, bytes, dict, list, BaseModel]


class Route(ABC, Generic[ResponseT]):
    """
    Base class for a single Datadog API endpoint.

    A route owns its header set and request body. Setters return the route
    itself so calls can be chained, and `execute()` performs exactly one HTTP
    request, returning an `ExecutionResult` instead of raising.
    """

    method: str = "POST"
    success_status: int = 200
    response_model: Type[ResponseT]

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[HeaderItems] = None,
    ):
        """
        Initialize the route.

        Args:
            client: Optional HTTP client to send the request with. When omitted
                a short-lived client is opened for the single request.
            headers: Initial headers, usually inherited from the Builder.
        """
        self._client = client
        self._headers = httpx.Headers()
        self._body: Union[str, bytes] = ""
        if headers:
            self.headers(headers)
        logger.info(f"🛣️ Route created: {self.target()}")

    @classmethod
    @abstractmethod
    def target(cls) -> str:
        """Identifier of the endpoint, used as logging context."""

    @abstractmethod
    def path(self) -> str:
        """The URL suffix appended to the base API URL."""

    def route(self, route: str) -> "Route[ResponseT]":
        """Set the sub-route parameter. Fixed routes ignore it."""
        return self

    @property
    def url(self) -> str:
        return f"{BASE_API_URL}{self.path()}"

    @property
    def request_headers(self) -> httpx.Headers:
        return httpx.Headers(self._headers)

    @property
    def request_body(self) -> Union[str, bytes]:
        return self._body

    def with_header(self, key: str, value: str) -> "Route[ResponseT]":
        """Add a header, replacing any earlier value for the same key."""
        self._headers[key] = value
        return self

    def headers(self, headers: HeaderItems) -> "Route[ResponseT]":
        """Add a list (or mapping) of headers."""
        items = headers.items() if isinstance(headers, Mapping) else headers
        for key, value in items:
            self.with_header(key, value)
        return self

    def with_api_key(self, key: str) -> "Route[ResponseT]":
        return self.with_header(API_KEY_HEADER, key)

    def with_application_key(self, key: str) -> "Route[ResponseT]":
        return self.with_header(APPLICATION_KEY_HEADER, key)

    def body(self, body: BodyT) -> "Route[ResponseT]":
        """
        Set the request body.

        Strings and bytes are sent as-is. Dicts, lists and pydantic models are
        JSON-encoded and default the Content-Type to application/json.
        """
        if isinstance(body, BaseModel):
            self._body = body.model_dump_json(by_alias=True, exclude_none=True)
            self._headers.setdefault("Content-Type", "application/json")
        elif isinstance(body, (dict, list)):
            self._body = json.dumps(body)
            self._headers.setdefault("Content-Type", "application/json")
        else:
            self._body = body
        return self

    def _missing_parameter(self) -> Optional[str]:
        """Name of a required path parameter that has not been set, if any."""
        return None

    def _params(self) -> Optional[Dict[str, Any]]:
        return None

    async def execute(self) -> ExecutionResult:
        """
        Send the request and map the response.

        Returns:
            `(status_code, result)` where `result` is the parsed response model
            on the endpoint's success status, otherwise a `RouteError`.
        """
        missing = self._missing_parameter()
        if missing:
            logger.error(f"❌ {self.target()}: required parameter '{missing}' is not set")
            return ExecutionResult(
                400,
                RouteError(
                    error=f"Required route parameter '{missing}' is not set",
                    error_code=ErrorCode.MISSING_PARAMETER,
                    status_code=400,
                    path=self.path(),
                    details={"parameter": missing},
                ),
            )

        url = self.url
        logger.info(f"📤 {self.method} {url}")
        start_time = time.time()
        try:
            response = await self._make_request(url)
        except httpx.HTTPError as e:
            logger.error(f"💥 Request to {url} failed: {e}")
            return ExecutionResult(
                400,
                RouteError(
                    error=f"HTTP request failed: {e}",
                    error_code=ErrorCode.TRANSPORT_ERROR,
                    status_code=400,
                    path=self.path(),
                    details={"error_type": type(e).__name__},
                    cause=e,
                ),
            )

        process_time = time.time() - start_time
        logger.info(f"📥 {self.method} {url} - {response.status_code} - {process_time:.3f}s")
        return self._handle_response(response)

    async def _make_request(self, url: str) -> httpx.Response:
        kwargs: Dict[str, Any] = {
            "headers": self._headers,
            "params": self._params(),
        }
        if self._body:
            kwargs["content"] = self._body

        if self._client is not None:
            return await self._client.request(self.method, url, **kwargs)
        async with httpx.AsyncClient() as client:
            return await client.request(self.method, url, **kwargs)

    def _handle_response(self, response: httpx.Response) -> ExecutionResult:
        status_code = response.status_code
        if status_code != self.success_status:
            logger.warning(
                f"🚨 {self.target()}: received status {status_code}, expected {self.success_status}"
            )
            return ExecutionResult(
                status_code,
                RouteError(
                    error=f"Datadog API error {status_code}",
                    error_code=ErrorCode.for_status(status_code),
                    status_code=status_code,
                    path=self.path(),
                    body=RouteError.snippet(response.text),
                ),
            )

        try:
            parsed = self.response_model.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(
                f"❌ {self.target()}: failed to parse response as {self.response_model.__name__}: {e}"
            )
            return ExecutionResult(
                400,
                RouteError(
                    error=f"Failed to parse response as {self.response_model.__name__}",
                    error_code=ErrorCode.DESERIALIZATION_ERROR,
                    status_code=400,
                    path=self.path(),
                    body=RouteError.snippet(response.text),
                    details={"received_status": status_code},
                    cause=e,
                ),
            )

        logger.info(f"✅ {self.target()}: parsed {self.response_model.__name__}")
        logger.debug(f"📋 Response: {parsed!r}")
        return ExecutionResult(status_code, parsed)
