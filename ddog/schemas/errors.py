"""
Error and result models returned by `Route.execute()`.

Failures are returned rather than raised so that every call yields the
status code the caller needs to act on.
"""

from datetime import datetime
from typing import Any, Dict, NamedTuple, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

BODY_SNIPPET_LENGTH = 300


class ErrorCode:
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"
    MISSING_PARAMETER = "MISSING_PARAMETER"

    @staticmethod
    def for_status(status_code: int) -> str:
        return f"HTTP_{status_code}"


class RouteError(BaseModel):
    """Error variant of an execution result."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    error: str = Field(..., description="Error message")
    error_code: str = Field(..., description="Error code")
    status_code: int = Field(..., description="Status code reported to the caller")
    path: Optional[str] = Field(None, description="Route path the request targeted")
    body: Optional[str] = Field(None, description="Leading part of the response body, if any")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the error occurred")
    cause: Optional[Exception] = Field(None, exclude=True, description="Underlying exception")

    @staticmethod
    def snippet(text: Optional[str]) -> Optional[str]:
        if not text:
            return None
        return text[:BODY_SNIPPET_LENGTH]


class ExecutionResult(NamedTuple):
    """`(status_code, result)` pair; `result` is a response model or a `RouteError`."""
    status_code: int
    result: Union[BaseModel, RouteError]

    @property
    def ok(self) -> bool:
        return not isinstance(self.result, RouteError)

    @property
    def error(self) -> Optional[RouteError]:
        return self.result if isinstance(self.result, RouteError) else None
