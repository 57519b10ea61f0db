"""Client-side errors raised before any request is sent."""
from typing import Optional


class DdogError(Exception):
    """Base class for errors raised by the ddog client."""


class UnsupportedApiVersionError(DdogError):
    """Raised when an endpoint is not available for the selected API version."""

    def __init__(self, endpoint: str, version: str, supported: Optional[list] = None):
        self.endpoint = endpoint
        self.version = version
        self.supported = supported or []
        message = f"Endpoint '{endpoint}' is not available for API version {version}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)
