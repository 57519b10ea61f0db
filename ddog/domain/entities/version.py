"""API Version Entity - selects the endpoint family a Builder produces."""
from enum import Enum


class ApiVersion(str, Enum):
    V1 = "v1"
    V2 = "v2"

    @classmethod
    def default(cls) -> "ApiVersion":
        return cls.V2

    def __str__(self) -> str:
        return self.value
