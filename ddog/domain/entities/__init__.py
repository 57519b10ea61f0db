from .endpoint import Endpoint
from .version import ApiVersion

__all__ = ["ApiVersion", "Endpoint"]
