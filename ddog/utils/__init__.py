"""
Utility modules for the ddog client.

Helpers shared by the builder and routes: JSON body validation and
logging setup.
"""

from .json import is_body_valid_json
from .logging import configure_logging

__all__ = ["configure_logging", "is_body_valid_json"]
