"""Public re-exports of all model types."""

from models.config import StripConfig
from models.request import StripRequest
from models.response import ErrorResponse, StripResponse

__all__ = [
    # Configuration
    "StripConfig",
    # Request/Response
    "StripRequest",
    "StripResponse",
    "ErrorResponse",
]
