__version__ = "0.2.0"

from .client import AfinimakiClient
from .config_types import ClientConfig
from .errors import (
    AfinimakiClientError,
    ApiError,
    AuthError,
    ConstructionError,
    FaultError,
    InvalidEndpoint,
    InvalidKeyLength,
    MissingArgumentError,
    NetworkError,
    ResponseError,
    ResponseShapeMismatch,
    TransportError,
)
from .models import Recommendation, SoulMate

__all__ = [
    "AfinimakiClient",
    "ClientConfig",
    "Recommendation",
    "SoulMate",
    "AfinimakiClientError",
    "ApiError",
    "AuthError",
    "ConstructionError",
    "FaultError",
    "InvalidEndpoint",
    "InvalidKeyLength",
    "MissingArgumentError",
    "NetworkError",
    "ResponseError",
    "ResponseShapeMismatch",
    "TransportError",
]
