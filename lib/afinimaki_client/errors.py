from __future__ import annotations


class AfinimakiClientError(Exception):
    """Base client error."""


class ConstructionError(AfinimakiClientError, ValueError):
    """Client configuration rejected before any request is made."""


class InvalidKeyLength(ConstructionError):
    def __init__(self, field: str, length: int, expected: int):
        super().__init__(f"Bad {field}: it must be {expected} characters long (got {length})")
        self.field = field
        self.length = length
        self.expected = expected


class InvalidEndpoint(ConstructionError):
    def __init__(self, url: str):
        super().__init__(f"Bad URL given: {url}")
        self.url = url


class MissingArgumentError(AfinimakiClientError, ValueError):
    """Raised in strict mode when a required argument is missing."""

    def __init__(self, method: str, names: list[str]):
        super().__init__(f"{method}: missing required argument(s): {', '.join(names)}")
        self.method = method
        self.names = names


class TransportError(AfinimakiClientError):
    """Anything that went wrong between sending the call and decoding its result."""


class NetworkError(TransportError):
    """Transport/network layer error."""


class ApiError(TransportError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""


class FaultError(ApiError):
    """Fault reported by the remote server. status_code holds the fault code."""


class ResponseError(TransportError):
    """Response body could not be decoded."""


class ResponseShapeMismatch(ResponseError):
    def __init__(self, method: str, message: str):
        super().__init__(f"{method}: {message}")
        self.method = method
