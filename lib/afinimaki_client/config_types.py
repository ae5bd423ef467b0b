from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidEndpoint, InvalidKeyLength

KEY_LENGTH = 32
DEFAULT_ENDPOINT = "http://api.afinimaki.com/RPC2"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_secret: str
    endpoint_url: str | None = DEFAULT_ENDPOINT
    debug: bool = False
    timeout_s: float = 15.0
    strict: bool = False

    def __post_init__(self) -> None:
        for name in ("api_key", "api_secret"):
            value = getattr(self, name) or ""
            if len(value) != KEY_LENGTH:
                raise InvalidKeyLength(name, len(value), KEY_LENGTH)
        url = self.endpoint_url or DEFAULT_ENDPOINT
        if not url.startswith("http://"):
            raise InvalidEndpoint(url)
        object.__setattr__(self, "endpoint_url", url)
        object.__setattr__(self, "debug", bool(self.debug))
