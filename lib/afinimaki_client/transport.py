from __future__ import annotations

from typing import Any, Sequence

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError
from .wire import dumps_call, loads_response


class Transport:
    def __init__(self, cfg: ClientConfig, *, http_client: httpx.Client | None = None):
        self._cfg = cfg
        headers = {
            "User-Agent": f"afinimaki-client/{__version__}",
        }
        self._client = http_client or httpx.Client(
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def call(self, method: str, params: Sequence[Any]) -> Any:
        body = dumps_call(method, params)
        try:
            r = self._client.post(
                self._cfg.endpoint_url,
                content=body,
                headers={"Content-Type": "text/xml"},
            )
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e

        if r.status_code >= 400:
            msg = f"{method} failed with {r.status_code}"
            details = r.text[:1000] if r.text else None
            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return loads_response(r.content)
