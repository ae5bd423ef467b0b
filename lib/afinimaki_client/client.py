from __future__ import annotations

import logging
import sys
from typing import Any, Iterable

from .auth import auth_code
from .config_types import ClientConfig
from .errors import MissingArgumentError, ResponseShapeMismatch
from .models import EstimatedRates, Recommendation, SoulMate
from .transport import Transport
from .wire import I4, I8, scalar_value

logger = logging.getLogger(__name__)


def _as_float(method: str, value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ResponseShapeMismatch(method, f"expected a number, got {value!r}") from e


def _pairs(method: str, raw: Any) -> list[tuple[int, float]]:
    if raw is None or raw == "":
        return []
    if not isinstance(raw, (list, tuple)):
        raise ResponseShapeMismatch(method, f"expected an array, got {type(raw).__name__}")
    out: list[tuple[int, float]] = []
    for entry in raw:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ResponseShapeMismatch(method, f"expected [id, value] pairs, got {entry!r}")
        try:
            out.append((int(entry[0]), float(entry[1])))
        except (TypeError, ValueError) as e:
            raise ResponseShapeMismatch(method, f"expected numeric [id, value] pairs, got {entry!r}") from e
    return out


class AfinimakiClient:
    """Client for the AfinimaKi recommendation API.

    Every call is authenticated with the api key plus a digest derived from the
    api secret, the method name, the first argument and the current 12 second
    time window. No network traffic happens until a method is called.
    """

    def __init__(self, cfg: ClientConfig, *, transport: Transport | None = None):
        self._cfg = cfg
        self._t = transport or Transport(cfg)

    @classmethod
    def create(
            cls,
            api_key: str,
            api_secret: str,
            endpoint_url: str | None = None,
            debug: bool = False,
            **kwargs: Any,
    ) -> "AfinimakiClient":
        return cls(ClientConfig(api_key=api_key, api_secret=api_secret, endpoint_url=endpoint_url, debug=debug,
                                **kwargs))

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "AfinimakiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def send_request(self, method: str, *args: Any) -> Any:
        """Send an authenticated call; the wire params are (api_key, auth_code, *args)."""
        if not method:
            raise ValueError("method name is required")
        first = scalar_value(args[0]) if args else None

        line = f"{method} ({', '.join(str(a) for a in args)})"
        if self._cfg.debug:
            sys.stderr.write(f"afinimaki_client {line}\n")
        logger.debug("send %s", line)

        return self._t.call(
            method,
            [self._cfg.api_key, auth_code(self._cfg.api_secret, method, first), *args],
        )

    def _missing(self, method: str, required: dict[str, Any], optional_none: dict[str, Any] | None = None) -> bool:
        names = [name for name, value in required.items() if not value]
        names += [name for name, value in (optional_none or {}).items() if value is None]
        if not names:
            return False
        if self._cfg.strict:
            raise MissingArgumentError(method, names)
        logger.debug("%s skipped, missing %s", method, ", ".join(names))
        return True

    # --- user-item services ---
    def record_rating(self, user_id: int, item_id: int, rate: int) -> None:
        """Store a rate in the server. Waits until the call has ended."""
        if self._missing("set_rate", {"user_id": user_id, "item_id": item_id}, {"rate": rate}):
            return None
        self.send_request("set_rate", I8(user_id), I8(item_id), I4(rate), True)
        return None

    set_rate = record_rating

    def estimate_rate(self, user_id: int, item_id: int) -> float | None:
        """Estimated rate, or None when the server cannot estimate it."""
        if self._missing("estimate_rate", {"user_id": user_id, "item_id": item_id}):
            return None
        r = self.send_request("estimate_rate", I8(user_id), I8(item_id))
        return _as_float("estimate_rate", r)

    def estimate_multiple_rates(self, user_id: int, item_ids: Iterable[int]) -> EstimatedRates | None:
        item_ids = [int(i) for i in item_ids or []]
        if self._missing("estimate_multiple_rates", {"user_id": user_id, "item_ids": item_ids}):
            return None
        r = self.send_request("estimate_multiple_rates", I8(user_id), [I8(i) for i in item_ids])
        if not isinstance(r, (list, tuple)):
            raise ResponseShapeMismatch("estimate_multiple_rates", f"expected an array, got {type(r).__name__}")
        if len(r) != len(item_ids):
            raise ResponseShapeMismatch(
                "estimate_multiple_rates",
                f"requested {len(item_ids)} rates, server returned {len(r)}",
            )
        return {item_id: _as_float("estimate_multiple_rates", value) for item_id, value in zip(item_ids, r)}

    def get_recommendations(self, user_id: int) -> list[Recommendation] | None:
        """Recommendations for a user, in server order.

        Rated items and items in the user's wishlist or blacklist are not included.
        """
        if self._missing("get_recommendations", {"user_id": user_id}):
            return None
        r = self.send_request("get_recommendations", I8(user_id), False)
        return [Recommendation(item_id=i, estimated_rate=v) for i, v in _pairs("get_recommendations", r)]

    def add_to_wishlist(self, user_id: int, item_id: int) -> None:
        if self._missing("add_to_wishlist", {"user_id": user_id, "item_id": item_id}):
            return None
        self.send_request("add_to_wishlist", I8(user_id), I8(item_id))
        return None

    def add_to_blacklist(self, user_id: int, item_id: int) -> None:
        if self._missing("add_to_blacklist", {"user_id": user_id, "item_id": item_id}):
            return None
        self.send_request("add_to_blacklist", I8(user_id), I8(item_id))
        return None

    # --- user-user services ---
    def user_user_affinity(self, user_id_1: int, user_id_2: int) -> float | None:
        """User vs user afinimaki, in [0.0, 1.0]."""
        if self._missing("user_user_afinimaki", {"user_id_1": user_id_1, "user_id_2": user_id_2}):
            return None
        r = self.send_request("user_user_afinimaki", I8(user_id_1), I8(user_id_2))
        return _as_float("user_user_afinimaki", r)

    user_user_afinimaki = user_user_affinity

    def get_soul_mates(self, user_id: int) -> list[SoulMate] | None:
        """Users with similar tastes, in server order."""
        if self._missing("get_soul_mates", {"user_id": user_id}):
            return None
        r = self.send_request("get_soul_mates", I8(user_id))
        return [SoulMate(user_id=u, afinimaki=v) for u, v in _pairs("get_soul_mates", r)]
