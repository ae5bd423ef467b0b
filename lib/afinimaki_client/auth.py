from __future__ import annotations

import hashlib
import time
from typing import Any

TIME_DIV = 12


def time_window(now: float | None = None) -> int:
    if now is None:
        now = time.time()
    return int(now // TIME_DIV)


def auth_code(secret: str, method: str, first_arg: Any = None, *, now: float | None = None) -> str | None:
    """Digest the server recomputes to authenticate a call.

    md5(secret + method + first_arg + window), no separators. A falsy first
    argument contributes an empty string.
    """
    if not method:
        return None
    first = "" if not first_arg else str(first_arg)
    code = f"{secret}{method}{first}{time_window(now)}"
    return hashlib.md5(code.encode("utf-8")).hexdigest()
