from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], str]


def utc_now_iso8601() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def fixed_clock(timestamp: str) -> Clock:
    return lambda: timestamp
