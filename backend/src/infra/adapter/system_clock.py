from datetime import datetime, timezone
from functools import lru_cache

from core.port.clock import Clock


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@lru_cache
def get_system_clock() -> Clock:
    return SystemClock()
