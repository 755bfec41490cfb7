"""Time helpers shared by services and repositories."""
import time
from datetime import datetime, timezone


def now() -> int:
    """Current time in unix seconds."""
    return int(time.time())


def to_date(ts: int) -> str:
    """Render unix seconds as a ``YYYY-MM-DD`` date in UTC."""
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d")
