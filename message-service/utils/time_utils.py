"""
Time utilities
"""
import time
from datetime import datetime, timezone

def now() -> datetime:
    """Get current UTC time"""
    return datetime.now(timezone.utc)

def now_ms() -> int:
    """Get current timestamp in milliseconds"""
    return int(time.time() * 1000)

def ensure_utc(value: datetime) -> datetime:
    """Return an aware UTC datetime; naive values are taken to be UTC already"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
