"""Date/time formatting helpers"""
import logging
import time
from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def now_epoch_ms() -> int:
    """Current wall-clock time in epoch milliseconds"""
    return int(time.time() * 1000)


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def format_elapsed(seconds: int) -> str:
    """
    Render a duration as HH:MM:SS.

    Hours are zero-padded to two digits but not bounded, so 100 hours renders as "100:00:00".
    """
    seconds = max(0, int(seconds))
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    remaining_seconds = seconds % 60

    return f"{hours:02d}:{minutes:02d}:{remaining_seconds:02d}"


def get_timezone(name: str) -> tzinfo:
    """Resolve an IANA zone name, falling back to UTC"""
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone '{name}', using UTC")
        return timezone.utc


def format_timestamp(dt: datetime, tz: tzinfo) -> str:
    """
    Localized timestamp in "DD.MM.YYYY, HH:MM:SS" form.

    Naive datetimes are treated as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    local = dt.astimezone(tz)
    return local.strftime("%d.%m.%Y, %H:%M:%S")
