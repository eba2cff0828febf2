from datetime import datetime, timedelta
import pytz


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(pytz.utc)


def window_start(days: int, now: datetime = None) -> datetime:
    """
    Start of a trailing window of `days` days ending at `now`.

    The window is a fixed length measured back from the evaluation instant,
    not aligned to calendar days.
    """
    if now is None:
        now = utc_now()
    return now - timedelta(days=days)
