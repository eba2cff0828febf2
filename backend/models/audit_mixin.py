from sqlalchemy import Column, DateTime
from utils.time_utils import utc_now


class TimestampMixin:
    """Mixin that provides created/updated timestamps.

    Timestamps are stored timezone-aware in UTC so windowed queries compare
    like with like regardless of the server's local zone.
    """
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), onupdate=utc_now)
