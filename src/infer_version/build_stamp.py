"""Build identifier derived from the local wall clock."""

import logging
from datetime import datetime

logger = logging.getLogger(__name__)


def make_build_number(now: datetime | None = None) -> str:
    """Format a timestamp as a 14-digit YYYYMMDDHHMMSS build number.

    Fixed width and zero padding make string order match chronological
    order. Two calls within the same second return the same value.

    Args:
        now: Moment to format (defaults to the current local time)

    Returns:
        Build number such as "20240115093000"
    """
    t = now or datetime.now()
    build_number = (
        f"{t.year:04d}{t.month:02d}{t.day:02d}"
        f"{t.hour:02d}{t.minute:02d}{t.second:02d}"
    )
    logger.info(f"Build number {build_number}")
    return build_number
