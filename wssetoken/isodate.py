"""ISO 8601 timestamps with a numeric UTC offset.

    2000-09-15T09:42:53+01:00

See: http://www.w3.org/TR/NOTE-datetime
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def local_now() -> datetime:
    return datetime.now().astimezone()


def format_offset(moment: datetime) -> str:
    offset = moment.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    sign = "-" if minutes < 0 else "+"
    hh, mm = divmod(abs(minutes), 60)
    return f"{sign}{hh:02d}:{mm:02d}"


def isodatetime(now: Optional[datetime] = None) -> str:
    """Format ``now`` (default: the current local time) as YYYY-MM-DDTHH:MM:SS±HH:MM.

    Naive datetimes are taken to be local time.
    """
    moment = local_now() if now is None else now
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f"{format_offset(moment)}"
    )
