"""Wall-clock helpers for audit timestamps."""

from datetime import datetime

import pytz

DEFAULT_TIMEZONE = "Asia/Shanghai"


def now_local(tz_name: str = DEFAULT_TIMEZONE) -> datetime:
    """Return the current time in *tz_name*, as a naive local datetime.

    Audit columns are stored without offset, in the restaurant's local time.
    """
    tz = pytz.timezone(tz_name)
    return datetime.now(tz).replace(tzinfo=None)
