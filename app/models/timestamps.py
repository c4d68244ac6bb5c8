"""
Timestamp helpers shared by the table models and repositories.

All stored timestamps are timezone-aware UTC.
"""

import datetime

from sqlalchemy import DateTime


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


# Column type for every timestamp field
UTC_TIMESTAMP = DateTime(timezone=True)
