# backend/geojson_api/core/utils.py
# Horodatage UTC.

import datetime as dt


def utcnow():
    """Date/heure UTC (timezone-aware).

    Returns:
        datetime.datetime: Timestamp UTC (aware).
    """
    return dt.datetime.now(dt.timezone.utc)
