"""
Timestamp helpers shared by the payload types.
"""
from datetime import datetime
from typing import Union

import pytz


def unix_now() -> int:
    """Current time as integer Unix seconds."""
    return int(datetime.now(pytz.UTC).timestamp())


def to_unix_timestamp(value: Union[int, float, datetime]) -> int:
    """
    Normalise a timestamp to integer Unix seconds.

    Args:
        value (int, float or datetime): Unix seconds, or a datetime. Naive
            datetimes are taken to be UTC.

    Returns:
        int: Unix seconds
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = pytz.UTC.localize(value)
        return int(value.timestamp())
    return int(value)
