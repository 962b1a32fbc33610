#!/usr/bin/env python3
"""
Rounding Policy
Rounds a raw H:MM:SS duration to the nearest whole minute (30 seconds rounds up)
"""

from models import RawDuration, RoundedDuration

ROUND_UP_SECONDS = 30


def round_to_nearest_minute(raw: RawDuration) -> RoundedDuration:
    """Round half up at the 30 second boundary, carrying into hours"""
    total_minutes = raw.hours * 60 + raw.minutes
    if raw.seconds >= ROUND_UP_SECONDS:
        total_minutes += 1

    hours, minutes = divmod(total_minutes, 60)
    return RoundedDuration(hours=hours, minutes=minutes)
