"""
Calendar <-> Julian Date helpers.

All epochs are handled as timezone-aware datetimes; naive datetimes are
taken to be UTC.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from orrery.core.constants import (
    DAYS_PER_JULIAN_CENTURY,
    JD_J2000,
    JD_UNIX_EPOCH,
    SECONDS_PER_DAY,
)

J2000_EPOCH = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def as_utc(epoch: datetime) -> datetime:
    if epoch.tzinfo is None:
        return epoch.replace(tzinfo=timezone.utc)
    return epoch.astimezone(timezone.utc)


def julian_date(epoch: datetime) -> float:
    """JD = 2440587.5 + seconds since Unix epoch / 86400."""
    return JD_UNIX_EPOCH + as_utc(epoch).timestamp() / SECONDS_PER_DAY


def julian_centuries_since_j2000(epoch: datetime) -> float:
    """T = (JD - 2451545.0) / 36525."""
    return (julian_date(epoch) - JD_J2000) / DAYS_PER_JULIAN_CENTURY


def epoch_from_julian_date(jd: float) -> datetime:
    seconds = (jd - JD_UNIX_EPOCH) * SECONDS_PER_DAY
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=seconds)
