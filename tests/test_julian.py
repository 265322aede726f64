import math
from datetime import datetime, timedelta, timezone

from orrery.core.julian import (
    J2000_EPOCH,
    as_utc,
    epoch_from_julian_date,
    julian_centuries_since_j2000,
    julian_date,
)


def test_unix_epoch_julian_date():
    assert julian_date(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5


def test_j2000_julian_date():
    assert math.isclose(julian_date(J2000_EPOCH), 2451545.0, abs_tol=1e-9)
    assert julian_centuries_since_j2000(J2000_EPOCH) == 0.0


def test_naive_datetime_is_utc():
    assert julian_date(datetime(2000, 1, 1, 12)) == julian_date(J2000_EPOCH)


def test_other_timezone_is_converted():
    plus_one = timezone(timedelta(hours=1))
    assert julian_date(datetime(2000, 1, 1, 13, tzinfo=plus_one)) == julian_date(J2000_EPOCH)
    assert as_utc(datetime(2000, 1, 1, 13, tzinfo=plus_one)) == J2000_EPOCH


def test_one_julian_century():
    epoch = J2000_EPOCH + timedelta(days=36525)
    assert math.isclose(julian_centuries_since_j2000(epoch), 1.0, abs_tol=1e-12)


def test_one_julian_year_is_a_hundredth_of_a_century():
    epoch = J2000_EPOCH + timedelta(days=365.25)
    assert math.isclose(julian_centuries_since_j2000(epoch), 0.01, abs_tol=1e-12)


def test_julian_date_to_epoch():
    epoch = epoch_from_julian_date(2451545.0 + 10.25)
    assert epoch == datetime(2000, 1, 11, 18, 0, tzinfo=timezone.utc)
