"""Angle, epoch-day and sub-formula helpers for the solar calculator.

All angles in degrees unless otherwise noted.
"""

import math
from datetime import datetime as DateTime, timezone

SECONDS_PER_DAY = 86400
MINUTES_PER_DAY = 1440
JULIAN_UNIX_EPOCH = 2440587.5
JULIAN_J2000 = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def floored_mod(x: float, modulus: float) -> float:
    """Remainder with the sign of the modulus, as spreadsheets compute MOD()."""
    return x - modulus * math.floor(x / modulus)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    if math.isnan(angle):
        return angle
    return floored_mod(angle, 360.0)


def leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def clock_timestamp(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> int:
    """Encode a wall-clock reading as seconds since 1970-01-01 00:00.

    The reading is taken at face value (no zone conversion), which is how
    the calculator expects a site's local clock to be supplied.
    """
    dt = DateTime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    return int(dt.timestamp())


def unix_days(t: int) -> int:
    """Whole days since 1970-01-01 (floored, so pre-1970 days stay contiguous)."""
    return t // SECONDS_PER_DAY


def time_of_day(t: int) -> tuple[int, int, int]:
    """Split the clock reading t into (hour, minute, second) of its day."""
    seconds = t - SECONDS_PER_DAY * unix_days(t)
    hour, rem = divmod(seconds, 3600)
    minute, second = divmod(rem, 60)
    return hour, minute, second


def time_frac_day(t: int) -> float:
    """Fraction of the day elapsed since midnight, 0.5 at noon."""
    hour, minute, second = time_of_day(t)
    return (hour + minute / 60.0 + second / 3600.0) / 24.0


def days_to_timestamp(days: float) -> int | None:
    """Truncate fractional days since the epoch to whole seconds."""
    if math.isnan(days):
        return None
    return int(days * SECONDS_PER_DAY)


def hour_angle(true_solar_time: float) -> float:
    """Calculate the hour angle from true solar time in minutes.

    At solar noon: h = 0 degrees.
    Morning: h < 0 (sun is east).
    Afternoon: h > 0 (sun is west).
    """
    if true_solar_time / 4.0 < 0:
        return true_solar_time / 4.0 + 180.0
    return true_solar_time / 4.0 - 180.0


def _clamp_unit(x: float) -> float:
    if math.isnan(x):
        return x
    return max(-1.0, min(1.0, x))


def solar_zenith_angle(
    latitude: float, declination: float, hour_angle: float
) -> float:
    """Calculate the solar zenith angle.

    Returns zenith angle in degrees.
    """
    lat_rad = deg_to_rad(latitude)
    dec_rad = deg_to_rad(declination)
    ha_rad = deg_to_rad(hour_angle)
    cos_zenith = math.sin(lat_rad) * math.sin(dec_rad) + math.cos(
        lat_rad
    ) * math.cos(dec_rad) * math.cos(ha_rad)
    # Clamp to [-1, 1] to handle floating point errors
    return rad_to_deg(math.acos(_clamp_unit(cos_zenith)))


def solar_azimuth(
    latitude: float, declination: float, hour_angle: float, zenith: float
) -> float:
    """Calculate solar azimuth, degrees clockwise from North.

    The branch is picked on the sign of the hour angle. Returns NaN when the
    sun is at the zenith or the acos argument leaves [-1, 1].
    """
    lat_rad = deg_to_rad(latitude)
    zen_rad = deg_to_rad(zenith)
    denominator = math.cos(lat_rad) * math.sin(zen_rad)
    if denominator == 0.0:
        return math.nan
    cos_arg = (
        math.sin(lat_rad) * math.cos(zen_rad) - math.sin(deg_to_rad(declination))
    ) / denominator
    if math.isnan(cos_arg) or not -1.0 <= cos_arg <= 1.0:
        return math.nan
    if hour_angle > 0:
        azimuth = rad_to_deg(math.acos(cos_arg)) + 180.0
    else:
        azimuth = 540.0 - rad_to_deg(math.acos(cos_arg))
    return normalize_angle(azimuth)


def atmospheric_refraction(elevation: float) -> float:
    """Approximate atmospheric refraction for a given solar elevation.

    Piecewise empirical fit in arc-seconds with breakpoints at 85, 5 and
    -0.575 degrees. Returns degrees.
    """
    if math.isnan(elevation):
        return elevation
    tan_e = math.tan(deg_to_rad(elevation))
    if elevation > 85.0:
        arcsec = 0.0
    elif elevation > 5.0:
        arcsec = 58.1 / tan_e - 0.07 / tan_e**3 + 0.000086 / tan_e**5
    elif elevation > -0.575:
        arcsec = 1735.0 + elevation * (
            -518.2 + elevation * (103.4 + elevation * (-12.79 + elevation * 0.711))
        )
    else:
        arcsec = -20.772 / tan_e
    return arcsec / 3600.0
