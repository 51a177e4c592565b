"""Daily event tables and intraday sun position profiles.

Event tables hold sunrise, solar noon and sunset for a run of days.
Profiles sample the sun's position at a fixed interval across one local
day and support interpolated lookup between samples.
Minutes are counted from local midnight on the site's clock.
"""

import datetime
import logging
import math

from . import angles
from ._types import (
    DayEvents,
    DaylightState,
    DayProfile,
    EventTable,
    PositionSample,
    SiteConfig,
    TableConfig,
    TableMetadata,
)
from .calculator import compute, daylight_state

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = TableConfig()


def intervals_per_day(interval_minutes: int) -> int:
    """Calculate number of intervals in a day."""
    if interval_minutes <= 0 or angles.MINUTES_PER_DAY % interval_minutes != 0:
        raise ValueError(
            f"interval_minutes must evenly divide a day, got {interval_minutes}"
        )
    return angles.MINUTES_PER_DAY // interval_minutes


def interpolate_angle(a1: float, a2: float, fraction: float) -> float:
    """Interpolate between two angles, handling 360 deg wraparound."""
    if math.isnan(a1) or math.isnan(a2):
        return math.nan
    diff = a2 - a1
    if diff > 180:
        adjusted_diff = diff - 360
    elif diff < -180:
        adjusted_diff = diff + 360
    else:
        adjusted_diff = diff
    return (a1 + adjusted_diff * fraction) % 360.0


def _interpolate_linear(v1: float, v2: float, fraction: float) -> float:
    """Simple linear interpolation between two values."""
    return v1 + fraction * (v2 - v1)


def day_events(site: SiteConfig, year: int, month: int, day: int) -> DayEvents:
    """Sunrise, solar noon and sunset for one local calendar day."""
    elements = compute(angles.clock_timestamp(year, month, day, 12), site)
    return DayEvents(
        year=year,
        month=month,
        day=day,
        sunrise_time=elements.sunrise_time,
        solar_noon_time=elements.solar_noon_time,
        sunset_time=elements.sunset_time,
        sun_duration=elements.sun_duration,
        state=daylight_state(elements),
    )


def generate_event_table(
    site: SiteConfig, config: TableConfig = DEFAULT_CONFIG
) -> EventTable:
    """Generate daily events for config.days days starting at config.start_day.

    With days left as None the table runs to the end of config.year.
    """
    n_days_in_year = 366 if angles.leap_year(config.year) else 365
    if not 1 <= config.start_day <= n_days_in_year:
        raise ValueError(f"start_day out of range: {config.start_day}")
    n_days = config.days
    if n_days is None:
        n_days = n_days_in_year - config.start_day + 1
    if n_days < 0:
        raise ValueError(f"days must not be negative, got {n_days}")

    first = datetime.date(config.year, 1, 1) + datetime.timedelta(
        days=config.start_day - 1
    )
    days = []
    for offset in range(n_days):
        date = first + datetime.timedelta(days=offset)
        days.append(day_events(site, date.year, date.month, date.day))

    polar_days = sum(1 for d in days if d.state != DaylightState.NORMAL)
    logger.info(
        "Generated %d days of solar events for (%.3f, %.3f), %d without sunrise or sunset",
        len(days),
        site.latitude,
        site.longitude,
        polar_days,
    )
    return EventTable(
        site=site,
        config=config,
        days=days,
        metadata=TableMetadata(
            generated_at=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            total_days=len(days),
            polar_days=polar_days,
        ),
    )


def day_profile(
    site: SiteConfig,
    year: int,
    month: int,
    day: int,
    interval_minutes: int = DEFAULT_CONFIG.interval_minutes,
) -> DayProfile:
    """Sample the sun's position every interval_minutes across one local day."""
    midnight = angles.clock_timestamp(year, month, day)
    samples = []
    for interval in range(intervals_per_day(interval_minutes)):
        minutes = interval * interval_minutes
        elements = compute(midnight + minutes * 60, site)
        samples.append(
            PositionSample(
                minutes=minutes,
                elevation=elements.elevation,
                elevation_corrected=elements.elevation_corrected,
                azimuth=elements.azimuth,
            )
        )
    return DayProfile(
        year=year,
        month=month,
        day=day,
        interval_minutes=interval_minutes,
        samples=samples,
    )


def _find_bracketing_samples(
    samples: list[PositionSample], interval_minutes: int, minutes: int
) -> tuple | None:
    """Find the two samples bracketing the given minutes value.

    Returns (sample_before, sample_after, fraction) or None if outside range.
    """
    if not samples:
        return None
    first_minutes = samples[0].minutes
    last_minutes = samples[-1].minutes
    if minutes < first_minutes or minutes > last_minutes:
        return None

    idx_before = min(
        (minutes - first_minutes) // interval_minutes, len(samples) - 1
    )
    before = samples[idx_before]
    after = samples[idx_before + 1] if idx_before + 1 < len(samples) else None
    t0 = before.minutes

    if after is None or minutes == t0:
        return (before, None, 0.0)

    fraction = (minutes - t0) / (after.minutes - t0)
    return (before, after, fraction)


def lookup_position(profile: DayProfile, minutes: int) -> PositionSample | None:
    """Look up the sun's position from a profile with linear interpolation.

    Uses interpolate_angle for azimuth to handle 360 deg wraparound.
    """
    result = _find_bracketing_samples(
        profile.samples, profile.interval_minutes, minutes
    )
    if result is None:
        return None
    before, after, fraction = result
    if after is None:
        return PositionSample(
            minutes=minutes,
            elevation=before.elevation,
            elevation_corrected=before.elevation_corrected,
            azimuth=before.azimuth,
        )
    return PositionSample(
        minutes=minutes,
        elevation=_interpolate_linear(before.elevation, after.elevation, fraction),
        elevation_corrected=_interpolate_linear(
            before.elevation_corrected, after.elevation_corrected, fraction
        ),
        azimuth=interpolate_angle(before.azimuth, after.azimuth, fraction),
    )


def peak_sample(profile: DayProfile) -> PositionSample:
    """Return the sample with the highest elevation."""
    return max(profile.samples, key=lambda s: s.elevation)
