"""Frozen dataclasses for all structured return types."""

from dataclasses import dataclass
from enum import StrEnum


class DaylightState(StrEnum):
    NORMAL = "normal"
    POLAR_DAY = "polar_day"
    POLAR_NIGHT = "polar_night"


@dataclass(frozen=True)
class SiteConfig:
    """Time zone offset (hours, negative west of UTC) and location in degrees."""

    tz_offset: int
    latitude: float
    longitude: float

    def get_latitude(self) -> float:
        return self.latitude

    def get_longitude(self) -> float:
        return self.longitude

    def get_time_zone_offset(self) -> int:
        return self.tz_offset


@dataclass(frozen=True)
class SolarElements:
    """Every quantity derived for one site and one timestamp.

    Angles in degrees, durations in minutes. Timestamps are seconds since
    1970-01-01 on the site's clock; the ``*_time`` fields are truncated to
    whole seconds and are None when the event does not occur.
    """

    tz_offset: int
    latitude: float
    longitude: float
    time_frac_day: float
    unix_days: int
    julian_day: float
    julian_century: float
    geom_mean_long_sun: float
    geom_mean_anom_sun: float
    eccent_earth_orbit: float
    sun_eq_of_center: float
    sun_true_long: float
    sun_true_anom: float
    sun_rad_vector: float
    sun_app_long: float
    mean_obliq_ecliptic: float
    obliq_corr: float
    sun_right_ascension: float
    sun_declination: float
    var_y: float
    eq_of_time: float
    ha_sunrise: float
    solar_noon_frac: float
    solar_noon_days: float
    solar_noon_time: int | None
    sunrise: float
    sunrise_time: int | None
    sunset: float
    sunset_time: int | None
    sun_duration: float
    true_solar_time: float
    hour_angle: float
    zenith: float
    elevation: float
    refraction: float
    elevation_corrected: float
    azimuth: float


@dataclass(frozen=True)
class DayEvents:
    year: int
    month: int
    day: int
    sunrise_time: int | None
    solar_noon_time: int | None
    sunset_time: int | None
    sun_duration: float
    state: DaylightState


@dataclass(frozen=True)
class PositionSample:
    minutes: int
    elevation: float
    elevation_corrected: float
    azimuth: float


@dataclass(frozen=True)
class DayProfile:
    year: int
    month: int
    day: int
    interval_minutes: int
    samples: list[PositionSample]


@dataclass(frozen=True)
class TableMetadata:
    generated_at: str
    total_days: int
    polar_days: int


@dataclass(frozen=True)
class TableConfig:
    interval_minutes: int = 60
    year: int = 2026
    start_day: int = 1
    days: int | None = None


@dataclass(frozen=True)
class EventTable:
    site: SiteConfig
    config: TableConfig
    days: list[DayEvents]
    metadata: TableMetadata
