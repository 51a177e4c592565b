"""Solar position and daily solar events from the NOAA spreadsheet equations.

Results are accurate for the years 1901 to 2099 and latitudes within
+/- 72 degrees. Based on the calculations at
https://gml.noaa.gov/grad/solcalc/calcdetails.html

The timestamp t is the site's clock reading in seconds since 1970-01-01;
for a tz_offset of 0 it is plain UTC. Sunrise, solar noon and sunset come
back in the same clock convention.
"""

import logging
import math
from datetime import datetime as DateTime, timezone

from . import angles
from ._types import DaylightState, SiteConfig, SolarElements

logger = logging.getLogger(__name__)

SUNRISE_ZENITH = 90.833


def compute(t: int, site: SiteConfig) -> SolarElements:
    """Derive every solar quantity for clock reading t at the given site.

    Never raises for astronomical edge cases: where an inverse trig argument
    leaves its domain (polar day or night, sun at the zenith) the affected
    fields and everything computed from them are NaN.
    """
    lat = site.latitude
    lon = site.longitude
    tz = site.tz_offset
    lat_rad = angles.deg_to_rad(lat)

    time_frac_day = angles.time_frac_day(t)
    unix_days = angles.unix_days(t)
    jdn = angles.JULIAN_UNIX_EPOCH + unix_days + time_frac_day - tz / 24.0
    jcn = (jdn - angles.JULIAN_J2000) / angles.DAYS_PER_JULIAN_CENTURY

    gmls = angles.floored_mod(
        280.46646 + jcn * (36000.76983 + jcn * 0.0003032), 360.0
    )
    gmas = 357.52911 + jcn * (35999.05029 - 0.0001537 * jcn)
    eeo = 0.016708634 - jcn * (0.000042037 + 0.0000001267 * jcn)
    gmls_rad = angles.deg_to_rad(gmls)
    gmas_rad = angles.deg_to_rad(gmas)

    sec = (
        math.sin(gmas_rad) * (1.914602 - jcn * (0.004817 + 0.000014 * jcn))
        + math.sin(2 * gmas_rad) * (0.019993 - 0.000101 * jcn)
        + math.sin(3 * gmas_rad) * 0.000289
    )
    stl = gmls + sec
    sta = gmas + sec
    srv = (1.000001018 * (1 - eeo * eeo)) / (
        1 + eeo * math.cos(angles.deg_to_rad(sta))
    )

    omega_rad = angles.deg_to_rad(125.04 - 1934.136 * jcn)
    sal = stl - 0.00569 - 0.00478 * math.sin(omega_rad)
    moe = (
        23
        + (26 + (21.448 - jcn * (46.815 + jcn * (0.00059 - jcn * 0.001813))) / 60)
        / 60
    )
    oc = moe + 0.00256 * math.cos(omega_rad)
    oc_rad = angles.deg_to_rad(oc)
    sal_rad = angles.deg_to_rad(sal)

    sra = angles.rad_to_deg(
        math.atan2(math.cos(oc_rad) * math.sin(sal_rad), math.cos(sal_rad))
    )
    sdec = angles.rad_to_deg(math.asin(math.sin(oc_rad) * math.sin(sal_rad)))
    sdec_rad = angles.deg_to_rad(sdec)

    vy = math.tan(oc_rad / 2) * math.tan(oc_rad / 2)
    eot = 4 * angles.rad_to_deg(
        vy * math.sin(2 * gmls_rad)
        - 2 * eeo * math.sin(gmas_rad)
        + 4 * eeo * vy * math.sin(gmas_rad) * math.cos(2 * gmls_rad)
        - 0.5 * vy * vy * math.sin(4 * gmls_rad)
        - 1.25 * eeo * eeo * math.sin(2 * gmas_rad)
    )

    has = _hour_angle_sunrise(lat_rad, sdec_rad)
    if math.isnan(has):
        logger.debug(
            "No sunrise or sunset at lat %.3f on unix day %d (declination %.3f)",
            lat,
            unix_days,
            sdec,
        )

    solar_noon_frac = (720 - 4 * lon - eot) / angles.MINUTES_PER_DAY
    solar_noon_days = unix_days + solar_noon_frac + tz / 24.0
    sunrise_days = unix_days + (solar_noon_frac - has * 4 / 1440) + tz / 24.0
    sunset_days = unix_days + (solar_noon_frac + has * 4 / 1440) + tz / 24.0
    sunrise = sunrise_days * angles.SECONDS_PER_DAY
    sunset = sunset_days * angles.SECONDS_PER_DAY

    tst = angles.floored_mod(
        time_frac_day * angles.MINUTES_PER_DAY + eot + 4 * lon - 60 * tz,
        angles.MINUTES_PER_DAY,
    )
    ha = angles.hour_angle(tst)
    sza = angles.solar_zenith_angle(lat, sdec, ha)
    sea = 90.0 - sza
    aar = angles.atmospheric_refraction(sea)

    return SolarElements(
        tz_offset=tz,
        latitude=lat,
        longitude=lon,
        time_frac_day=time_frac_day,
        unix_days=unix_days,
        julian_day=jdn,
        julian_century=jcn,
        geom_mean_long_sun=gmls,
        geom_mean_anom_sun=gmas,
        eccent_earth_orbit=eeo,
        sun_eq_of_center=sec,
        sun_true_long=stl,
        sun_true_anom=sta,
        sun_rad_vector=srv,
        sun_app_long=sal,
        mean_obliq_ecliptic=moe,
        obliq_corr=oc,
        sun_right_ascension=sra,
        sun_declination=sdec,
        var_y=vy,
        eq_of_time=eot,
        ha_sunrise=has,
        solar_noon_frac=solar_noon_frac,
        solar_noon_days=solar_noon_days,
        solar_noon_time=angles.days_to_timestamp(solar_noon_days),
        sunrise=sunrise,
        sunrise_time=angles.days_to_timestamp(sunrise_days),
        sunset=sunset,
        sunset_time=angles.days_to_timestamp(sunset_days),
        sun_duration=8 * has,
        true_solar_time=tst,
        hour_angle=ha,
        zenith=sza,
        elevation=sea,
        refraction=aar,
        elevation_corrected=sea + aar,
        azimuth=angles.solar_azimuth(lat, sdec, ha, sza),
    )


def _hour_angle_sunrise(lat_rad: float, dec_rad: float) -> float:
    """Hour angle of sunrise in degrees, NaN when the sun never crosses the horizon."""
    cos_has = math.cos(angles.deg_to_rad(SUNRISE_ZENITH)) / (
        math.cos(lat_rad) * math.cos(dec_rad)
    ) - math.tan(lat_rad) * math.tan(dec_rad)
    if math.isnan(cos_has) or not -1.0 <= cos_has <= 1.0:
        return math.nan
    return angles.rad_to_deg(math.acos(cos_has))


def compute_at(dt: DateTime, site: SiteConfig) -> SolarElements:
    """Calculate solar elements for a timezone-aware datetime.

    The instant is converted to the site's clock (UTC shifted by tz_offset
    hours) before computing, so event timestamps follow that clock too.
    """
    if dt.tzinfo is None:
        raise ValueError("dt must be timezone-aware")
    utc = dt.astimezone(timezone.utc)
    t = math.floor(utc.timestamp()) + 3600 * site.tz_offset
    return compute(t, site)


def daylight_state(elements: SolarElements) -> DaylightState:
    """Classify the day as normal, polar day or polar night."""
    if not math.isnan(elements.ha_sunrise):
        return DaylightState.NORMAL
    same_hemisphere = (elements.latitude >= 0) == (elements.sun_declination >= 0)
    return DaylightState.POLAR_DAY if same_hemisphere else DaylightState.POLAR_NIGHT
