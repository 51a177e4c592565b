"""Site configuration: time zone offset, latitude and longitude."""

import logging

from ._types import SiteConfig

logger = logging.getLogger(__name__)

ACCURATE_LATITUDE_LIMIT = 72.0


class InvalidSiteError(ValueError):
    """Raised by validate_site for physically impossible site values."""


def initialize_site(tz_offset: int, latitude: float, longitude: float) -> SiteConfig:
    """Build a site configuration. No validation is performed.

    Args:
        tz_offset: Hours from UTC, negative west of Greenwich (PST is -8)
        latitude: Decimal degrees, positive north
        longitude: Decimal degrees, negative west

    Returns:
        A new immutable SiteConfig; call again to change location.
    """
    return SiteConfig(tz_offset=tz_offset, latitude=latitude, longitude=longitude)


def validate_site(site: SiteConfig) -> SiteConfig:
    """Check a site for impossible values, returning it unchanged if valid."""
    if not -90.0 <= site.latitude <= 90.0:
        raise InvalidSiteError(f"Latitude out of range: {site.latitude}")
    if not -180.0 <= site.longitude <= 180.0:
        raise InvalidSiteError(f"Longitude out of range: {site.longitude}")
    if not -12 <= site.tz_offset <= 14:
        raise InvalidSiteError(f"Time zone offset out of range: {site.tz_offset}")
    if abs(site.latitude) > ACCURATE_LATITUDE_LIMIT:
        logger.warning(
            "Latitude %.3f is beyond +/-%.0f degrees; results lose accuracy",
            site.latitude,
            ACCURATE_LATITUDE_LIMIT,
        )
    return site


# Monterey, California on Pacific Standard Time
DEFAULT_SITE = initialize_site(-8, 36.62, -121.904)
