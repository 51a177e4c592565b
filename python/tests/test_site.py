"""Site configuration tests."""

import dataclasses
import logging

import pytest

from solar_calc.site import (
    DEFAULT_SITE,
    InvalidSiteError,
    initialize_site,
    validate_site,
)


class TestInitializeSite:
    def test_accessors(self):
        site = initialize_site(-8, 36.62, -121.904)
        assert site.get_time_zone_offset() == -8
        assert site.get_latitude() == 36.62
        assert site.get_longitude() == -121.904

    def test_no_validation(self):
        site = initialize_site(99, 123.0, 400.0)
        assert site.latitude == 123.0

    def test_immutable(self):
        site = initialize_site(0, 0.0, 0.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            site.latitude = 10.0

    def test_reinitialize_replaces(self):
        site = initialize_site(0, 51.5, -0.1)
        moved = dataclasses.replace(site, tz_offset=1)
        assert site.tz_offset == 0
        assert moved.tz_offset == 1
        assert moved.latitude == 51.5

    def test_default_site_is_monterey(self):
        assert DEFAULT_SITE == initialize_site(-8, 36.62, -121.904)


class TestValidateSite:
    def test_valid_site_returned(self):
        site = initialize_site(-8, 36.62, -121.904)
        assert validate_site(site) is site

    @pytest.mark.parametrize(
        "tz,lat,lon",
        [
            (0, 90.5, 0.0),
            (0, -91.0, 0.0),
            (0, 0.0, 180.5),
            (0, 0.0, -200.0),
            (-13, 0.0, 0.0),
            (15, 0.0, 0.0),
            (0, float("nan"), 0.0),
        ],
    )
    def test_rejects_impossible_values(self, tz, lat, lon):
        with pytest.raises(InvalidSiteError):
            validate_site(initialize_site(tz, lat, lon))

    def test_error_is_value_error(self):
        assert issubclass(InvalidSiteError, ValueError)

    def test_warns_beyond_accurate_latitudes(self, caplog):
        with caplog.at_level(logging.WARNING, logger="solar_calc.site"):
            validate_site(initialize_site(1, 78.2, 15.6))
        assert "results lose accuracy" in caplog.text

    def test_quiet_within_accurate_latitudes(self, caplog):
        with caplog.at_level(logging.WARNING, logger="solar_calc.site"):
            validate_site(initialize_site(1, 60.0, 15.6))
        assert caplog.text == ""
