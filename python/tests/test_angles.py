"""Angle, epoch-day and sub-formula tests."""

import math

import pytest

from solar_calc.angles import (
    atmospheric_refraction,
    clock_timestamp,
    days_to_timestamp,
    deg_to_rad,
    floored_mod,
    hour_angle,
    leap_year,
    normalize_angle,
    rad_to_deg,
    solar_azimuth,
    solar_zenith_angle,
    time_frac_day,
    time_of_day,
    unix_days,
)


class TestLeapYear:
    def test_century_leap_year_rules(self):
        assert leap_year(2024)
        assert not leap_year(2026)
        assert leap_year(2000)  # divisible by 400
        assert not leap_year(1900)  # div by 100 not 400


class TestFlooredMod:
    @pytest.mark.parametrize(
        "x, modulus, expected",
        [
            (370.0, 360.0, 10.0),
            (-10.0, 360.0, 350.0),
            (-370.0, 360.0, 350.0),
            (1500.0, 1440.0, 60.0),
            (-60.0, 1440.0, 1380.0),
            (0.0, 360.0, 0.0),
        ],
    )
    def test_sign_follows_modulus(self, x, modulus, expected):
        assert floored_mod(x, modulus) == pytest.approx(expected, abs=1e-9)


class TestNormalizeAngle:
    @pytest.mark.parametrize(
        "input_angle, expected",
        [
            (0.0, 0.0),
            (45.0, 45.0),
            (360.0, 0.0),
            (361.0, 1.0),
            (-1.0, 359.0),
            (-90.0, 270.0),
            (405.0, 45.0),
            (-180.0, 180.0),
            (-450.0, 270.0),
        ],
    )
    def test_basic(self, input_angle, expected):
        assert normalize_angle(input_angle) == pytest.approx(expected, abs=1e-9)

    def test_small_angles_near_zero(self):
        assert normalize_angle(0.001) == pytest.approx(0.001, abs=1e-6)
        assert normalize_angle(-0.001) == pytest.approx(359.999, abs=1e-6)

    def test_nan_passes_through(self):
        assert math.isnan(normalize_angle(math.nan))


class TestEpochArithmetic:
    def test_clock_timestamp_known_values(self):
        assert clock_timestamp(1970, 1, 1) == 0
        assert clock_timestamp(2000, 1, 1, 12) == 946728000
        assert clock_timestamp(1969, 12, 31, 23, 59, 59) == -1

    def test_unix_days(self):
        assert unix_days(0) == 0
        assert unix_days(86399) == 0
        assert unix_days(86400) == 1
        assert unix_days(-1) == -1

    def test_time_of_day(self):
        assert time_of_day(clock_timestamp(2012, 6, 21, 13, 45, 30)) == (13, 45, 30)

    def test_time_of_day_before_epoch(self):
        assert time_of_day(-1) == (23, 59, 59)
        assert time_of_day(clock_timestamp(1950, 3, 1, 6, 30)) == (6, 30, 0)

    def test_time_frac_day(self):
        assert time_frac_day(0) == 0.0
        assert time_frac_day(43200) == pytest.approx(0.5, abs=1e-12)
        assert time_frac_day(clock_timestamp(2012, 6, 21, 18)) == pytest.approx(0.75, abs=1e-12)

    def test_time_frac_day_counts_seconds(self):
        assert time_frac_day(30) == pytest.approx(30 / 86400, abs=1e-12)

    def test_days_to_timestamp(self):
        assert days_to_timestamp(1.5) == 129600
        assert days_to_timestamp(1.0000001) == 86400
        assert days_to_timestamp(math.nan) is None


class TestHourAngle:
    def test_solar_noon(self):
        assert hour_angle(720.0) == pytest.approx(0.0, abs=1e-12)

    def test_known_values(self):
        assert hour_angle(0.0) == pytest.approx(-180.0, abs=1e-12)
        assert hour_angle(660.0) == pytest.approx(-15.0, abs=1e-12)
        assert hour_angle(1080.0) == pytest.approx(90.0, abs=1e-12)

    def test_negative_true_solar_time_branch(self):
        assert hour_angle(-60.0) == pytest.approx(165.0, abs=1e-12)


class TestDegRadConversions:
    def test_known_conversions(self):
        assert deg_to_rad(180.0) == pytest.approx(math.pi, abs=1e-10)
        assert deg_to_rad(90.0) == pytest.approx(math.pi / 2, abs=1e-10)
        assert rad_to_deg(math.pi) == pytest.approx(180.0, abs=1e-10)


class TestSolarZenithAngle:
    def test_overhead(self):
        assert solar_zenith_angle(0.0, 0.0, 0.0) == pytest.approx(0.0, abs=1e-6)

    def test_noon_is_latitude_minus_declination(self):
        assert solar_zenith_angle(40.0, 10.0, 0.0) == pytest.approx(30.0, abs=1e-9)

    @pytest.mark.parametrize(
        "lat,decl,ha",
        [
            (45.0, 23.45, 0.0),
            (-45.0, -23.45, 0.0),
            (0.0, 23.45, 90.0),
            (89.0, 23.45, 180.0),
        ],
    )
    def test_in_range(self, lat, decl, ha):
        assert 0.0 <= solar_zenith_angle(lat, decl, ha) <= 180.0


class TestSolarAzimuth:
    def test_morning_sun_in_east(self):
        assert solar_azimuth(0.0, 0.0, -90.0, 90.0) == pytest.approx(90.0, abs=1e-9)

    def test_afternoon_sun_in_west(self):
        assert solar_azimuth(0.0, 0.0, 90.0, 90.0) == pytest.approx(270.0, abs=1e-9)

    def test_northern_noon_is_south(self):
        zenith = solar_zenith_angle(40.0, 0.0, 1.0)
        assert solar_azimuth(40.0, 0.0, 1.0, zenith) == pytest.approx(180.0, abs=2.0)

    def test_sun_at_zenith_is_undefined(self):
        assert math.isnan(solar_azimuth(0.0, 0.0, 0.0, 0.0))

    def test_out_of_domain_is_nan(self):
        assert math.isnan(solar_azimuth(40.0, 23.0, 10.0, 1.0))


class TestAtmosphericRefraction:
    def test_none_near_zenith(self):
        assert atmospheric_refraction(90.0) == 0.0
        assert atmospheric_refraction(85.1) == 0.0

    def test_upper_branch_at_85(self):
        assert 0.0 < atmospheric_refraction(85.0) < 0.002

    def test_low_sun_branch_at_5(self):
        assert atmospheric_refraction(5.0) == pytest.approx(574.625 / 3600.0, abs=1e-9)

    def test_horizon(self):
        assert atmospheric_refraction(0.0) == pytest.approx(1735.0 / 3600.0, abs=1e-12)

    def test_branches_meet_near_breakpoints(self):
        assert atmospheric_refraction(5.0) == pytest.approx(
            atmospheric_refraction(5.0001), abs=0.002
        )
        assert atmospheric_refraction(-0.575) == pytest.approx(
            atmospheric_refraction(-0.5749), abs=0.002
        )

    def test_below_horizon(self):
        expected = -20.772 / math.tan(math.radians(-10.0)) / 3600.0
        assert atmospheric_refraction(-10.0) == pytest.approx(expected, abs=1e-12)

    def test_nan_propagates(self):
        assert math.isnan(atmospheric_refraction(math.nan))
