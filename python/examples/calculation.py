"""Demonstrate solar calculations for Monterey, CA on June 21, 2012 at noon PST."""

import logging
from datetime import datetime, timezone

from solar_calc.angles import clock_timestamp
from solar_calc.calculator import compute, daylight_state
from solar_calc.site import initialize_site, validate_site
from solar_calc.tables import day_profile, peak_sample


def _clock(ts: int | None) -> str:
    if ts is None:
        return "none"
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%H:%M:%S")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    site = validate_site(initialize_site(-8, 36.62, -121.904))
    t = clock_timestamp(2012, 6, 21, 12, 0)

    se = compute(t, site)
    peak = peak_sample(day_profile(site, 2012, 6, 21, interval_minutes=10))

    print("=== Solar Calculation Example ===")
    print(f"Location: Monterey, CA ({site.latitude:.2f}°N, {-site.longitude:.3f}°W)")
    print(f"Clock: 2012-06-21 12:00 (UTC{site.tz_offset:+d})")
    print()
    print("--- Sun ---")
    print(f"Julian Day: {se.julian_day:.5f}")
    print(f"Declination: {se.sun_declination:.3f}°")
    print(f"Equation of Time: {se.eq_of_time:.2f} minutes")
    print(f"True Solar Time: {se.true_solar_time:.2f} minutes")
    print(f"Hour Angle: {se.hour_angle:.2f}°")
    print(f"Zenith Angle: {se.zenith:.2f}°")
    print(f"Elevation: {se.elevation:.2f}° ({se.elevation_corrected:.2f}° refracted)")
    print(f"Azimuth: {se.azimuth:.2f}° (0°=N, 90°=E, 180°=S)")
    print()
    print("--- Day ---")
    print(f"Daylight: {daylight_state(se)}")
    print(f"Sunrise: {_clock(se.sunrise_time)}")
    print(f"Solar noon: {_clock(se.solar_noon_time)}")
    print(f"Sunset: {_clock(se.sunset_time)}")
    print(f"Day length: {se.sun_duration:.1f} minutes")
    print(f"Highest sample: {peak.elevation:.2f}° at minute {peak.minutes}")


if __name__ == "__main__":
    main()
