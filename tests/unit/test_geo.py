"""Test pygaschem.physics.geo module."""

from __future__ import annotations

import numpy as np
import pytest

from pygaschem.physics import geo, units


def test_equinox_noon(equinox_noon: float) -> None:
    """The sun is nearly overhead at the equator at noon on the equinox."""
    cos_sza = geo.cos_solar_zenith_angle(0.0, equinox_noon, 0.0)
    assert isinstance(cos_sza, float)
    assert cos_sza == pytest.approx(1.0, abs=0.05)


def test_equinox_midnight(equinox_midnight: float) -> None:
    """The sun is below the horizon at midnight."""
    cos_sza = geo.cos_solar_zenith_angle(0.0, equinox_midnight, 0.0)
    assert cos_sza < -0.95


def test_local_noon_follows_longitude(equinox_noon: float) -> None:
    """Local noon at 90E is six hours earlier than at the Greenwich meridian."""
    cos_sza = geo.cos_solar_zenith_angle(0.0, equinox_noon - 6 * 3600.0, 90.0)
    assert cos_sza == pytest.approx(1.0, abs=0.05)

    # Sunset at 90E
    cos_sza = geo.cos_solar_zenith_angle(0.0, equinox_noon, 90.0)
    assert abs(cos_sza) < 0.05


def test_signed_latitude() -> None:
    """Summer hemisphere sees a higher sun."""
    june_noon = float(units.datetime64_to_unix(np.datetime64("2021-06-21T12:00")))
    north = geo.cos_solar_zenith_angle(45.0, june_noon, 0.0)
    south = geo.cos_solar_zenith_angle(-45.0, june_noon, 0.0)
    assert north > 0.9
    assert south < 0.5


def test_vectorized(equinox_noon: float) -> None:
    """Inputs broadcast against each other and results stay in [-1, 1]."""
    latitude = np.linspace(-90.0, 90.0, 19)[:, np.newaxis]
    longitude = np.linspace(-180.0, 180.0, 25)[np.newaxis, :]
    cos_sza = geo.cos_solar_zenith_angle(latitude, equinox_noon, longitude)

    assert cos_sza.shape == (19, 25)
    assert np.all(cos_sza >= -1.0)
    assert np.all(cos_sza <= 1.0)
    assert cos_sza.max() == pytest.approx(1.0, abs=0.01)


def test_declination_range() -> None:
    """The declination spans the obliquity of the ecliptic over a year."""
    doy = np.arange(1.0, 366.0)
    declination = geo.solar_declination_angle(doy)
    assert declination.max() == pytest.approx(23.44, abs=0.05)
    assert declination.min() == pytest.approx(-23.44, abs=0.05)
    assert 165 < doy[np.argmax(declination)] < 178


def test_day_of_year() -> None:
    """Check day of year and year length in leap and regular years."""
    time = np.array(["2020-01-01T06:00", "2020-12-31T18:00", "2021-03-20T12:00"], "datetime64[s]")
    np.testing.assert_array_equal(geo.day_of_year(time), [1.0, 366.0, 79.0])
    np.testing.assert_array_equal(geo.days_in_year(time), [366.0, 366.0, 365.0])
    np.testing.assert_allclose(geo.hours_since_start_of_day(time), [6.0, 18.0, 12.0])


def test_equation_of_time() -> None:
    """The equation of time stays within about 17 minutes."""
    time = np.arange("2021-01-01", "2022-01-01", dtype="datetime64[D]").astype("datetime64[s]")
    eot = geo.equation_of_time(geo.fractional_year(time))
    assert eot.max() == pytest.approx(16.4, abs=1.0)
    assert eot.min() == pytest.approx(-14.3, abs=1.0)


def test_solar_position(equinox_noon: float) -> None:
    """SolarPosition agrees with the function form."""
    position = geo.SolarPosition(latitude=30.0, longitude=-45.0, unix_time=equinox_noon)
    expected = geo.cos_solar_zenith_angle(30.0, equinox_noon, -45.0)
    assert position.cos_solar_zenith_angle() == expected
    assert abs(position.declination) < 1.0
    assert position.hour_angle == pytest.approx(-45.0, abs=3.0)
