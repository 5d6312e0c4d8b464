"""Solar geometry for photolysis calculations."""

from __future__ import annotations

import dataclasses

import numpy as np
import numpy.typing as npt

from pygaschem.physics import constants, units
from pygaschem.utils.types import ArrayLike, as_scalar_if_0d

# ---------------
# Time Conversion
# ---------------


def day_of_year(time: ArrayLike) -> ArrayLike:
    """Calculate the day of year, starting from 1 on January 1st.

    Parameters
    ----------
    time : ArrayLike
        ArrayLike of :class:`np.datetime64` times

    Returns
    -------
    ArrayLike
        Day of year. Output ``dtype`` is ``np.float64``.
    """
    start_of_year = time.astype("datetime64[Y]").astype("datetime64[D]")
    return (time.astype("datetime64[D]") - start_of_year) / np.timedelta64(1, "D") + 1.0


def days_in_year(time: ArrayLike) -> ArrayLike:
    """Calculate the number of days (365 or 366) in the year of each time.

    Parameters
    ----------
    time : ArrayLike
        ArrayLike of :class:`np.datetime64` times

    Returns
    -------
    ArrayLike
        Length of the calendar year, [:math:`days`]
    """
    year = time.astype("datetime64[Y]")
    start = year.astype("datetime64[D]")
    end = (year + 1).astype("datetime64[D]")
    return (end - start) / np.timedelta64(1, "D")


def hours_since_start_of_day(time: ArrayLike) -> ArrayLike:
    """Calculate the hours elapsed since the start of day (00:00:00 UTC).

    Parameters
    ----------
    time : ArrayLike
        ArrayLike of :class:`np.datetime64` times

    Returns
    -------
    ArrayLike
        Hours elapsed since the start of today day. Output ``dtype`` is ``np.float64``.
    """
    return (time - time.astype("datetime64[D]")) / np.timedelta64(1, "h")


# ---------------
# Solar Geometry
# ---------------


def fractional_year(time: ArrayLike) -> ArrayLike:
    r"""Calculate the fractional year, the orbital position used by the NOAA equations.

    Parameters
    ----------
    time : ArrayLike
        ArrayLike of :class:`np.datetime64` times

    Returns
    -------
    ArrayLike
        Fractional year :math:`\gamma`, [:math:`rad`]

    References
    ----------
    - NOAA Global Monitoring Division, General Solar Position Calculations
    """
    doy = day_of_year(time)
    hours = hours_since_start_of_day(time)
    return 2.0 * np.pi / days_in_year(time) * (doy - 1.0 + (hours - 12.0) / 24.0)


def equation_of_time(gamma: ArrayLike) -> ArrayLike:
    r"""Calculate the equation of time from the fractional year.

    Parameters
    ----------
    gamma : ArrayLike
        Fractional year, [:math:`rad`]. Output of :func:`fractional_year`.

    Returns
    -------
    ArrayLike
        Difference between true and mean solar time, [:math:`minutes`]
    """
    return 229.18 * (
        0.000075
        + 0.001868 * np.cos(gamma)
        - 0.032077 * np.sin(gamma)
        - 0.014615 * np.cos(2.0 * gamma)
        - 0.040849 * np.sin(2.0 * gamma)
    )


def solar_declination_angle(doy: ArrayLike) -> ArrayLike:
    r"""Calculate the solar declination angle from the day of year.

    The solar declination angle is the angle between the rays of the Sun and the plane of the
    Earth's equator. It has a range of between -23.44 (winter solstice) and +23.44
    (summer solstice) degrees.

    Parameters
    ----------
    doy : ArrayLike
        Day of year. Output of :func:`day_of_year`.

    Returns
    -------
    ArrayLike
        Solar declination angle, [:math:`\deg`]

    Notes
    -----
    Simplified solar ephemeris accounting for the eccentricity of Earth's orbit:

    .. math::

        \delta = \arcsin\left(\sin(-23.44^\circ) \cos\left(\frac{360}{365.24}(d + 10)
        + \frac{360}{\pi} e \sin\left(\frac{360}{365.24}(d - 2)\right)\right)\right)
    """
    deg_per_day = 360.0 / constants.tropical_year
    orbit_correction = (360.0 / np.pi) * constants.eccentricity * np.sin(
        units.degrees_to_radians(deg_per_day * (doy - 2.0))
    )
    ecliptic_rad = units.degrees_to_radians(deg_per_day * (doy + 10.0) + orbit_correction)
    sin_tilt = np.sin(units.degrees_to_radians(-constants.obliquity))
    return units.radians_to_degrees(np.arcsin(sin_tilt * np.cos(ecliptic_rad)))


def solar_hour_angle(longitude: ArrayLike, time: ArrayLike) -> ArrayLike:
    r"""Calculate the sun's East to West angular displacement around the polar axis.

    The value of the hour angle is zero at local solar noon,
    negative in the morning, and positive in the afternoon, increasing by 15 degrees per hour.

    Parameters
    ----------
    longitude : ArrayLike
        Longitude, [:math:`\deg`]
    time : ArrayLike
        ArrayLike of :class:`np.datetime64` times

    Returns
    -------
    ArrayLike
        Solar hour angle, [:math:`\deg`]

    See Also
    --------
    :func:`equation_of_time`
    """
    eot = equation_of_time(fractional_year(time))
    true_solar_time = hours_since_start_of_day(time) + longitude / 15.0 + eot / 60.0
    return 15.0 * (true_solar_time - 12.0)


def cos_solar_zenith_angle(
    latitude: npt.ArrayLike, unix_time: npt.ArrayLike, longitude: npt.ArrayLike
) -> ArrayLike:
    r"""Calculate the cosine of the solar zenith angle.

    Return (:math:`\cos(\theta)`), where :math:`\theta` is the angle between the sun and the
    vertical direction.

    Parameters
    ----------
    latitude : npt.ArrayLike
        Latitude, [:math:`\deg`]
    unix_time : npt.ArrayLike
        Seconds since 1970-01-01T00:00:00 UTC
    longitude : npt.ArrayLike
        Longitude, [:math:`\deg`]

    Returns
    -------
    ArrayLike
        Cosine of the solar zenith angle, clipped to [-1, 1].
        A python ``float`` is returned for scalar input.

    Notes
    -----
    .. math::

        \cos(\theta) = \sin(\phi) \sin(\delta) + \cos(\phi) \cos(\delta) \cos(h)

    where :math:`\phi` is the latitude, :math:`\delta` the solar declination and :math:`h` the
    solar hour angle.

    See Also
    --------
    :func:`solar_declination_angle`
    :func:`solar_hour_angle`
    """
    time = units.unix_to_datetime64(unix_time)
    longitude = np.asarray(longitude, dtype=np.float64)

    lat_rad = units.degrees_to_radians(np.asarray(latitude, dtype=np.float64))
    sdec_rad = units.degrees_to_radians(solar_declination_angle(day_of_year(time)))
    sha_rad = units.degrees_to_radians(solar_hour_angle(longitude, time))

    cos_sza = np.sin(lat_rad) * np.sin(sdec_rad) + (
        np.cos(lat_rad) * np.cos(sdec_rad) * np.cos(sha_rad)
    )
    return as_scalar_if_0d(np.clip(cos_sza, -1.0, 1.0))


@dataclasses.dataclass(frozen=True)
class SolarPosition:
    """Geographic position and time at which the sun is observed.

    Derived quantities are recomputed on each access.
    """

    #: Latitude, [:math:`\deg`]
    latitude: float

    #: Longitude, [:math:`\deg`]
    longitude: float

    #: Seconds since 1970-01-01T00:00:00 UTC
    unix_time: float

    @property
    def declination(self) -> float:
        """Solar declination angle, [:math:`\\deg`]."""
        time = units.unix_to_datetime64(self.unix_time)
        return float(solar_declination_angle(day_of_year(time)))

    @property
    def hour_angle(self) -> float:
        """Solar hour angle, [:math:`\\deg`]."""
        time = units.unix_to_datetime64(self.unix_time)
        return float(solar_hour_angle(self.longitude, time))

    def cos_solar_zenith_angle(self) -> float:
        """Cosine of the solar zenith angle at this position."""
        return cos_solar_zenith_angle(self.latitude, self.unix_time, self.longitude)
