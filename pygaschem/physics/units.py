"""Unit conversion support."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from pygaschem.utils.types import ArrayScalarLike

#: Largest magnitude of unix time, [:math:`s`], representable as ``datetime64[ns]``
MAX_UNIX_TIME = np.iinfo(np.int64).max // 10**9


def degrees_to_radians(degrees: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert from degrees to radians.

    Parameters
    ----------
    degrees : ArrayScalarLike
        Degrees values, [:math:`\deg`]

    Returns
    -------
    ArrayScalarLike
        Radians values
    """
    return degrees * (np.pi / 180.0)


def radians_to_degrees(radians: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert from radians to degrees.

    Parameters
    ----------
    radians : ArrayScalarLike
        degrees values, [:math:`\rad`]

    Returns
    -------
    ArrayScalarLike
        Radian values
    """
    return radians * (180.0 / np.pi)


def unix_to_datetime64(unix_time: npt.ArrayLike) -> npt.NDArray[np.datetime64]:
    """Convert seconds since the unix epoch to :class:`np.datetime64` values.

    Sub-second precision is kept at the nanosecond level. This limits
    ``unix_time`` to the ``datetime64[ns]`` range, 1677-09-21 to 2262-04-11.

    Parameters
    ----------
    unix_time : npt.ArrayLike
        Seconds since 1970-01-01T00:00:00 UTC

    Returns
    -------
    npt.NDArray[np.datetime64]
        Times with ``datetime64[ns]`` dtype

    Raises
    ------
    ValueError
        Raises if any ``unix_time`` is outside of the ``datetime64[ns]`` range.
    """
    unix_time = np.asarray(unix_time, dtype=np.float64)
    if np.any(np.abs(unix_time) >= MAX_UNIX_TIME):
        msg = f"Unix time outside of the datetime64[ns] range of +/- {MAX_UNIX_TIME} s"
        raise ValueError(msg)

    ns = np.round(unix_time * 1e9).astype("int64")
    return ns.astype("datetime64[ns]")


def datetime64_to_unix(time: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Convert :class:`np.datetime64` values to seconds since the unix epoch.

    Parameters
    ----------
    time : npt.ArrayLike
        Times, coercible to ``datetime64[ns]``

    Returns
    -------
    npt.NDArray[np.float64]
        Seconds since 1970-01-01T00:00:00 UTC
    """
    time = np.asarray(time, dtype="datetime64[ns]")
    return (time - np.datetime64(0, "s")) / np.timedelta64(1, "s")
