"""Fixtures shared by the unit tests."""

from __future__ import annotations

import numpy as np
import pytest
import xarray as xr

from pygaschem.models.kinetics import AmbientState
from pygaschem.physics import units

#: Surface number density of air at 298 K, [:math:`molecules \ cm^{-3}`]
M_SURFACE = 2.4627e19


@pytest.fixture(scope="session")
def equinox_noon() -> float:
    """Return 2021-03-20T12:00 UTC as seconds since the unix epoch."""
    return float(units.datetime64_to_unix(np.datetime64("2021-03-20T12:00")))


@pytest.fixture(scope="session")
def equinox_midnight() -> float:
    """Return 2021-03-20T00:00 UTC as seconds since the unix epoch."""
    return float(units.datetime64_to_unix(np.datetime64("2021-03-20T00:00")))


@pytest.fixture()
def surface_state(equinox_noon: float) -> AmbientState:
    """Surface conditions on the equator at noon, equinox."""
    return AmbientState(
        T=298.0,
        pressure=101325.0,
        latitude=0.0,
        longitude=0.0,
        unix_time=equinox_noon,
        H2O=4.0e17,
    )


@pytest.fixture()
def met_ds() -> xr.Dataset:
    """Build a small dataset of ambient conditions over (level, time).

    The first time is noon and the second midnight on the Greenwich meridian.
    """
    level = np.array([1000.0, 500.0, 250.0])
    time = np.array(["2021-03-20T12:00", "2021-03-20T00:00"], dtype="datetime64[ns]")

    air_temperature = np.array([[298.0, 290.0], [255.0, 250.0], [222.0, 220.0]])
    air_pressure = level * 100.0
    h2o = np.array([[4.0e17, 3.0e17], [2.0e16, 1.5e16], [1.0e14, 1.0e14]])

    return xr.Dataset(
        data_vars={
            "air_temperature": (("level", "time"), air_temperature),
            "air_pressure": ("level", air_pressure),
            "H2O": (("level", "time"), h2o),
        },
        coords={"level": level, "time": time, "latitude": 0.0, "longitude": 0.0},
    )
