"""Interpolation of tabulated absorption cross sections."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt
import scipy.interpolate
import xarray as xr

from pygaschem.core.exceptions import DomainError
from pygaschem.utils.types import as_scalar_if_0d

logger = logging.getLogger(__name__)


def _validate_axis(values: npt.ArrayLike, name: str) -> npt.NDArray[np.float64]:
    """Return a read-only float copy of a 1D, non-empty, strictly increasing axis."""
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise DomainError("axis must be one dimensional", "CrossSectionTable", **{name: arr.shape})
    if arr.size == 0:
        raise DomainError("axis must not be empty", "CrossSectionTable", **{name: arr.tolist()})
    if not np.all(np.isfinite(arr)):
        raise DomainError("axis must be finite", "CrossSectionTable", **{name: arr.tolist()})
    if np.any(np.diff(arr) <= 0.0):
        raise DomainError(
            "axis must be strictly increasing", "CrossSectionTable", **{name: arr.tolist()}
        )

    arr.flags.writeable = False
    return arr


@dataclasses.dataclass(frozen=True)
class CrossSectionTable:
    """Absorption cross sections tabulated by wavelength and temperature.

    The table is validated on construction and read-only afterwards.
    It is safe to share between models and threads.

    Parameters
    ----------
    wavelengths : npt.ArrayLike
        Effective wavelength of each bin, [:math:`nm`]. Strictly increasing.
    temperatures : npt.ArrayLike
        Temperature grid, [:math:`K`]. Strictly increasing.
    sigma : npt.ArrayLike
        Cross sections with shape ``(len(wavelengths), len(temperatures))``,
        [:math:`cm^{2}`]. A 1D array is accepted when the temperature grid has
        a single point.

    Raises
    ------
    DomainError
        Raises if an axis is empty or not strictly increasing,
        or if ``sigma`` does not match the axes.
    """

    wavelengths: npt.NDArray[np.float64]
    temperatures: npt.NDArray[np.float64]
    sigma: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        wavelengths = _validate_axis(self.wavelengths, "wavelengths")
        temperatures = _validate_axis(self.temperatures, "temperatures")

        sigma = np.array(self.sigma, dtype=np.float64)
        if sigma.ndim == 1 and temperatures.size == 1:
            sigma = sigma[:, np.newaxis]

        expected = (wavelengths.size, temperatures.size)
        if sigma.shape != expected:
            raise DomainError(
                "sigma shape does not match (wavelengths, temperatures)",
                "CrossSectionTable",
                sigma_shape=sigma.shape,
                expected=expected,
            )
        if not np.all(np.isfinite(sigma)):
            raise DomainError("sigma must be finite", "CrossSectionTable")

        sigma.flags.writeable = False

        # Frozen dataclass, bypass __setattr__
        object.__setattr__(self, "wavelengths", wavelengths)
        object.__setattr__(self, "temperatures", temperatures)
        object.__setattr__(self, "sigma", sigma)

    @classmethod
    def from_temperature_rows(
        cls,
        wavelengths: npt.ArrayLike,
        temperatures: Sequence[float],
        rows: Sequence[npt.ArrayLike],
    ) -> CrossSectionTable:
        """Build a table from one row of cross sections per temperature.

        This is the layout of the Fast-JX ``FJX_spec.dat`` tables.

        Parameters
        ----------
        wavelengths : npt.ArrayLike
            Effective wavelength of each bin, [:math:`nm`]
        temperatures : Sequence[float]
            Temperature of each row, [:math:`K`]
        rows : Sequence[npt.ArrayLike]
            Cross sections over all wavelength bins, one row per temperature

        Returns
        -------
        CrossSectionTable
        """
        return cls(wavelengths, temperatures, np.stack([np.asarray(r) for r in rows], axis=1))

    @classmethod
    def from_dataarray(cls, da: xr.DataArray) -> CrossSectionTable:
        """Build a table from a :class:`xr.DataArray`.

        Parameters
        ----------
        da : xr.DataArray
            Cross sections with dimensions ``"wavelength"`` and ``"temperature"``

        Returns
        -------
        CrossSectionTable
        """
        da = da.transpose("wavelength", "temperature")
        return cls(da["wavelength"].values, da["temperature"].values, da.values)

    def to_dataarray(self) -> xr.DataArray:
        """Convert the table to a :class:`xr.DataArray`.

        Returns
        -------
        xr.DataArray
            Cross sections with dimensions ``("wavelength", "temperature")``
        """
        return xr.DataArray(
            self.sigma.copy(),
            dims=("wavelength", "temperature"),
            coords={
                "wavelength": self.wavelengths.copy(),
                "temperature": self.temperatures.copy(),
            },
            name="cross_section",
            attrs={"units": "cm2"},
        )


class CrossSectionInterpolator:
    """Piecewise linear interpolation of cross sections over temperature, per wavelength bin.

    Temperatures outside of the tabulated grid return the boundary cross section
    unchanged (flat extrapolation).

    Parameters
    ----------
    table : CrossSectionTable
        Tabulated cross sections
    """

    __slots__ = ("_interp", "table")

    def __init__(self, table: CrossSectionTable) -> None:
        self.table = table

        sigma = table.sigma
        if table.temperatures.size > 1:
            self._interp = scipy.interpolate.interp1d(
                table.temperatures,
                sigma,
                axis=1,
                assume_sorted=True,
                bounds_error=False,
                fill_value=(sigma[:, 0], sigma[:, -1]),
            )
        else:
            self._interp = None

    def __len__(self) -> int:
        return self.table.wavelengths.size

    def __repr__(self) -> str:
        t = self.table.temperatures
        return f"CrossSectionInterpolator(n_bins={len(self)}, temperatures=[{t[0]}, {t[-1]}])"

    def __call__(self, T: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Interpolate the cross sections of every wavelength bin at temperature ``T``.

        Parameters
        ----------
        T : npt.ArrayLike
            Temperature, [:math:`K`]

        Returns
        -------
        npt.NDArray[np.float64]
            Cross sections with shape ``(n_bins,) + np.shape(T)``, [:math:`cm^{2}`]
        """
        T = np.asarray(T, dtype=np.float64)

        # Boundary values broadcast against T
        last = self.table.sigma[:, -1].reshape((-1,) + (1,) * T.ndim)
        if self._interp is None:
            return np.broadcast_to(last, (len(self),) + T.shape).copy()

        out = self._interp(T)
        return np.where(T >= self.table.temperatures[-1], last, out)

    def lookup(self, bin_index: int, T: npt.ArrayLike) -> float | npt.NDArray[np.float64]:
        """Interpolate the cross section of a single wavelength bin.

        Parameters
        ----------
        bin_index : int
            Index of the wavelength bin
        T : npt.ArrayLike
            Temperature, [:math:`K`]

        Returns
        -------
        float | npt.NDArray[np.float64]
            Cross section, [:math:`cm^{2}`]

        Raises
        ------
        IndexError
            Raises if ``bin_index`` is out of range.
        """
        n_bins = len(self)
        if not -n_bins <= bin_index < n_bins:
            msg = f"Wavelength bin {bin_index} out of range for {n_bins} bins"
            raise IndexError(msg)
        return as_scalar_if_0d(self(T)[bin_index])


def create_fjx_interp(
    wavelengths: npt.ArrayLike,
    temperatures: npt.ArrayLike,
    sigma: npt.ArrayLike,
) -> CrossSectionInterpolator:
    """Create per-wavelength cross section interpolants over a temperature grid.

    Parameters
    ----------
    wavelengths : npt.ArrayLike
        Effective wavelength of each bin, [:math:`nm`]
    temperatures : npt.ArrayLike
        Temperature grid, [:math:`K`]
    sigma : npt.ArrayLike
        Cross sections with shape ``(len(wavelengths), len(temperatures))``

    Returns
    -------
    CrossSectionInterpolator
        Linear interpolation with flat extrapolation

    Raises
    ------
    DomainError
        Raises if the table axes are malformed.
    """
    table = CrossSectionTable(wavelengths, temperatures, sigma)
    logger.debug(
        "Built cross section table with %s bins over %s temperatures",
        table.wavelengths.size,
        table.temperatures.size,
    )
    return CrossSectionInterpolator(table)
