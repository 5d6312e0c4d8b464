"""Photolysis rate constants (J-values) with the Fast-JX 18 bin scheme."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any, Union

import numpy as np
import numpy.typing as npt
import xarray as xr
from scipy.integrate import trapezoid

from pygaschem.core.exceptions import DomainError
from pygaschem.core.interpolation import CrossSectionInterpolator, CrossSectionTable
from pygaschem.core.models import Model, ModelParams
from pygaschem.models.photolysis import fastjx_data
from pygaschem.physics import geo, units
from pygaschem.utils.types import ArrayScalarLike, as_scalar_if_0d

logger = logging.getLogger(__name__)

#: Top of atmosphere actinic flux of the Fast-JX bins
ACTINIC_FLUX = fastjx_data.ACTINIC_FLUX


def calc_flux(cos_sza: ArrayScalarLike, max_actinic_flux: ArrayScalarLike) -> ArrayScalarLike:
    """Calculate the actinic flux for a given solar zenith angle.

    Parameters
    ----------
    cos_sza : ArrayScalarLike
        Cosine of the solar zenith angle
    max_actinic_flux : ArrayScalarLike
        Actinic flux with the sun at zenith, [:math:`photons \\ cm^{-2} \\ s^{-1}`]

    Returns
    -------
    ArrayScalarLike
        Actinic flux. Zero when the sun is at or below the horizon.
    """
    return np.maximum(cos_sza, 0.0) * max_actinic_flux


#: Quantum yield of a photolysis reaction. Either a constant, one value per
#: wavelength bin, or interpolated by wavelength bin and temperature.
QuantumYield = Union[float, npt.NDArray[np.float64], CrossSectionInterpolator]


@dataclasses.dataclass(frozen=True)
class PhotolysisSpecies:
    """Cross sections and quantum yield of a photolysis reaction."""

    #: Photolysis reaction key, e.g. ``"NO2"``
    name: str

    #: Temperature dependent cross sections over the wavelength bins
    cross_section: CrossSectionInterpolator

    #: Quantum yield of the reaction channel
    quantum_yield: QuantumYield = 1.0


def _validate_quantum_yield(quantum_yield: QuantumYield, n_bins: int) -> QuantumYield:
    if isinstance(quantum_yield, CrossSectionInterpolator):
        if len(quantum_yield) != n_bins:
            msg = (
                f"Expected quantum yields over {n_bins} wavelength bins. "
                f"Found {len(quantum_yield)} bins."
            )
            raise ValueError(msg)
        return quantum_yield

    phi = np.asarray(quantum_yield, dtype=np.float64)
    if phi.ndim and phi.shape != (n_bins,):
        msg = (
            f"Expected a scalar or {n_bins} quantum yields, one per wavelength bin. "
            f"Found shape {phi.shape}."
        )
        raise ValueError(msg)
    return phi


def _per_bin(values: QuantumYield, T: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Broadcast per-bin ``values`` against ``(n_bins,) + T.shape``."""
    if isinstance(values, CrossSectionInterpolator):
        return values(T)
    values = np.asarray(values)
    return values.reshape(values.shape + (1,) * T.ndim)


def _j_instantaneous(
    cross_section: CrossSectionInterpolator,
    quantum_yield: QuantumYield,
    T: npt.NDArray[np.float64],
    latitude: npt.NDArray[np.float64],
    longitude: npt.NDArray[np.float64],
    unix_time: npt.NDArray[np.float64],
    max_actinic_flux: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    cos_sza = np.asarray(geo.cos_solar_zenith_angle(latitude, unix_time, longitude))
    sigma = cross_section(T)
    phi = _per_bin(quantum_yield, T)

    # Wavelength bins along the leading axis
    flux = calc_flux(cos_sza[np.newaxis, ...], _per_bin(max_actinic_flux, cos_sza))
    return np.sum(flux * sigma * phi, axis=0)


def j_mean(
    cross_section: CrossSectionInterpolator,
    quantum_yield: QuantumYield,
    T: npt.ArrayLike,
    latitude: npt.ArrayLike,
    longitude: npt.ArrayLike,
    t0: npt.ArrayLike,
    t1: npt.ArrayLike | None = None,
    max_actinic_flux: npt.ArrayLike = ACTINIC_FLUX,
    n_samples: int = 9,
) -> float | npt.NDArray[np.float64]:
    r"""Calculate a photolysis rate constant, optionally averaged over a time window.

    Parameters
    ----------
    cross_section : CrossSectionInterpolator
        Cross sections of the photolysis reaction, [:math:`cm^{2}`]
    quantum_yield : float | npt.NDArray[np.float64] | CrossSectionInterpolator
        Quantum yield of the photolysis reaction. A scalar applies to every
        wavelength bin. An array holds one value per bin. An interpolator gives
        temperature dependent yields per bin.
    T : npt.ArrayLike
        Temperature, [:math:`K`]
    latitude : npt.ArrayLike
        Latitude, [:math:`\deg`]
    longitude : npt.ArrayLike
        Longitude, [:math:`\deg`]
    t0 : npt.ArrayLike
        Start of the averaging window, seconds since 1970-01-01T00:00:00 UTC
    t1 : npt.ArrayLike, optional
        End of the averaging window. If None (default), the instantaneous
        rate at ``t0`` is returned.
    max_actinic_flux : npt.ArrayLike, optional
        Actinic flux of each wavelength bin with the sun at zenith.
        Defaults to the Fast-JX values.
    n_samples : int, optional
        Number of evenly spaced instants used to integrate over the window

    Returns
    -------
    float | npt.NDArray[np.float64]
        Photolysis rate constant, [:math:`s^{-1}`]. All inputs, including ``t1``,
        are broadcast against each other.

    Raises
    ------
    DomainError
        Raises if any ``T <= 0``.
    ValueError
        Raises if ``max_actinic_flux`` or ``quantum_yield`` do not match the
        wavelength bins, if ``t1 < t0`` or if ``n_samples < 2``.

    Notes
    -----
    .. math::

        J = \frac{1}{t_1 - t_0} \int_{t_0}^{t_1} \sum_i F_i(t) \sigma_i(T) \phi_i \, dt

    The integral is evaluated with the trapezoidal rule.
    """
    n_bins = len(cross_section)
    max_actinic_flux = np.asarray(max_actinic_flux, dtype=np.float64)
    if max_actinic_flux.shape != (n_bins,):
        msg = (
            f"Expected {n_bins} actinic flux values, one per wavelength bin. "
            f"Found shape {max_actinic_flux.shape}."
        )
        raise ValueError(msg)
    quantum_yield = _validate_quantum_yield(quantum_yield, n_bins)

    inputs = [T, latitude, longitude, t0] if t1 is None else [T, latitude, longitude, t0, t1]
    T, latitude, longitude, t0, *end = np.broadcast_arrays(
        *(np.asarray(x, dtype=np.float64) for x in inputs)
    )
    if np.any(T <= 0.0):
        raise DomainError("temperature must be positive", "j_mean", T=T)

    args = cross_section, quantum_yield, T, latitude, longitude

    if not end:
        return as_scalar_if_0d(_j_instantaneous(*args, t0, max_actinic_flux))

    if n_samples < 2:
        msg = f"Parameter 'n_samples' must be at least 2, found {n_samples}"
        raise ValueError(msg)

    duration = end[0] - t0
    if np.any(duration < 0.0):
        raise ValueError("End of the averaging window precedes its start")

    fractions = np.linspace(0.0, 1.0, n_samples)
    times = np.stack([t0 + f * duration for f in fractions])
    js = np.stack([_j_instantaneous(*args, t, max_actinic_flux) for t in times])

    with np.errstate(divide="ignore", invalid="ignore"):
        out = trapezoid(js, x=times, axis=0) / duration
    return as_scalar_if_0d(np.where(duration == 0.0, js[0], out))


def _build_fastjx_species() -> dict[str, PhotolysisSpecies]:
    def quantum_yield(name: str) -> QuantumYield:
        phi = fastjx_data.QUANTUM_YIELDS[name]
        if isinstance(phi, CrossSectionTable):
            return CrossSectionInterpolator(phi)
        return phi

    return {
        name: PhotolysisSpecies(
            name=name,
            cross_section=CrossSectionInterpolator(table),
            quantum_yield=quantum_yield(name),
        )
        for name, table in fastjx_data.CROSS_SECTIONS.items()
    }

#: Photolysis reactions of the SuperFast mechanism, built once at import
FASTJX_SPECIES: Mapping[str, PhotolysisSpecies] = _build_fastjx_species()


@dataclasses.dataclass
class FastJXParams(ModelParams):
    """Default parameters for :class:`FastJX`."""

    #: Actinic flux of each wavelength bin with the sun at zenith,
    #: [:math:`photons \ cm^{-2} \ s^{-1}`]
    max_actinic_flux: npt.NDArray[np.float64] = dataclasses.field(
        default_factory=lambda: ACTINIC_FLUX.copy()
    )

    #: Number of instants sampled in each averaging window
    n_samples: int = 9

    #: Length of the averaging window starting at each source time.
    #: A zero window gives instantaneous rates.
    averaging_window: np.timedelta64 = np.timedelta64(0, "s")

    #: Photolysis reactions to evaluate
    species: tuple[str, ...] = tuple(FASTJX_SPECIES)


class FastJX(Model):
    """Photolysis rate constants with the Fast-JX 18 bin scheme.

    Parameters
    ----------
    params : dict[str, Any], optional
        Override :class:`FastJXParams` with dictionary.
    catalog : Mapping[str, PhotolysisSpecies], optional
        Photolysis reactions available to the model. Defaults to :attr:`FASTJX_SPECIES`.
    **params_kwargs : Any
        Override :class:`FastJXParams` with keyword arguments.

    References
    ----------
    - Neu, J. L., Prather, M. J., and Penner, J. E. (2007), Global atmospheric chemistry:
      Integrating over fractional cloud cover, J. Geophys. Res., 112, D11306

    Examples
    --------
    >>> import numpy as np
    >>> import xarray as xr
    >>> from pygaschem.models.photolysis import FastJX
    >>> ds = xr.Dataset(
    ...     {"air_temperature": ("time", [298.0, 298.0])},
    ...     coords={
    ...         "time": np.array(["2021-03-20T12:00", "2021-03-20T00:00"], dtype="datetime64[ns]"),
    ...         "latitude": 0.0,
    ...         "longitude": 0.0,
    ...     },
    ... )
    >>> out = FastJX(species=("NO2",)).eval(ds)
    >>> float(out["j_NO2"][1])
    0.0
    """

    name = "fastjx"
    long_name = "Fast-JX photolysis rate constants"
    default_params = FastJXParams

    def __init__(
        self,
        params: dict[str, Any] | None = None,
        catalog: Mapping[str, PhotolysisSpecies] | None = None,
        **params_kwargs: Any,
    ) -> None:
        super().__init__(params, **params_kwargs)
        self.catalog = dict(catalog) if catalog is not None else dict(FASTJX_SPECIES)

    def get_species(self, name: str) -> PhotolysisSpecies:
        """Get the photolysis reaction ``name``.

        Raises
        ------
        KeyError
            Raises if ``name`` is not available to the model.
        """
        try:
            return self.catalog[name]
        except KeyError:
            msg = f"Unknown photolysis reaction '{name}'. Available: {', '.join(self.catalog)}"
            raise KeyError(msg) from None

    def j_value(
        self,
        name: str,
        T: npt.ArrayLike,
        latitude: npt.ArrayLike,
        longitude: npt.ArrayLike,
        unix_time: npt.ArrayLike,
    ) -> float | npt.NDArray[np.float64]:
        """Calculate the photolysis rate of reaction ``name`` using the model parameters.

        Parameters
        ----------
        name : str
            Photolysis reaction key
        T : npt.ArrayLike
            Temperature, [:math:`K`]
        latitude, longitude : npt.ArrayLike
            Position, [:math:`\\deg`]
        unix_time : npt.ArrayLike
            Start of the averaging window, seconds since the unix epoch

        Returns
        -------
        float | npt.NDArray[np.float64]
            Photolysis rate constant, [:math:`s^{-1}`]
        """
        species = self.get_species(name)

        window = self.params["averaging_window"] / np.timedelta64(1, "s")
        t1 = np.asarray(unix_time, dtype=np.float64) + window if window > 0.0 else None

        return j_mean(
            species.cross_section,
            species.quantum_yield,
            T,
            latitude,
            longitude,
            unix_time,
            t1,
            max_actinic_flux=self.params["max_actinic_flux"],
            n_samples=self.params["n_samples"],
        )

    def eval(self, source: xr.Dataset | None = None, **params: Any) -> xr.Dataset:
        """Evaluate photolysis rate constants over ``source``.

        Parameters
        ----------
        source : xr.Dataset
            Dataset with ``air_temperature``, ``latitude``, ``longitude`` and ``time``
            variables or coordinates. Variables are broadcast against each other.
        **params : Any
            Overwrite model parameters before eval

        Returns
        -------
        xr.Dataset
            ``source`` with one ``j_<name>`` variable per photolysis reaction

        Raises
        ------
        KeyError
            Raises if ``source`` is missing a required variable.
        DomainError
            Raises if any ``air_temperature <= 0``.
        """
        self.update_params(params)
        self.set_source(source)
        self.require_source_vars("air_temperature", "latitude", "longitude", "time")

        T, latitude, longitude, time = xr.broadcast(
            self.source["air_temperature"],
            self.source["latitude"],
            self.source["longitude"],
            self.source["time"],
        )
        unix_time = units.datetime64_to_unix(time.values)

        for name in self.params["species"]:
            j = self.j_value(name, T.values, latitude.values, longitude.values, unix_time)
            self.source[f"j_{name}"] = xr.DataArray(
                np.asarray(j),
                dims=T.dims,
                coords=T.coords,
                attrs={"units": "s-1", "long_name": f"Photolysis rate constant of {name}"},
            )

        logger.debug("Evaluated %s photolysis rates", len(self.params["species"]))
        return self.source
