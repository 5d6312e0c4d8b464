"""Pressure dependent (third body) rate coefficients."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics.rate_laws import (
    arrhenius,
    require_nonnegative_number_density,
    require_positive_temperature,
)
from pygaschem.physics import constants
from pygaschem.utils.types import ArrayScalarLike, as_scalar_if_0d


def _require_broadening_factor(fv: npt.ArrayLike, function: str) -> None:
    fv_arr = np.asarray(fv)
    if np.any((fv_arr <= 0.0) | (fv_arr > 1.0)):
        raise DomainError("falloff factor must be in (0, 1]", function, fv=fv)


def troe_falloff(
    k0: ArrayScalarLike, kinf: ArrayScalarLike, fc: float = constants.fv_default
) -> ArrayScalarLike:
    r"""Blend a low pressure and a high pressure limit rate.

    Parameters
    ----------
    k0 : ArrayScalarLike
        Low pressure limit, already multiplied by the number density
    kinf : ArrayScalarLike
        High pressure limit
    fc : float, optional
        Broadening factor of the falloff curve

    Returns
    -------
    ArrayScalarLike
        Effective rate coefficient. Where ``kinf == 0``, ``k0`` is returned.

    Notes
    -----
    With :math:`x = k_{0} / k_{\infty}`,

    .. math:: k = \frac{k_{0}}{1 + x} F_{c}^{1 / (1 + \log_{10}(x)^{2})}
    """
    k0 = np.asarray(k0, dtype=np.float64)
    kinf = np.asarray(kinf, dtype=np.float64)

    # log10(0) is -inf at zero density, and x is inf when kinf vanishes
    with np.errstate(divide="ignore", invalid="ignore"):
        x = k0 / kinf
        blog = np.log10(x)
        k = k0 / (1.0 + x) * fc ** (1.0 / (1.0 + blog * blog))

    return as_scalar_if_0d(np.where(kinf == 0.0, k0, k))


def arr_3rdbody(
    a0_lo: float,
    b0_lo: float,
    c0_lo: float,
    a0_hi: float,
    b0_hi: float,
    c0_hi: float,
    fv: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
) -> ArrayScalarLike:
    """Calculate the effective rate of a termolecular reaction in the falloff regime.

    Parameters
    ----------
    a0_lo, b0_lo, c0_lo : float
        Arrhenius coefficients of the low pressure limit, [:math:`cm^{6} \\ s^{-1}`]
    a0_hi, b0_hi, c0_hi : float
        Arrhenius coefficients of the high pressure limit, [:math:`cm^{3} \\ s^{-1}`]
    fv : float
        Falloff broadening factor, in (0, 1]. Usually 0.6, see
        Atkinson et al. (1992), J. Phys. Chem. Ref. Data 21, p. 1145.
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Effective bimolecular rate coefficient, [:math:`cm^{3} \\ s^{-1}`]

    Raises
    ------
    DomainError
        Raises if ``T <= 0``, ``num_density < 0`` or ``fv`` is outside (0, 1].
    """
    require_positive_temperature(T, "arr_3rdbody")
    require_nonnegative_number_density(num_density, "arr_3rdbody")
    _require_broadening_factor(fv, "arr_3rdbody")

    k_low = arrhenius(a0_lo, b0_lo, c0_lo, T) * num_density
    k_high = arrhenius(a0_hi, b0_hi, c0_hi, T)
    return troe_falloff(k_low, k_high, fv)


def _pan_falloff(k0: ArrayScalarLike, k1: ArrayScalarLike, cf: float) -> ArrayScalarLike:
    """IUPAC falloff with the width term ``N_c = 0.75 - 1.27 log10(F_c)``."""
    log_cf = np.log10(cf)
    nc = 0.75 - 1.27 * log_cf
    with np.errstate(divide="ignore", invalid="ignore"):
        f = 10.0 ** (log_cf / (1.0 + (np.log10(k0 / k1) / nc) ** 2))
        k = k0 * k1 * f / (k0 + k1)

    # No third body, no association
    return as_scalar_if_0d(np.where(k0 == 0.0, 0.0, k))


def rate_PAN_abab(
    a0: float,
    b0: float,
    a1: float,
    b1: float,
    cf: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
) -> ArrayScalarLike:
    r"""Calculate the falloff rate of the PAN family with exponential limits.

    Both limits have the form :math:`a \exp(b / T)`.

    Parameters
    ----------
    a0, b0 : float
        Low pressure limit coefficients
    a1, b1 : float
        High pressure limit coefficients
    cf : float
        Broadening factor :math:`F_{c}`
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient
    """
    require_positive_temperature(T, "rate_PAN_abab")
    require_nonnegative_number_density(num_density, "rate_PAN_abab")

    k0 = a0 * np.exp(b0 / T) * num_density
    k1 = a1 * np.exp(b1 / T)
    return _pan_falloff(k0, k1, cf)


def rate_PAN_acac(
    a0: float,
    c0: float,
    a1: float,
    c1: float,
    cf: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
    T_ref: float = constants.T_ref_arrhenius,
) -> ArrayScalarLike:
    r"""Calculate the falloff rate of the PAN family with power law limits.

    Both limits have the form :math:`a (T / 300)^{c}`.

    Parameters
    ----------
    a0, c0 : float
        Low pressure limit coefficients
    a1, c1 : float
        High pressure limit coefficients
    cf : float
        Broadening factor :math:`F_{c}`
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \ cm^{-3}`]
    T_ref : float, optional
        Reference temperature of the power law, [:math:`K`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient
    """
    require_positive_temperature(T, "rate_PAN_acac")
    require_nonnegative_number_density(num_density, "rate_PAN_acac")

    k0 = a0 * (T / T_ref) ** c0 * num_density
    k1 = a1 * (T / T_ref) ** c1
    return _pan_falloff(k0, k1, cf)
