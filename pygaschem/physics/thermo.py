"""Thermodynamic relationships."""

from __future__ import annotations

from pygaschem.physics import constants
from pygaschem.utils.types import ArrayScalarLike


def rho_d(T: ArrayScalarLike, p: ArrayScalarLike) -> ArrayScalarLike:
    r"""Calculate air density for (T, p) assuming dry air.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    p : ArrayScalarLike
        Pressure, [:math:`Pa`]

    Returns
    -------
    ArrayScalarLike
        Air density of dry air, [:math:`kg \ m^{-3}`]
    """
    return p / (constants.R_d * T)


def number_density(T: ArrayScalarLike, p: ArrayScalarLike) -> ArrayScalarLike:
    r"""Calculate the number density of air molecules for (T, p).

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    p : ArrayScalarLike
        Pressure, [:math:`Pa`]

    Returns
    -------
    ArrayScalarLike
        Number density of air, [:math:`molecules \ cm^{-3}`]

    Notes
    -----
    Uses the dry air density :func:`rho_d`, so that

    .. math:: M = \frac{N_A}{M_d} \rho_d \times 10^{-6}
    """
    return (constants.N_A / constants.M_d) * rho_d(T, p) * 1e-6
