"""Reverse rates of reactions in thermal equilibrium."""

from __future__ import annotations

import numpy as np

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics.falloff import arr_3rdbody
from pygaschem.models.kinetics.rate_laws import arrhenius
from pygaschem.utils.types import ArrayScalarLike


def equilibrium_constant(a0: float, c0: float, T: ArrayScalarLike) -> ArrayScalarLike:
    """Calculate the equilibrium constant :math:`K_{eq} = a_{0} \\exp(c_{0} / T)`.

    Parameters
    ----------
    a0 : float
        Pre-exponential factor, [:math:`cm^{3}`]
    c0 : float
        Reaction enthalpy term, [:math:`K`]
    T : ArrayScalarLike
        Temperature, [:math:`K`]

    Returns
    -------
    ArrayScalarLike
        Equilibrium constant

    Raises
    ------
    DomainError
        Raises if ``T <= 0`` or if the constant is not strictly positive.
    """
    k_eq = arrhenius(a0, 0.0, c0, T)
    if np.any(np.asarray(k_eq) <= 0.0):
        raise DomainError("equilibrium constant must be positive", "eq_const", a0=a0, c0=c0, T=T)
    return k_eq


def eq_const(
    a0: float,
    c0: float,
    a1: float,
    b1: float,
    a2: float,
    b2: float,
    fv: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
) -> ArrayScalarLike:
    """Calculate the thermal decomposition rate of an equilibrium pair.

    Used for ``PAN = MCO3 + NO2``, ``PPN = RCO3 + NO2``, ``ClOO = Cl + O2``
    and ``Cl2O2 = 2ClO``. The association rate is a falloff law and the
    decomposition rate follows from :math:`k_{r} = k_{f} / K_{eq}`.

    Parameters
    ----------
    a0, c0 : float
        Coefficients of the equilibrium constant, see :func:`equilibrium_constant`
    a1, b1 : float
        Low pressure limit of the association rate
    a2, b2 : float
        High pressure limit of the association rate
    fv : float
        Falloff broadening factor
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Decomposition rate coefficient, [:math:`s^{-1}`]

    Raises
    ------
    DomainError
        Raises if ``T <= 0``, ``num_density < 0`` or :math:`K_{eq}(T) \\le 0`.
    """
    k_eq = equilibrium_constant(a0, c0, T)
    k_forward = arr_3rdbody(a1, b1, 0.0, a2, b2, 0.0, fv, T, num_density)
    return k_forward / k_eq
