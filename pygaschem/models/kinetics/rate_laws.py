"""Arrhenius-type rate coefficient laws.

All rate laws take reaction-specific coefficients first and the ambient
temperature ``T`` (and number density, where needed) last. Each law is a pure
function vectorised over numpy arrays: python floats in, python floats out.

The temperature exponent is expressed relative to :math:`T / 300 K`. Mechanisms
tabulated with the GEOS-Chem convention :math:`(300 / T)^{b}` must negate ``b``.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from pygaschem.core.exceptions import DomainError
from pygaschem.physics import constants
from pygaschem.utils.types import ArrayScalarLike

# ----------
# Validation
# ----------


def require_positive_temperature(T: npt.ArrayLike, function: str) -> None:
    """Raise a :class:`DomainError` unless every temperature is strictly positive.

    Parameters
    ----------
    T : npt.ArrayLike
        Temperature, [:math:`K`]
    function : str
        Name of the calling rate law, reported in the error

    Raises
    ------
    DomainError
        Raises if any ``T <= 0``
    """
    if np.any(np.asarray(T) <= 0.0):
        raise DomainError("temperature must be positive", function, T=T)


def require_nonnegative_number_density(num_density: npt.ArrayLike, function: str) -> None:
    """Raise a :class:`DomainError` if any number density is negative.

    Parameters
    ----------
    num_density : npt.ArrayLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]
    function : str
        Name of the calling rate law, reported in the error

    Raises
    ------
    DomainError
        Raises if any ``num_density < 0``
    """
    if np.any(np.asarray(num_density) < 0.0):
        raise DomainError("number density must be non-negative", function, num_density=num_density)


# ---------
# Rate laws
# ---------


def constant_k(value: float, *state: object) -> float:
    """Return ``value`` regardless of the ambient state.

    Lets temperature independent reactions share the calling convention of
    the other rate laws.

    Parameters
    ----------
    value : float
        Rate coefficient
    *state : object
        Ambient state, ignored

    Returns
    -------
    float
        ``value``
    """
    return value


def arrhenius(
    a0: float,
    b0: float,
    c0: float,
    T: ArrayScalarLike,
    T_ref: float = constants.T_ref_arrhenius,
) -> ArrayScalarLike:
    r"""Calculate the Arrhenius rate coefficient.

    Parameters
    ----------
    a0 : float
        Pre-exponential factor
    b0 : float
        Temperature exponent
    c0 : float
        Activation term, :math:`-E_{a} / R`, [:math:`K`]
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    T_ref : float, optional
        Reference temperature of the exponent term, [:math:`K`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient, in the units of ``a0``

    Raises
    ------
    DomainError
        Raises if any ``T <= 0``

    Notes
    -----
    .. math:: k = a_{0} \exp(c_{0} / T) (T / T_{ref})^{b_{0}}
    """
    require_positive_temperature(T, "arrhenius")
    return a0 * np.exp(c0 / T) * (T / T_ref) ** b0


def arrplus(
    a0: float,
    b0: float,
    c0: float,
    d0: float,
    e0: float,
    T: ArrayScalarLike,
    T_ref: float = constants.T_ref_arrhenius,
) -> ArrayScalarLike:
    r"""Calculate the modified Arrhenius law with a linear temperature correction.

    Negative values are clipped to zero.

    Parameters
    ----------
    a0 : float
        Pre-exponential factor
    b0 : float
        Activation term, [:math:`K`]. Enters as :math:`\exp(-b_{0} / T)`.
    c0 : float
        Temperature exponent
    d0 : float
        Constant term of the correction factor
    e0 : float
        Linear term of the correction factor, [:math:`K^{-1}`]
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    T_ref : float, optional
        Reference temperature of the exponent term, [:math:`K`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient

    Notes
    -----
    .. math:: k = \max(a_{0} (d_{0} + e_{0} T) \exp(-b_{0} / T) (T / T_{ref})^{c_{0}}, 0)
    """
    require_positive_temperature(T, "arrplus")
    k = a0 * (d0 + T * e0) * np.exp(-b0 / T) * (T / T_ref) ** c0
    return np.maximum(k, 0.0)


def tunplus(
    a0: float, b0: float, c0: float, d0: float, e0: float, T: ArrayScalarLike
) -> ArrayScalarLike:
    r"""Calculate the rate of an H-shift isomerization with a tunneling correction.

    Used for the ``IHOO1`` and ``IHOO4`` isomerizations of isoprene peroxy radicals.

    Parameters
    ----------
    a0 : float
        Pre-exponential factor
    b0 : float
        Activation term, [:math:`K`]
    c0 : float
        Tunneling term, [:math:`K^{3}`]
    d0 : float
        Constant term of the correction factor
    e0 : float
        Linear term of the correction factor, [:math:`K^{-1}`]
    T : ArrayScalarLike
        Temperature, [:math:`K`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient, [:math:`s^{-1}`]

    Notes
    -----
    .. math:: k = \max(a_{0} (d_{0} + e_{0} T) \exp(b_{0} / T) \exp(c_{0} / T^{3}), 0)
    """
    require_positive_temperature(T, "tunplus")
    k = a0 * (d0 + T * e0) * np.exp(b0 / T) * np.exp(c0 / T**3)
    return np.maximum(k, 0.0)
