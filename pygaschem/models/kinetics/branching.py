"""Channel specific rate coefficients of the GEOS-Chem ``fullchem`` mechanism.

Each function is a closed form correlation fitted to a named family of
reactions. Coefficients follow the ``fullchem`` rate law tables, with the
temperature exponent convention of :func:`arrhenius`.

References
----------
- GEOS-Chem ``KPP/fullchem/fullchem_RateLawFuncs.F90``
"""

from __future__ import annotations

import numpy as np

from pygaschem.models.kinetics.falloff import troe_falloff
from pygaschem.models.kinetics.rate_laws import (
    arrhenius,
    require_nonnegative_number_density,
    require_positive_temperature,
)
from pygaschem.physics import constants
from pygaschem.utils.types import ArrayScalarLike

#: Yield of methyl nitrate from MO2 + NO, upper limit of Flocke et al. (1998)
METHYL_NITRATE_YIELD = 3.0e-4

#: Water vapor enhancement of HO2 + HO2, [:math:`cm^{3}`]
HO2HO2_H2O_ENHANCEMENT = 1.4e-21

#: Temperature term of the water vapor enhancement of HO2 + HO2, [:math:`K`]
HO2HO2_H2O_ENHANCEMENT_T = 2200.0


def _check_state(
    function: str, T: ArrayScalarLike, num_density: ArrayScalarLike | None = None
) -> None:
    require_positive_temperature(T, function)
    if num_density is not None:
        require_nonnegative_number_density(num_density, function)


# -----------------
# Branching ratios
# -----------------


def tbranch_total(
    a0: float, b0: float, c0: float, T: ArrayScalarLike
) -> ArrayScalarLike:
    """Total rate of a reaction with a temperature dependent branching ratio."""
    return arrhenius(a0, b0, c0, T)


def tbranch(
    a0: float,
    b0: float,
    c0: float,
    a1: float,
    b1: float,
    c1: float,
    T: ArrayScalarLike,
) -> tuple[ArrayScalarLike, ArrayScalarLike]:
    r"""Split a total rate into two channels with a temperature dependent ratio.

    Parameters
    ----------
    a0, b0, c0 : float
        Arrhenius coefficients of the total rate :math:`k`
    a1, b1, c1 : float
        Arrhenius coefficients of the channel ratio :math:`r = k_{b} / k_{a}`
    T : ArrayScalarLike
        Temperature, [:math:`K`]

    Returns
    -------
    tuple[ArrayScalarLike, ArrayScalarLike]
        Channel rates :math:`(k_{a}, k_{b})` with :math:`k_{a} + k_{b} = k`

    Notes
    -----
    .. math::

        k_{a} = \frac{k}{1 + r}, \quad k_{b} = \frac{k r}{1 + r}
    """
    k_total = tbranch_total(a0, b0, c0, T)
    ratio = arrhenius(a1, b1, c1, T)
    k_a = k_total / (1.0 + ratio)
    return k_a, k_total - k_a


# ---------
# RO2 + NO
# ---------


def _alkyl_nitrate_yield(
    a1: float, T: ArrayScalarLike, num_density: ArrayScalarLike
) -> ArrayScalarLike:
    """Alkyl nitrate yield of RO2 + NO for ``a1`` carbon atoms (Carter and Atkinson, 1989)."""
    xxyn = 1.94e-22 * np.exp(0.97 * a1) * num_density
    yyyn = arrhenius(0.826, -8.1, 0.0, T)
    with np.errstate(divide="ignore"):
        aaa = np.log10(xxyn / yyyn)
    zzyn = 1.0 / (1.0 + aaa * aaa)
    rarb = (xxyn / (1.0 + xxyn / yyyn)) * 0.411**zzyn
    return rarb / (1.0 + rarb)


def rate_RO2NO_a1(
    a0: float,
    c0: float,
    T: ArrayScalarLike,
    methyl_nitrate_yield: float = METHYL_NITRATE_YIELD,
) -> ArrayScalarLike:
    """Nitrate forming channel of ``MO2 + NO = MENO3``.

    The Carter and Atkinson correlation does not apply to C1 peroxy radicals,
    a fixed yield is used instead.

    Parameters
    ----------
    a0, c0 : float
        Arrhenius coefficients of the total rate
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    methyl_nitrate_yield : float, optional
        Fraction of the total rate producing methyl nitrate

    Returns
    -------
    ArrayScalarLike
        Rate coefficient, [:math:`cm^{3} \\ s^{-1}`]
    """
    require_positive_temperature(T, "rate_RO2NO_a1")
    return a0 * np.exp(c0 / T) * methyl_nitrate_yield


def rate_RO2NO_b1(
    a0: float,
    c0: float,
    T: ArrayScalarLike,
    methyl_nitrate_yield: float = METHYL_NITRATE_YIELD,
) -> ArrayScalarLike:
    """Radical propagating channel of ``MO2 + NO = CH2O + NO2 + HO2``.

    See :func:`rate_RO2NO_a1`.
    """
    require_positive_temperature(T, "rate_RO2NO_b1")
    return a0 * np.exp(c0 / T) * (1.0 - methyl_nitrate_yield)


def rate_RO2NO_a2(
    a0: float, c0: float, a1: float, T: ArrayScalarLike, num_density: ArrayScalarLike
) -> ArrayScalarLike:
    """Nitrate forming channel of RO2 + NO for peroxy radicals with more than one carbon.

    Used for ``ETO2``, ``A3O2``, ``R4O2`` and ``B3O2`` + NO.

    Parameters
    ----------
    a0, c0 : float
        Arrhenius coefficients of the total rate
    a1 : float
        Carbon number of the peroxy radical. Must be greater than one.
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient, [:math:`cm^{3} \\ s^{-1}`]
    """
    _check_state("rate_RO2NO_a2", T, num_density)
    return arrhenius(a0, 0.0, c0, T) * _alkyl_nitrate_yield(a1, T, num_density)


def rate_RO2NO_b2(
    a0: float, c0: float, a1: float, T: ArrayScalarLike, num_density: ArrayScalarLike
) -> ArrayScalarLike:
    """Radical propagating channel of RO2 + NO. See :func:`rate_RO2NO_a2`."""
    _check_state("rate_RO2NO_b2", T, num_density)
    return arrhenius(a0, 0.0, c0, T) * (1.0 - _alkyl_nitrate_yield(a1, T, num_density))


def rate_RO2HO2(a0: float, c0: float, a1: float, T: ArrayScalarLike) -> ArrayScalarLike:
    """Carbon number dependence of RO2 + HO2.

    Used for ``A3O2``, ``PO2``, ``KO2``, ``B3O2`` and ``PRN1`` + HO2.
    ``a1`` is the carbon number of the peroxy radical.
    """
    require_positive_temperature(T, "rate_RO2HO2")
    return arrhenius(a0, 0.0, c0, T) * (1.0 - np.exp(-0.245 * a1))


# ----------------------------
# Isoprene peroxy radicals
# ----------------------------


def _rate_nitrate_branch(
    function: str,
    nitrate: bool,
    a0: float,
    b0: float,
    c0: float,
    n: float,
    x0: float,
    y0: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
) -> ArrayScalarLike:
    _check_state(function, T, num_density)

    k0 = 2.0e-22 * np.exp(n) * num_density
    k1 = 4.3e-1 * (T / 298.0) ** (-8.0)
    k2 = troe_falloff(k0, k1, 0.41)
    k3 = k2 / (k2 + c0) if nitrate else c0 / (k2 + c0)
    k = a0 * (x0 - T * y0) * np.exp(b0 / T) * k3
    return np.maximum(k, 0.0)


def rate_NIT(
    a0: float,
    b0: float,
    c0: float,
    n: float,
    x0: float,
    y0: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
) -> ArrayScalarLike:
    """Nitrate forming channel of isoprene RO2 + NO, e.g. ``IHOO1 + NO = IHN2``.

    Parameters
    ----------
    a0, b0 : float
        Arrhenius coefficients of the total rate
    c0 : float
        Nitrate branching ratio term
    n : float
        Number of heavy atoms of the peroxy radical
    x0, y0 : float
        Linear temperature correction
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient, clipped at zero
    """
    return _rate_nitrate_branch("rate_NIT", True, a0, b0, c0, n, x0, y0, T, num_density)


def rate_ALK(
    a0: float,
    b0: float,
    c0: float,
    n: float,
    x0: float,
    y0: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
) -> ArrayScalarLike:
    """Alkoxy forming channel of isoprene RO2 + NO, complement of :func:`rate_NIT`."""
    return _rate_nitrate_branch("rate_ALK", False, a0, b0, c0, n, x0, y0, T, num_density)


def _isoprene_shift_fraction(
    c0: float, d0: float, e0: float, f0: float, g0: float, T: ArrayScalarLike
) -> ArrayScalarLike:
    k0 = d0 * np.exp(e0 / T) * np.exp(1.0e8 / T**3)
    k1 = f0 * np.exp(g0 / T)
    return c0 * k0 / (k0 + k1)


def rate_ISO1(
    a0: float,
    b0: float,
    c0: float,
    d0: float,
    e0: float,
    f0: float,
    g0: float,
    T: ArrayScalarLike,
) -> ArrayScalarLike:
    """Rate of ``ISOP + OH = LISOPOH + IHOO1`` (and ``IHOO4``).

    ``d0, e0`` describe the 1,6 H-shift and ``f0, g0`` the competing O2 loss of the
    peroxy radical, ``c0`` scales the shifted fraction.
    """
    require_positive_temperature(T, "rate_ISO1")
    k2 = _isoprene_shift_fraction(c0, d0, e0, f0, g0, T)
    return a0 * np.exp(b0 / T) * (1.0 - k2)


def rate_ISO2(
    a0: float,
    b0: float,
    c0: float,
    d0: float,
    e0: float,
    f0: float,
    g0: float,
    T: ArrayScalarLike,
) -> ArrayScalarLike:
    """Rate of the H-shift channel of ISOP + OH, complement of :func:`rate_ISO1`."""
    require_positive_temperature(T, "rate_ISO2")
    k2 = _isoprene_shift_fraction(c0, d0, e0, f0, g0, T)
    return a0 * np.exp(b0 / T) * k2


def rate_EPO(
    a1: float, e1: float, m1: float, T: ArrayScalarLike, num_density: ArrayScalarLike
) -> ArrayScalarLike:
    """Rate of epoxide forming OH reactions, e.g. ``RIPA + OH`` and ``IEPOXA + OH``."""
    _check_state("rate_EPO", T, num_density)
    return a1 * np.exp(e1 / T) / (m1 * num_density + 1.0)


# -----------------------
# Oxygenated VOC + OH
# -----------------------


def _glycolaldehyde_fraction(T: ArrayScalarLike) -> ArrayScalarLike:
    return np.maximum(1.0 - 11.0729 * np.exp(-T / 73.0), 0.0)


def _hydroxyacetone_fraction(T: ArrayScalarLike) -> ArrayScalarLike:
    return np.maximum(1.0 - 23.7 * np.exp(-T / 60.0), 0.0)


def rate_GLYCOH_a(a0: float, T: ArrayScalarLike) -> ArrayScalarLike:
    """Abstraction channel of GLYC + OH."""
    require_positive_temperature(T, "rate_GLYCOH_a")
    return a0 * _glycolaldehyde_fraction(T)


def rate_GLYCOH_b(a0: float, T: ArrayScalarLike) -> ArrayScalarLike:
    """``GLYC + OH = HCOOH + OH + CO`` channel of GLYC + OH."""
    require_positive_temperature(T, "rate_GLYCOH_b")
    return a0 * (1.0 - _glycolaldehyde_fraction(T))


def rate_HACOH_a(a0: float, c0: float, T: ArrayScalarLike) -> ArrayScalarLike:
    """``HAC + OH = MGLY + HO2`` channel of HAC + OH."""
    require_positive_temperature(T, "rate_HACOH_a")
    return arrhenius(a0, 0.0, c0, T) * _hydroxyacetone_fraction(T)


def rate_HACOH_b(a0: float, c0: float, T: ArrayScalarLike) -> ArrayScalarLike:
    """Fragmentation channel of HAC + OH."""
    require_positive_temperature(T, "rate_HACOH_b")
    return arrhenius(a0, 0.0, c0, T) * (1.0 - _hydroxyacetone_fraction(T))


def rate_GLYXNO3(
    a0: float,
    c0: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
    o2_fraction: float = constants.o2_fraction,
) -> ArrayScalarLike:
    """Rate of the ``HO2 + 2CO`` channel of GLYX + NO3.

    :math:`k = k_{1} ([O_{2}] + 3.5 \\times 10^{18}) / (2 [O_{2}] + 3.5 \\times 10^{18})`
    """
    _check_state("rate_GLYXNO3", T, num_density)
    o2 = num_density * o2_fraction
    return arrhenius(a0, 0.0, c0, T) * (o2 + 3.5e18) / (2.0 * o2 + 3.5e18)


# ---------------------
# Inorganic and sulfur
# ---------------------


def rate_OHHNO3(
    a0: float,
    c0: float,
    a1: float,
    c1: float,
    a2: float,
    c2: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
) -> ArrayScalarLike:
    r"""Rate of ``HNO3 + OH = H2O + NO3`` and ``HONIT + OH = NO3 + HAC``.

    Notes
    -----
    .. math:: k = k_{0} + \frac{k_{2} [M]}{1 + k_{2} [M] / k_{1}}
    """
    _check_state("rate_OHHNO3", T, num_density)
    k0 = arrhenius(a0, 0.0, c0, T)
    k1 = arrhenius(a1, 0.0, c1, T)
    k2 = num_density * arrhenius(a2, 0.0, c2, T)
    return k0 + k2 / (1.0 + k2 / k1)


def rate_OHCO(T: ArrayScalarLike, num_density: ArrayScalarLike) -> ArrayScalarLike:
    """Rate of ``OH + CO = HO2 + CO2``.

    Sum of the association channel (falloff) and the chemically activated
    channel, JPL 15-10.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Rate coefficient, [:math:`cm^{3} \\ s^{-1}`]
    """
    _check_state("rate_OHCO", T, num_density)

    klo1 = arrhenius(5.9e-33, -1.0, 0.0, T)
    khi1 = arrhenius(1.1e-12, 1.3, 0.0, T)
    kco1 = troe_falloff(klo1 * num_density, khi1, constants.fv_default)

    # Activated channel is pressure independent at low pressure
    klo2 = arrhenius(1.5e-13, 0.0, 0.0, T)
    khi2 = arrhenius(2.1e9, 6.1, 0.0, T)
    xyrat2 = klo2 * num_density / khi2
    with np.errstate(divide="ignore"):
        blog2 = np.log10(xyrat2)
    kco2 = klo2 * constants.fv_default ** (1.0 / (1.0 + blog2 * blog2)) / (1.0 + xyrat2)
    return kco1 + kco2


def rate_DMSOH(
    a0: float,
    c0: float,
    a1: float,
    c1: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
    o2_fraction: float = constants.o2_fraction,
) -> ArrayScalarLike:
    """Rate of the addition channel of ``DMS + OH = 0.750SO2 + 0.250MSA + MO2``."""
    _check_state("rate_DMSOH", T, num_density)
    k0 = arrhenius(a0, 0.0, c0, T)
    k1 = arrhenius(a1, 0.0, c1, T)
    return (k0 * num_density * o2_fraction) / (1.0 + k1 * o2_fraction)


def rate_HO2HO2(
    a0: float,
    c0: float,
    a1: float,
    c1: float,
    T: ArrayScalarLike,
    num_density: ArrayScalarLike,
    H2O: ArrayScalarLike,
    h2o_enhancement: float = HO2HO2_H2O_ENHANCEMENT,
    h2o_enhancement_T: float = HO2HO2_H2O_ENHANCEMENT_T,
) -> ArrayScalarLike:
    """Rate of ``HO2 + HO2 = H2O2 + O2``, enhanced by water vapor.

    Parameters
    ----------
    a0, c0 : float
        Bimolecular channel
    a1, c1 : float
        Termolecular channel
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    num_density : ArrayScalarLike
        Number density of air, [:math:`molecules \\ cm^{-3}`]
    H2O : ArrayScalarLike
        Number density of water vapor, [:math:`molecules \\ cm^{-3}`]
    h2o_enhancement, h2o_enhancement_T : float, optional
        Coefficients of the water vapor enhancement factor

    Returns
    -------
    ArrayScalarLike
        Rate coefficient, [:math:`cm^{3} \\ s^{-1}`]
    """
    _check_state("rate_HO2HO2", T, num_density)
    k0 = arrhenius(a0, 0.0, c0, T)
    k1 = arrhenius(a1, 0.0, c1, T)
    enhancement = 1.0 + h2o_enhancement * H2O * np.exp(h2o_enhancement_T / T)
    return (k0 + k1 * num_density) * enhancement
