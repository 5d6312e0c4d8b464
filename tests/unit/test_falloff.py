"""Test pygaschem.models.kinetics.falloff module."""

from __future__ import annotations

import numpy as np
import pytest

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics import falloff, rate_laws

# NO2 + OH {+M} -> HNO3 {+M}
NO2_OH = (1.8e-30, -3.0, 0.0, 2.8e-11, 0.0, 0.0)


def test_low_pressure_limit() -> None:
    """The rate tends to k_low [M] as [M] -> 0."""
    M = 1.0e3
    k = falloff.arr_3rdbody(*NO2_OH, 0.6, 298.0, M)
    k_low = rate_laws.arrhenius(1.8e-30, -3.0, 0.0, 298.0) * M
    assert k == pytest.approx(k_low, rel=5e-3)
    assert k < k_low


def test_zero_number_density() -> None:
    """No third body, no reaction."""
    k = falloff.arr_3rdbody(*NO2_OH, 0.6, 298.0, 0.0)
    assert k == 0.0
    assert isinstance(k, float)


def test_high_pressure_limit() -> None:
    """The rate tends to k_high as [M] grows."""
    k = falloff.arr_3rdbody(*NO2_OH, 0.6, 298.0, 1.0e30)
    assert k == pytest.approx(2.8e-11, rel=5e-3)


def test_surface_rate() -> None:
    """The surface rate lies between the limits and grows with pressure."""
    M = np.array([1.0e17, 1.0e18, 2.46e19])
    k = falloff.arr_3rdbody(*NO2_OH, 0.6, 298.0, M)
    assert k.shape == (3,)
    assert np.all(np.diff(k) > 0.0)
    assert np.all(k < 2.8e-11)
    assert k[-1] == pytest.approx(1.1e-11, rel=0.2)


def test_lindemann_limit() -> None:
    """With fv = 1 the Troe expression reduces to Lindemann-Hinshelwood."""
    M = 2.46e19
    k = falloff.arr_3rdbody(*NO2_OH, 1.0, 298.0, M)
    k0 = rate_laws.arrhenius(1.8e-30, -3.0, 0.0, 298.0) * M
    kinf = 2.8e-11
    assert k == pytest.approx(k0 * kinf / (k0 + kinf), rel=1e-12)


def test_zero_high_pressure_limit() -> None:
    """A vanishing high pressure limit returns the low pressure rate."""
    M = 2.46e19
    k = falloff.arr_3rdbody(1.8e-30, -3.0, 0.0, 0.0, 0.0, 0.0, 0.6, 298.0, M)
    assert k == pytest.approx(rate_laws.arrhenius(1.8e-30, -3.0, 0.0, 298.0) * M, rel=1e-14)


def test_troe_falloff_arrays() -> None:
    """Check troe_falloff broadcasting and the kinf == 0 branch."""
    k0 = np.array([1.0e-12, 1.0e-12, 0.0])
    kinf = np.array([1.0e-12, 0.0, 1.0e-12])
    k = falloff.troe_falloff(k0, kinf, 0.6)
    np.testing.assert_allclose(k, [0.5e-12 * 0.6, 1.0e-12, 0.0])


def test_negative_number_density() -> None:
    """Negative number density is rejected."""
    with pytest.raises(DomainError, match="arr_3rdbody: number density must be non-negative"):
        falloff.arr_3rdbody(*NO2_OH, 0.6, 298.0, -1.0)


@pytest.mark.parametrize("fv", [0.0, -0.1, 1.5])
def test_broadening_factor_out_of_range(fv: float) -> None:
    """The broadening factor must be in (0, 1]."""
    with pytest.raises(DomainError, match="falloff factor"):
        falloff.arr_3rdbody(*NO2_OH, fv, 298.0, 2.46e19)


def test_nonpositive_temperature() -> None:
    """Non-positive temperature is rejected."""
    with pytest.raises(DomainError, match="arr_3rdbody: temperature must be positive"):
        falloff.arr_3rdbody(*NO2_OH, 0.6, 0.0, 2.46e19)


def test_pan_formation() -> None:
    """Check MCO3 + NO2 {+M} -> PAN in both PAN falloff forms."""
    T = 298.0
    k = falloff.rate_PAN_acac(9.7e-29, -5.6, 9.3e-12, -1.5, 0.6, T, 2.46e19)
    assert 0.0 < k < 9.3e-12 * (T / 300.0) ** -1.5
    assert k == pytest.approx(8.7e-12, rel=0.05)

    # High pressure limit
    k_hi = falloff.rate_PAN_acac(9.7e-29, -5.6, 9.3e-12, -1.5, 0.6, T, 1.0e35)
    assert k_hi == pytest.approx(9.3e-12 * (T / 300.0) ** -1.5, rel=5e-3)

    # Same limits expressed as exponentials at T = 300 K
    k_abab = falloff.rate_PAN_abab(9.7e-29, 0.0, 9.3e-12, 0.0, 0.6, 300.0, 2.46e19)
    k_acac = falloff.rate_PAN_acac(9.7e-29, -5.6, 9.3e-12, -1.5, 0.6, 300.0, 2.46e19)
    assert k_abab == pytest.approx(k_acac, rel=1e-12)


def test_pan_zero_number_density() -> None:
    """PAN association vanishes without a third body."""
    assert falloff.rate_PAN_abab(9.7e-29, 0.0, 9.3e-12, 0.0, 0.6, 298.0, 0.0) == 0.0
    k = falloff.rate_PAN_acac(9.7e-29, -5.6, 9.3e-12, -1.5, 0.6, 298.0, np.array([0.0, 1.0e19]))
    assert k[0] == 0.0
    assert k[1] > 0.0

    with pytest.raises(DomainError, match="rate_PAN_acac"):
        falloff.rate_PAN_acac(9.7e-29, -5.6, 9.3e-12, -1.5, 0.6, 298.0, -1.0)
