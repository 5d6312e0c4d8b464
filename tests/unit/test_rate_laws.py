"""Test pygaschem.models.kinetics.rate_laws module."""

from __future__ import annotations

import numpy as np
import pytest

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics import rate_laws


def test_arrhenius_at_reference_temperature() -> None:
    """The exponent term vanishes at 300 K."""
    assert rate_laws.arrhenius(2.0e-12, 1.5, 0.0, 300.0) == pytest.approx(2.0e-12, rel=1e-14)


@pytest.mark.parametrize("T", [1.0, 150.0, 298.0, 1000.0])
def test_arrhenius_identity(T: float) -> None:
    """Without exponent and activation terms the rate is the pre-exponential factor."""
    assert rate_laws.arrhenius(4.8e-11, 0.0, 0.0, T) == 4.8e-11


def test_arrhenius_o3_oh() -> None:
    """Check O3 + OH at 298 K against the literal expression."""
    k = rate_laws.arrhenius(1.7e-12, 0.0, -940.0, 298.0)
    assert isinstance(k, float)
    assert k == pytest.approx(1.7e-12 * np.exp(-940.0 / 298.0), rel=1e-14)
    assert k == pytest.approx(7.253e-14, rel=1e-3)

    # Pseudo first order rate at 2.46e10 molecules cm-3 of OH
    expected = 1.7e-12 * np.exp(-940.0 / 298.0) * 2.46e10
    assert k * 2.46e10 == pytest.approx(expected, rel=1e-4)


def test_arrhenius_power_law_convention() -> None:
    """A negative exponent makes the rate grow as temperature drops."""
    k_cold = rate_laws.arrhenius(1.8e-30, -3.0, 0.0, 200.0)
    assert k_cold == pytest.approx(1.8e-30 * (300.0 / 200.0) ** 3, rel=1e-12)
    assert k_cold > rate_laws.arrhenius(1.8e-30, -3.0, 0.0, 300.0)


def test_arrhenius_vectorized() -> None:
    """Arrays in, arrays out."""
    T = np.array([200.0, 250.0, 300.0])
    k = rate_laws.arrhenius(3.0e-12, 0.0, -1500.0, T)
    assert isinstance(k, np.ndarray)
    assert k.shape == (3,)
    np.testing.assert_allclose(k, 3.0e-12 * np.exp(-1500.0 / T), rtol=1e-14)
    assert np.all(np.diff(k) > 0.0)


@pytest.mark.parametrize("T", [0.0, -10.0, np.array([250.0, 0.0])])
def test_arrhenius_nonpositive_temperature(T: float | np.ndarray) -> None:
    """Non-positive temperatures are rejected."""
    with pytest.raises(DomainError, match="arrhenius: temperature must be positive") as excinfo:
        rate_laws.arrhenius(1.0e-12, 0.0, 0.0, T)
    assert excinfo.value.function == "arrhenius"
    assert "T" in excinfo.value.inputs


def test_constant_k() -> None:
    """The ambient state is ignored."""
    assert rate_laws.constant_k(1.8e-12) == 1.8e-12
    assert rate_laws.constant_k(1.8e-12, 298.0, 2.46e19) == 1.8e-12


def test_arrplus() -> None:
    """Check the linear correction and the clip at zero."""
    # Reduces to a pure exponential with d0 = 1, e0 = 0
    k = rate_laws.arrplus(1.0e-11, 500.0, 0.0, 1.0, 0.0, 250.0)
    assert k == pytest.approx(1.0e-11 * np.exp(-2.0), rel=1e-14)

    k = rate_laws.arrplus(1.0e-11, 0.0, 0.0, 1.5, -0.002, 250.0)
    assert k == pytest.approx(1.0e-11, rel=1e-12)

    # Negative correction factor
    assert rate_laws.arrplus(1.0e-11, 0.0, 0.0, 1.0, -0.01, 200.0) == 0.0

    T = np.array([50.0, 150.0])
    k = rate_laws.arrplus(1.0e-11, 0.0, 0.0, 1.0, -0.01, T)
    np.testing.assert_allclose(k, [5.0e-12, 0.0])


def test_tunplus() -> None:
    """Check the tunneling correction and the clip at zero."""
    assert rate_laws.tunplus(2.0e10, 0.0, 0.0, 1.0, 0.0, 298.0) == pytest.approx(2.0e10)

    k = rate_laws.tunplus(5.05e15, -12200.0, 1.0e8, 1.0, 0.0, 298.0)
    expected = 5.05e15 * np.exp(-12200.0 / 298.0) * np.exp(1.0e8 / 298.0**3)
    assert k == pytest.approx(expected, rel=1e-12)

    assert rate_laws.tunplus(5.05e15, -12200.0, 1.0e8, -1.0, 0.0, 298.0) == 0.0

    with pytest.raises(DomainError, match="tunplus"):
        rate_laws.tunplus(5.05e15, -12200.0, 1.0e8, 1.0, 0.0, -1.0)


def test_require_nonnegative_number_density() -> None:
    """Zero number density is valid, negative is not."""
    rate_laws.require_nonnegative_number_density(0.0, "test")
    with pytest.raises(DomainError, match="test: number density must be non-negative"):
        rate_laws.require_nonnegative_number_density(np.array([1.0e19, -1.0]), "test")
