"""Test pygaschem.models.kinetics.equilibrium module."""

from __future__ import annotations

import numpy as np
import pytest

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics import equilibrium, falloff

# PAN = MCO3 + NO2
PAN_KEQ = (9.0e-29, 14000.0)
PAN_ASSOC = (9.7e-29, -5.6, 9.3e-12, -1.5)


@pytest.mark.parametrize("T", np.linspace(200.0, 320.0, 7))
def test_detailed_balance(T: float) -> None:
    """The reverse rate times the equilibrium constant is the forward rate."""
    M = 2.46e19
    k_rev = equilibrium.eq_const(*PAN_KEQ, *PAN_ASSOC, 0.3, T, M)

    a1, b1, a2, b2 = PAN_ASSOC
    k_fwd = falloff.arr_3rdbody(a1, b1, 0.0, a2, b2, 0.0, 0.3, T, M)
    k_eq = equilibrium.equilibrium_constant(*PAN_KEQ, T)
    assert k_rev * k_eq == pytest.approx(k_fwd, rel=1e-12)


def test_pan_thermal_decomposition() -> None:
    """PAN lives about an hour at the surface in summer and much longer when cold."""
    k_warm = equilibrium.eq_const(*PAN_KEQ, *PAN_ASSOC, 0.6, 298.0, 2.46e19)
    assert 1.0e-4 < k_warm < 1.0e-3

    k_cold = equilibrium.eq_const(*PAN_KEQ, *PAN_ASSOC, 0.6, 250.0, 2.9e19)
    assert k_cold < 1.0e-2 * k_warm


def test_vectorized() -> None:
    """Arrays in, arrays out."""
    T = np.array([250.0, 275.0, 300.0])
    k = equilibrium.eq_const(*PAN_KEQ, *PAN_ASSOC, 0.6, T, 2.46e19)
    assert k.shape == (3,)
    assert np.all(np.diff(k) > 0.0)


def test_equilibrium_constant_nonpositive() -> None:
    """A non-positive equilibrium constant is rejected."""
    with pytest.raises(DomainError, match="eq_const: equilibrium constant must be positive"):
        equilibrium.equilibrium_constant(-1.0e-27, 0.0, 298.0)

    # Underflow to zero
    with pytest.raises(DomainError, match="eq_const"):
        equilibrium.eq_const(1.0e-27, -1.0e6, *PAN_ASSOC, 0.6, 298.0, 2.46e19)


def test_invalid_state() -> None:
    """Temperature and number density are validated."""
    with pytest.raises(DomainError, match="temperature must be positive"):
        equilibrium.eq_const(*PAN_KEQ, *PAN_ASSOC, 0.6, -5.0, 2.46e19)
    with pytest.raises(DomainError, match="number density must be non-negative"):
        equilibrium.eq_const(*PAN_KEQ, *PAN_ASSOC, 0.6, 298.0, -1.0)
