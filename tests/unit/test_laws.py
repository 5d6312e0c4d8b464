"""Test rate law variants and their dispatch."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics import (
    AmbientState,
    Arrhenius,
    ArrheniusCoefficients,
    Branching,
    Constant,
    Equilibrium,
    EquilibriumCoefficients,
    Falloff,
    FalloffParameters,
    KineticsParams,
    PANFalloffParameters,
    Photolysis,
    arr_3rdbody,
    branching,
    eq_const,
    evaluate_rate,
    rate_PAN_abab,
)
from pygaschem.models.kinetics import laws
from pygaschem.physics import thermo

NO2_OH = FalloffParameters(
    low=ArrheniusCoefficients(1.8e-30, -3.0), high=ArrheniusCoefficients(2.8e-11)
)


def test_ambient_state_number_density() -> None:
    """The number density of air is derived from pressure."""
    state = AmbientState(T=298.0, pressure=101325.0)
    assert state.num_density == pytest.approx(thermo.number_density(298.0, 101325.0))
    assert state.num_density == pytest.approx(2.4627e19, rel=1e-3)

    # Explicit number density wins
    state = AmbientState(T=298.0, pressure=101325.0, num_density=1.0e19)
    assert state.num_density == 1.0e19


def test_ambient_state_validation() -> None:
    """Nonphysical ambient states are rejected on construction."""
    with pytest.raises(DomainError, match="AmbientState: temperature must be positive"):
        AmbientState(T=np.array([250.0, -1.0]))
    with pytest.raises(DomainError, match="AmbientState: number density"):
        AmbientState(T=250.0, num_density=-1.0)

    state = AmbientState(T=250.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.T = 300.0  # type: ignore[misc]


def test_constant(surface_state: AmbientState) -> None:
    """Constant rates ignore the ambient state."""
    assert Constant(1.8e-12).evaluate(surface_state) == 1.8e-12
    assert evaluate_rate(Constant(0.0), AmbientState(T=200.0)) == 0.0

    with pytest.raises(DomainError, match="Constant"):
        Constant(-1.0e-12)


def test_arrhenius(surface_state: AmbientState) -> None:
    """Arrhenius laws need temperature only."""
    law = Arrhenius(ArrheniusCoefficients(1.7e-12, 0.0, -940.0))
    assert law.kind == "arrhenius"
    assert law.evaluate(surface_state) == pytest.approx(1.7e-12 * np.exp(-940.0 / 298.0))
    assert law.evaluate(AmbientState(T=298.0)) == law.evaluate(surface_state)

    # Reference temperature of the exponent term
    law = Arrhenius(ArrheniusCoefficients(1.0e-12, 2.0))
    k = law.evaluate(AmbientState(T=298.0), KineticsParams(T_ref=298.0))
    assert k == pytest.approx(1.0e-12)

    with pytest.raises(DomainError, match="pre-exponential"):
        ArrheniusCoefficients(-1.0e-12)


def test_falloff_default_broadening_factor(surface_state: AmbientState) -> None:
    """Falloff laws without their own factor use the kinetics constants."""
    law = Falloff(NO2_OH)
    M = surface_state.num_density

    k = law.evaluate(surface_state)
    assert k == pytest.approx(arr_3rdbody(1.8e-30, -3.0, 0.0, 2.8e-11, 0.0, 0.0, 0.6, 298.0, M))

    k = law.evaluate(surface_state, KineticsParams(fv=0.45))
    assert k == pytest.approx(arr_3rdbody(1.8e-30, -3.0, 0.0, 2.8e-11, 0.0, 0.0, 0.45, 298.0, M))

    # Own factor wins
    law = Falloff(dataclasses.replace(NO2_OH, fv=0.3))
    k = law.evaluate(surface_state, KineticsParams(fv=0.45))
    assert k == pytest.approx(arr_3rdbody(1.8e-30, -3.0, 0.0, 2.8e-11, 0.0, 0.0, 0.3, 298.0, M))


def test_falloff_requires_number_density() -> None:
    """Pressure dependent laws need the number density."""
    with pytest.raises(ValueError, match="num_density"):
        Falloff(NO2_OH).evaluate(AmbientState(T=298.0))

    with pytest.raises(DomainError, match="falloff factor"):
        dataclasses.replace(NO2_OH, fv=1.2)


def test_pan_falloff(surface_state: AmbientState) -> None:
    """PAN falloff parameters dispatch on their form."""
    params = PANFalloffParameters(9.7e-29, 0.0, 9.3e-12, 0.0, 0.6)
    k = Falloff(params).evaluate(surface_state)
    M = surface_state.num_density
    assert k == pytest.approx(rate_PAN_abab(9.7e-29, 0.0, 9.3e-12, 0.0, 0.6, 298.0, M))

    with pytest.raises(ValueError, match="Unknown PAN falloff form"):
        PANFalloffParameters(9.7e-29, 0.0, 9.3e-12, 0.0, 0.6, form="troe")
    with pytest.raises(DomainError, match="broadening factor"):
        PANFalloffParameters(9.7e-29, 0.0, 9.3e-12, 0.0, 1.0)


def test_equilibrium(surface_state: AmbientState) -> None:
    """Equilibrium laws return the decomposition rate."""
    params = EquilibriumCoefficients(9.0e-29, 14000.0, 9.7e-29, -5.6, 9.3e-12, -1.5)
    k = Equilibrium(params).evaluate(surface_state)
    M = surface_state.num_density
    expected = eq_const(9.0e-29, 14000.0, 9.7e-29, -5.6, 9.3e-12, -1.5, 0.6, 298.0, M)
    assert k == pytest.approx(expected)

    with pytest.raises(DomainError, match="equilibrium constant must be positive"):
        EquilibriumCoefficients(0.0, 14000.0, 9.7e-29, -5.6, 9.3e-12, -1.5)


def test_branching_families(surface_state: AmbientState) -> None:
    """Branching laws evaluate their family correlation."""
    law = Branching("OHCO")
    assert law.evaluate(surface_state) == pytest.approx(
        branching.rate_OHCO(298.0, surface_state.num_density)
    )

    params = laws.TBranchParams(
        ArrheniusCoefficients(3.1e-12, 0.0, 340.0), ArrheniusCoefficients(0.73, 0.0, -280.0)
    )
    k_a = Branching("TBRANCH", params).evaluate(surface_state)
    k_b = Branching("TBRANCH", dataclasses.replace(params, channel="b")).evaluate(surface_state)
    assert k_a + k_b == pytest.approx(3.1e-12 * np.exp(340.0 / 298.0))

    law = Branching("HO2HO2", laws.TwoTermParams(3.0e-13, 460.0, 2.1e-33, 920.0))
    k = law.evaluate(surface_state)
    expected = branching.rate_HO2HO2(
        3.0e-13, 460.0, 2.1e-33, 920.0, 298.0, surface_state.num_density, 4.0e17
    )
    assert k == pytest.approx(expected)
    assert law.evaluate(surface_state, KineticsParams(h2o_enhancement=0.0)) < k


def test_branching_kinetics_constants(surface_state: AmbientState) -> None:
    """Branching families read their constants from the kinetics parameters."""
    law = Branching("RO2NO_a1", laws.RO2NOParams(2.8e-12, 300.0))
    k = law.evaluate(surface_state)
    assert k == pytest.approx(2.8e-12 * np.exp(300.0 / 298.0) * 3.0e-4)

    k = law.evaluate(surface_state, KineticsParams(methyl_nitrate_yield=1.0e-3))
    assert k == pytest.approx(2.8e-12 * np.exp(300.0 / 298.0) * 1.0e-3)

    with pytest.raises(DomainError, match="carbon number"):
        laws.RO2NOParams(2.6e-12, 365.0, 0.5)


def test_branching_validation() -> None:
    """Branching laws check their family and parameter struct."""
    with pytest.raises(KeyError, match="Unknown branching family 'FOO'"):
        Branching("FOO")
    with pytest.raises(TypeError, match="expects TwoTermParams"):
        Branching("HO2HO2", laws.FractionParams(8.0e-12))
    with pytest.raises(TypeError, match="expects RO2NOParams"):
        Branching("RO2NO_a2")
    with pytest.raises(ValueError, match="Unknown branching channel"):
        laws.TBranchParams(ArrheniusCoefficients(1.0), ArrheniusCoefficients(1.0), "c")


def test_branching_requires_state_fields() -> None:
    """Missing ambient fields are named in the error."""
    law = Branching("HO2HO2", laws.TwoTermParams(3.0e-13, 460.0, 2.1e-33, 920.0))
    with pytest.raises(ValueError, match="HO2HO2.*H2O"):
        law.evaluate(AmbientState(T=298.0, num_density=2.46e19))
    with pytest.raises(ValueError, match="num_density, H2O"):
        law.evaluate(AmbientState(T=298.0))

    # Temperature only
    assert Branching("GLYCOH_a", laws.FractionParams(8.0e-12)).evaluate(AmbientState(T=298.0)) > 0


def test_photolysis_precomputed(surface_state: AmbientState) -> None:
    """Precomputed J-values are scaled."""
    state = dataclasses.replace(surface_state, j_values={"NO2": 8.0e-3})
    assert Photolysis("NO2").evaluate(state) == pytest.approx(8.0e-3)
    assert Photolysis("NO2", scale=0.5).evaluate(state) == pytest.approx(4.0e-3)


def test_photolysis_instantaneous(surface_state: AmbientState, equinox_midnight: float) -> None:
    """J-values are computed at the ambient position when not precomputed."""
    j = Photolysis("NO2").evaluate(surface_state)
    assert 1.0e-3 < j < 5.0e-2

    state = dataclasses.replace(surface_state, unix_time=equinox_midnight)
    assert Photolysis("NO2").evaluate(state) == 0.0

    with pytest.raises(ValueError, match="latitude, longitude, unix_time"):
        Photolysis("NO2").evaluate(AmbientState(T=298.0))
    with pytest.raises(KeyError, match="No cross sections"):
        Photolysis("HNO3").evaluate(surface_state)


def test_evaluate_rate_unknown_law(surface_state: AmbientState) -> None:
    """Only rate law variants are dispatched."""
    with pytest.raises(TypeError, match="Unknown rate law"):
        evaluate_rate(object(), surface_state)  # type: ignore[arg-type]


def test_vectorized_state() -> None:
    """Rate laws broadcast over array valued ambient states."""
    T = np.array([[220.0, 250.0], [280.0, 300.0]])
    state = AmbientState(T=T, pressure=np.array([[25000.0], [100000.0]]))
    assert state.num_density.shape == (2, 2)

    k = Falloff(NO2_OH).evaluate(state)
    assert k.shape == (2, 2)
    assert np.all(k > 0.0)

    k = Constant(1.0e-12).evaluate(state)
    assert k == 1.0e-12


@pytest.mark.parametrize(
    "kwargs",
    [{"T_ref": 0.0}, {"o2_fraction": 1.5}, {"fv": 0.0}, {"methyl_nitrate_yield": -0.1}],
)
def test_kinetics_params_validation(kwargs: dict[str, float]) -> None:
    """Kinetics constants are validated on construction."""
    with pytest.raises(DomainError, match="KineticsParams"):
        KineticsParams(**kwargs)
