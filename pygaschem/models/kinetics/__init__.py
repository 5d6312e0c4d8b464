"""Gas-phase reaction rate coefficients."""

from pygaschem.models.kinetics.branching import (
    rate_ALK,
    rate_DMSOH,
    rate_EPO,
    rate_GLYCOH_a,
    rate_GLYCOH_b,
    rate_GLYXNO3,
    rate_HACOH_a,
    rate_HACOH_b,
    rate_HO2HO2,
    rate_ISO1,
    rate_ISO2,
    rate_NIT,
    rate_OHCO,
    rate_OHHNO3,
    rate_RO2HO2,
    rate_RO2NO_a1,
    rate_RO2NO_a2,
    rate_RO2NO_b1,
    rate_RO2NO_b2,
    tbranch,
    tbranch_total,
)
from pygaschem.models.kinetics.equilibrium import eq_const, equilibrium_constant
from pygaschem.models.kinetics.falloff import (
    arr_3rdbody,
    rate_PAN_abab,
    rate_PAN_acac,
    troe_falloff,
)
from pygaschem.models.kinetics.kinetics_params import KineticsParams
from pygaschem.models.kinetics.laws import (
    AmbientState,
    Arrhenius,
    ArrheniusCoefficients,
    Branching,
    Constant,
    Equilibrium,
    EquilibriumCoefficients,
    Falloff,
    FalloffParameters,
    PANFalloffParameters,
    Photolysis,
    RateLaw,
    evaluate_rate,
)
from pygaschem.models.kinetics.mechanism import Mechanism, MechanismParams, Reaction
from pygaschem.models.kinetics.rate_laws import arrhenius, arrplus, constant_k, tunplus
from pygaschem.models.kinetics.superfast import superfast_mechanism, superfast_reactions

__all__ = [
    "AmbientState",
    "Arrhenius",
    "ArrheniusCoefficients",
    "Branching",
    "Constant",
    "Equilibrium",
    "EquilibriumCoefficients",
    "Falloff",
    "FalloffParameters",
    "KineticsParams",
    "Mechanism",
    "MechanismParams",
    "PANFalloffParameters",
    "Photolysis",
    "RateLaw",
    "Reaction",
    "arr_3rdbody",
    "arrhenius",
    "arrplus",
    "constant_k",
    "eq_const",
    "equilibrium_constant",
    "evaluate_rate",
    "rate_ALK",
    "rate_DMSOH",
    "rate_EPO",
    "rate_GLYCOH_a",
    "rate_GLYCOH_b",
    "rate_GLYXNO3",
    "rate_HACOH_a",
    "rate_HACOH_b",
    "rate_HO2HO2",
    "rate_ISO1",
    "rate_ISO2",
    "rate_NIT",
    "rate_OHCO",
    "rate_OHHNO3",
    "rate_PAN_abab",
    "rate_PAN_acac",
    "rate_RO2HO2",
    "rate_RO2NO_a1",
    "rate_RO2NO_a2",
    "rate_RO2NO_b1",
    "rate_RO2NO_b2",
    "superfast_mechanism",
    "superfast_reactions",
    "tbranch",
    "tbranch_total",
    "troe_falloff",
    "tunplus",
]
