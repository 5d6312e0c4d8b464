"""Physical constants used by the kinetics engine."""

from __future__ import annotations

import dataclasses

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics import branching
from pygaschem.physics import constants


@dataclasses.dataclass(frozen=True)
class KineticsParams:
    """Read-only constants passed into rate law evaluation.

    Each :class:`Mechanism` carries its own instance, so mechanisms built with
    different constants can be evaluated side by side.
    """

    #: Reference temperature of the Arrhenius temperature exponent, [:math:`K`]
    T_ref: float = constants.T_ref_arrhenius

    #: Volume mixing ratio of O2 in air
    o2_fraction: float = constants.o2_fraction

    #: Default falloff broadening factor, used by falloff laws that do not set their own
    fv: float = constants.fv_default

    #: Yield of methyl nitrate from MO2 + NO
    methyl_nitrate_yield: float = branching.METHYL_NITRATE_YIELD

    #: Water vapor enhancement of HO2 + HO2, [:math:`cm^{3}`]
    h2o_enhancement: float = branching.HO2HO2_H2O_ENHANCEMENT

    #: Temperature term of the water vapor enhancement of HO2 + HO2, [:math:`K`]
    h2o_enhancement_T: float = branching.HO2HO2_H2O_ENHANCEMENT_T

    def __post_init__(self) -> None:
        if self.T_ref <= 0.0:
            raise DomainError(
                "reference temperature must be positive", "KineticsParams", T_ref=self.T_ref
            )
        if not 0.0 < self.o2_fraction <= 1.0:
            raise DomainError(
                "O2 fraction must be in (0, 1]", "KineticsParams", o2_fraction=self.o2_fraction
            )
        if not 0.0 < self.fv <= 1.0:
            raise DomainError("falloff factor must be in (0, 1]", "KineticsParams", fv=self.fv)
        if not 0.0 <= self.methyl_nitrate_yield <= 1.0:
            raise DomainError(
                "methyl nitrate yield must be in [0, 1]",
                "KineticsParams",
                methyl_nitrate_yield=self.methyl_nitrate_yield,
            )
