"""The Super-Fast chemical mechanism.

Reactions follow Table S2 of Brown-Steiner et al. (2018). Aqueous chemistry is
not included.

References
----------
- Brown-Steiner, B., Selin, N. E., Prinn, R. G., Tilmes, S., Emmons, L., Lamarque, J.-F.,
  and Cameron-Smith, P. (2018), Evaluating simplified chemical mechanisms within
  present-day simulations of the Community Earth System Model version 1.2 with CAM4
  (CESM1.2 CAM-chem): MOZART-4 vs. Reduced Hydrocarbon vs. Super-Fast chemistry,
  Geosci. Model Dev., 11, 4155-4174, :doi:`10.5194/gmd-11-4155-2018`
"""

from __future__ import annotations

from typing import Any

from pygaschem.models.kinetics.laws import (
    Arrhenius,
    ArrheniusCoefficients,
    Constant,
    Falloff,
    FalloffParameters,
    Photolysis,
)
from pygaschem.models.kinetics.mechanism import Mechanism, Reaction

#: Bimolecular reactions ``(name, reactants, products, a0, c0)``
_BIMOLECULAR: list[tuple[str, dict[str, float], dict[str, float], float, float]] = [
    ("O3_OH", {"O3": 1, "OH": 1}, {"HO2": 1, "O2": 1}, 1.7e-12, -940.0),
    ("HO2_O3", {"HO2": 1, "O3": 1}, {"OH": 1, "O2": 2}, 1.0e-14, -490.0),
    ("HO2_OH", {"HO2": 1, "OH": 1}, {"H2O": 1, "O2": 1}, 4.8e-11, 250.0),
    ("NO_O3", {"NO": 1, "O3": 1}, {"NO2": 1, "O2": 1}, 3.0e-12, -1500.0),
    ("HO2_NO", {"HO2": 1, "NO": 1}, {"NO2": 1, "OH": 1}, 3.5e-12, 250.0),
    ("CH4_OH", {"CH4": 1, "OH": 1}, {"CH3O2": 1, "H2O": 1}, 2.45e-12, -1775.0),
    ("CH2O_OH", {"CH2O": 1, "OH": 1}, {"CO": 1, "H2O": 1, "HO2": 1}, 5.5e-12, 125.0),
    ("CH3O2_HO2", {"CH3O2": 1, "HO2": 1}, {"CH3OOH": 1, "O2": 1}, 4.1e-13, 750.0),
    ("CH3OOH_OH", {"CH3OOH": 1, "OH": 1}, {"CH3O2": 1, "H2O": 1}, 2.7e-12, 200.0),
    ("CH3O2_NO", {"CH3O2": 1, "NO": 1}, {"CH2O": 1, "HO2": 1, "NO2": 1}, 2.8e-12, 300.0),
    ("CH3O2_CH3O2", {"CH3O2": 2}, {"CH2O": 2, "HO2": 0.8}, 9.5e-14, 390.0),
    ("DMS_OH", {"DMS": 1, "OH": 1}, {"SO2": 1}, 1.1e-11, -240.0),
    ("ISOP_OH", {"ISOP": 1, "OH": 1}, {"CH3O2": 2}, 2.7e-11, 390.0),
    ("ISOP_OH_recycling", {"ISOP": 1, "OH": 1}, {"ISOP": 1, "OH": 0.5}, 2.7e-11, 390.0),
    (
        "ISOP_O3",
        {"ISOP": 1, "O3": 1},
        {"CH2O": 0.87, "CH3O2": 1.86, "HO2": 0.06, "CO": 0.05},
        5.59e-15,
        -1814.0,
    ),
    ("O1D_H2O", {"O1D": 1, "H2O": 1}, {"OH": 2}, 1.45e-10, 89.0),
    ("HO2_HO2", {"HO2": 2}, {"H2O2": 1, "O2": 1}, 3.0e-13, 460.0),
]  # fmt: skip

#: Photolysis reactions ``(name, reactants, products, Fast-JX key)``
_PHOTOLYSIS: list[tuple[str, dict[str, float], dict[str, float], str]] = [
    ("O3_hv", {"O3": 1}, {"O1D": 1, "O2": 1}, "O31D"),
    ("H2O2_hv", {"H2O2": 1}, {"OH": 2}, "H2O2"),
    ("NO2_hv", {"NO2": 1}, {"NO": 1, "O3": 1}, "NO2"),
    ("CH2O_hv_a", {"CH2O": 1}, {"CO": 1, "HO2": 2}, "CH2Oa"),
    ("CH2O_hv_b", {"CH2O": 1}, {"CO": 1, "H2": 1}, "CH2Ob"),
    ("CH3OOH_hv", {"CH3OOH": 1}, {"CH2O": 1, "HO2": 1, "OH": 1}, "CH3OOH"),
]


def superfast_reactions() -> list[Reaction]:
    """Build the 26 reactions of the Super-Fast mechanism.

    Returns
    -------
    list[Reaction]
        Reactions, bimolecular first, then termolecular, photolysis and constant rate
    """
    reactions = [
        Reaction(name, reactants, products, Arrhenius(ArrheniusCoefficients(a0, 0.0, c0)))
        for name, reactants, products, a0, c0 in _BIMOLECULAR
    ]

    # NO2 + OH {+M} -> HNO3 {+M}, low pressure limit 1.8e-30 (300 / T)^3
    reactions.append(
        Reaction(
            "NO2_OH",
            {"NO2": 1, "OH": 1},
            {"HNO3": 1},
            Falloff(
                FalloffParameters(
                    low=ArrheniusCoefficients(1.8e-30, -3.0, 0.0),
                    high=ArrheniusCoefficients(2.8e-11, 0.0, 0.0),
                    fv=0.6,
                )
            ),
        )
    )

    reactions.extend(
        Reaction(name, reactants, products, Photolysis(key))
        for name, reactants, products, key in _PHOTOLYSIS
    )

    reactions.append(
        Reaction("OH_H2O2", {"OH": 1, "H2O2": 1}, {"H2O": 1, "HO2": 1}, Constant(1.8e-12))
    )
    reactions.append(Reaction("OH_CO", {"OH": 1, "CO": 1}, {"HO2": 1}, Constant(1.5e-13)))
    return reactions


def superfast_mechanism(params: dict[str, Any] | None = None, **params_kwargs: Any) -> Mechanism:
    """Build the Super-Fast mechanism.

    Parameters
    ----------
    params : dict[str, Any], optional
        Override :class:`MechanismParams` with dictionary.
    **params_kwargs : Any
        Override :class:`MechanismParams` with keyword arguments.

    Returns
    -------
    Mechanism
        Mechanism with the 26 Super-Fast reactions
    """
    return Mechanism(superfast_reactions(), params, **params_kwargs)
