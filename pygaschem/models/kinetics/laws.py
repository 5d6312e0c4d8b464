"""Rate law variants attached to the reactions of a mechanism.

A reaction's rate law is one of a closed set of variants:

- :class:`Constant`
- :class:`Arrhenius`
- :class:`Falloff`
- :class:`Equilibrium`
- :class:`Branching`
- :class:`Photolysis`

Each variant carries a named parameter struct validated on construction and
exposes a :attr:`kind` tag. :func:`evaluate_rate` dispatches on the tag.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Union

import numpy as np
import numpy.typing as npt

from pygaschem.core.exceptions import DomainError
from pygaschem.models.kinetics import branching, equilibrium, falloff, rate_laws
from pygaschem.models.kinetics.kinetics_params import KineticsParams
from pygaschem.models.photolysis.photolysis import FASTJX_SPECIES, j_mean
from pygaschem.physics import thermo

# -------------
# Ambient state
# -------------


@dataclasses.dataclass(frozen=True)
class AmbientState:
    """Ambient conditions at which rate coefficients are evaluated.

    Fields are python floats or numpy arrays broadcastable against each other.
    If ``num_density`` is not given but ``pressure`` is, the number density of
    air is derived with the ideal gas law.
    """

    #: Temperature, [:math:`K`]
    T: Any

    #: Number density of air, [:math:`molecules \ cm^{-3}`]
    num_density: Any = None

    #: Pressure, [:math:`Pa`]
    pressure: Any = None

    #: Latitude, [:math:`\deg`]
    latitude: Any = None

    #: Longitude, [:math:`\deg`]
    longitude: Any = None

    #: Seconds since 1970-01-01T00:00:00 UTC
    unix_time: Any = None

    #: Number density of water vapor, [:math:`molecules \ cm^{-3}`]
    H2O: Any = None

    #: Precomputed photolysis rate constants keyed by photolysis reaction, [:math:`s^{-1}`]
    j_values: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        rate_laws.require_positive_temperature(self.T, "AmbientState")
        if self.num_density is None and self.pressure is not None:
            object.__setattr__(self, "num_density", thermo.number_density(self.T, self.pressure))
        if self.num_density is not None:
            rate_laws.require_nonnegative_number_density(self.num_density, "AmbientState")

    def require(self, law: str, *fields: str) -> None:
        """Ensure ``fields`` are set.

        Raises
        ------
        ValueError
            Raises if any of ``fields`` is None, naming the missing fields.
        """
        missing = [f for f in fields if getattr(self, f) is None]
        if missing:
            msg = f"Rate law '{law}' requires ambient state fields: {', '.join(missing)}"
            raise ValueError(msg)


# -----------------
# Parameter structs
# -----------------


def _require_fv(fv: float | None, owner: str) -> None:
    if fv is not None and not 0.0 < fv <= 1.0:
        raise DomainError("falloff factor must be in (0, 1]", owner, fv=fv)


@dataclasses.dataclass(frozen=True)
class ArrheniusCoefficients:
    """Coefficients of :func:`arrhenius`."""

    a0: float
    b0: float = 0.0
    c0: float = 0.0

    def __post_init__(self) -> None:
        if self.a0 < 0.0:
            raise DomainError(
                "pre-exponential factor must be non-negative", "Arrhenius", a0=self.a0
            )


@dataclasses.dataclass(frozen=True)
class FalloffParameters:
    """Low and high pressure limits of :func:`arr_3rdbody`.

    If ``fv`` is None, the falloff factor of the :class:`KineticsParams`
    used for evaluation applies.
    """

    low: ArrheniusCoefficients
    high: ArrheniusCoefficients
    fv: float | None = None

    def __post_init__(self) -> None:
        _require_fv(self.fv, "FalloffParameters")


@dataclasses.dataclass(frozen=True)
class PANFalloffParameters:
    """Coefficients of :func:`rate_PAN_abab` (``form="abab"``) or :func:`rate_PAN_acac`.

    For ``form="acac"``, ``b0`` and ``b1`` hold the power law exponents ``c0`` and ``c1``.
    """

    a0: float
    b0: float
    a1: float
    b1: float
    cf: float
    form: str = "abab"

    def __post_init__(self) -> None:
        if self.form not in ("abab", "acac"):
            msg = f"Unknown PAN falloff form '{self.form}', expected 'abab' or 'acac'"
            raise ValueError(msg)
        if not 0.0 < self.cf < 1.0:
            raise DomainError(
                "broadening factor must be in (0, 1)", "PANFalloffParameters", cf=self.cf
            )


@dataclasses.dataclass(frozen=True)
class EquilibriumCoefficients:
    """Equilibrium constant ``(a0, c0)`` and association falloff limits of :func:`eq_const`."""

    a0: float
    c0: float
    a1: float
    b1: float
    a2: float
    b2: float
    fv: float | None = None

    def __post_init__(self) -> None:
        if self.a0 <= 0.0:
            raise DomainError("equilibrium constant must be positive", "eq_const", a0=self.a0)
        _require_fv(self.fv, "EquilibriumCoefficients")


@dataclasses.dataclass(frozen=True)
class TBranchParams:
    """Coefficients of :func:`tbranch`. ``channel`` selects ``"a"`` or ``"b"``."""

    total: ArrheniusCoefficients
    ratio: ArrheniusCoefficients
    channel: str = "a"

    def __post_init__(self) -> None:
        if self.channel not in ("a", "b"):
            msg = f"Unknown branching channel '{self.channel}', expected 'a' or 'b'"
            raise ValueError(msg)


@dataclasses.dataclass(frozen=True)
class ModifiedArrheniusParams:
    """Coefficients of :func:`arrplus` and :func:`tunplus`."""

    a0: float
    b0: float
    c0: float
    d0: float = 1.0
    e0: float = 0.0


@dataclasses.dataclass(frozen=True)
class RO2NOParams:
    """Coefficients of the RO2 + NO family. ``a1`` is the carbon number."""

    a0: float
    c0: float
    a1: float = 1.0

    def __post_init__(self) -> None:
        if self.a1 < 1.0:
            raise DomainError("carbon number must be at least one", "RO2NOParams", a1=self.a1)


@dataclasses.dataclass(frozen=True)
class RO2HO2Params:
    a0: float
    c0: float
    a1: float


@dataclasses.dataclass(frozen=True)
class IsopreneNitrateParams:
    """Coefficients of :func:`rate_NIT` and :func:`rate_ALK`."""

    a0: float
    b0: float
    c0: float
    n: float
    x0: float
    y0: float


@dataclasses.dataclass(frozen=True)
class IsopreneOHParams:
    """Coefficients of :func:`rate_ISO1` and :func:`rate_ISO2`."""

    a0: float
    b0: float
    c0: float
    d0: float
    e0: float
    f0: float
    g0: float


@dataclasses.dataclass(frozen=True)
class EPOParams:
    a1: float
    e1: float
    m1: float


@dataclasses.dataclass(frozen=True)
class FractionParams:
    """Coefficients of the GLYC + OH and HAC + OH channels."""

    a0: float
    c0: float = 0.0


@dataclasses.dataclass(frozen=True)
class TwoTermParams:
    """Coefficients ``(a0, c0)`` and ``(a1, c1)`` of two Arrhenius terms."""

    a0: float
    c0: float
    a1: float
    c1: float


@dataclasses.dataclass(frozen=True)
class OHHNO3Params:
    a0: float
    c0: float
    a1: float
    c1: float
    a2: float
    c2: float


@dataclasses.dataclass(frozen=True)
class NoParams:
    """Placeholder for correlations without reaction specific coefficients."""


# -------------------
# Branching families
# -------------------

_FamilyEvaluator = Callable[[Any, AmbientState, KineticsParams], Any]


def _tbranch(p: TBranchParams, s: AmbientState, kp: KineticsParams) -> Any:
    k_a, k_b = branching.tbranch(
        p.total.a0, p.total.b0, p.total.c0, p.ratio.a0, p.ratio.b0, p.ratio.c0, s.T
    )
    return k_a if p.channel == "a" else k_b


#: Branching families: parameter struct, required ambient fields and evaluator
BRANCHING_FAMILIES: dict[str, tuple[type, tuple[str, ...], _FamilyEvaluator]] = {
    "TBRANCH": (TBranchParams, (), _tbranch),
    "ARRPLUS": (
        ModifiedArrheniusParams,
        (),
        lambda p, s, kp: rate_laws.arrplus(p.a0, p.b0, p.c0, p.d0, p.e0, s.T, T_ref=kp.T_ref),
    ),
    "TUNPLUS": (
        ModifiedArrheniusParams,
        (),
        lambda p, s, kp: rate_laws.tunplus(p.a0, p.b0, p.c0, p.d0, p.e0, s.T),
    ),
    "RO2NO_a1": (
        RO2NOParams,
        (),
        lambda p, s, kp: branching.rate_RO2NO_a1(
            p.a0, p.c0, s.T, methyl_nitrate_yield=kp.methyl_nitrate_yield
        ),
    ),
    "RO2NO_b1": (
        RO2NOParams,
        (),
        lambda p, s, kp: branching.rate_RO2NO_b1(
            p.a0, p.c0, s.T, methyl_nitrate_yield=kp.methyl_nitrate_yield
        ),
    ),
    "RO2NO_a2": (
        RO2NOParams,
        ("num_density",),
        lambda p, s, kp: branching.rate_RO2NO_a2(p.a0, p.c0, p.a1, s.T, s.num_density),
    ),
    "RO2NO_b2": (
        RO2NOParams,
        ("num_density",),
        lambda p, s, kp: branching.rate_RO2NO_b2(p.a0, p.c0, p.a1, s.T, s.num_density),
    ),
    "RO2HO2": (
        RO2HO2Params,
        (),
        lambda p, s, kp: branching.rate_RO2HO2(p.a0, p.c0, p.a1, s.T),
    ),
    "NIT": (
        IsopreneNitrateParams,
        ("num_density",),
        lambda p, s, kp: branching.rate_NIT(p.a0, p.b0, p.c0, p.n, p.x0, p.y0, s.T, s.num_density),
    ),
    "ALK": (
        IsopreneNitrateParams,
        ("num_density",),
        lambda p, s, kp: branching.rate_ALK(p.a0, p.b0, p.c0, p.n, p.x0, p.y0, s.T, s.num_density),
    ),
    "ISO1": (
        IsopreneOHParams,
        (),
        lambda p, s, kp: branching.rate_ISO1(p.a0, p.b0, p.c0, p.d0, p.e0, p.f0, p.g0, s.T),
    ),
    "ISO2": (
        IsopreneOHParams,
        (),
        lambda p, s, kp: branching.rate_ISO2(p.a0, p.b0, p.c0, p.d0, p.e0, p.f0, p.g0, s.T),
    ),
    "EPO": (
        EPOParams,
        ("num_density",),
        lambda p, s, kp: branching.rate_EPO(p.a1, p.e1, p.m1, s.T, s.num_density),
    ),
    "GLYCOH_a": (FractionParams, (), lambda p, s, kp: branching.rate_GLYCOH_a(p.a0, s.T)),
    "GLYCOH_b": (FractionParams, (), lambda p, s, kp: branching.rate_GLYCOH_b(p.a0, s.T)),
    "HACOH_a": (FractionParams, (), lambda p, s, kp: branching.rate_HACOH_a(p.a0, p.c0, s.T)),
    "HACOH_b": (FractionParams, (), lambda p, s, kp: branching.rate_HACOH_b(p.a0, p.c0, s.T)),
    "GLYXNO3": (
        FractionParams,
        ("num_density",),
        lambda p, s, kp: branching.rate_GLYXNO3(
            p.a0, p.c0, s.T, s.num_density, o2_fraction=kp.o2_fraction
        ),
    ),
    "OHHNO3": (
        OHHNO3Params,
        ("num_density",),
        lambda p, s, kp: branching.rate_OHHNO3(
            p.a0, p.c0, p.a1, p.c1, p.a2, p.c2, s.T, s.num_density
        ),
    ),
    "OHCO": (NoParams, ("num_density",), lambda p, s, kp: branching.rate_OHCO(s.T, s.num_density)),
    "DMSOH": (
        TwoTermParams,
        ("num_density",),
        lambda p, s, kp: branching.rate_DMSOH(
            p.a0, p.c0, p.a1, p.c1, s.T, s.num_density, o2_fraction=kp.o2_fraction
        ),
    ),
    "HO2HO2": (
        TwoTermParams,
        ("num_density", "H2O"),
        lambda p, s, kp: branching.rate_HO2HO2(
            p.a0,
            p.c0,
            p.a1,
            p.c1,
            s.T,
            s.num_density,
            s.H2O,
            h2o_enhancement=kp.h2o_enhancement,
            h2o_enhancement_T=kp.h2o_enhancement_T,
        ),
    ),
}


# --------
# Variants
# --------


@dataclasses.dataclass(frozen=True)
class Constant:
    """Temperature independent rate coefficient."""

    kind: ClassVar[str] = "constant"

    value: float

    def __post_init__(self) -> None:
        if self.value < 0.0:
            raise DomainError("rate coefficient must be non-negative", "Constant", value=self.value)

    def evaluate(self, state: AmbientState, kinetics: KineticsParams | None = None) -> Any:
        return evaluate_rate(self, state, kinetics)


@dataclasses.dataclass(frozen=True)
class Arrhenius:
    """Arrhenius rate coefficient."""

    kind: ClassVar[str] = "arrhenius"

    coefficients: ArrheniusCoefficients

    def evaluate(self, state: AmbientState, kinetics: KineticsParams | None = None) -> Any:
        return evaluate_rate(self, state, kinetics)


@dataclasses.dataclass(frozen=True)
class Falloff:
    """Pressure dependent rate coefficient of a termolecular reaction."""

    kind: ClassVar[str] = "falloff"

    params: FalloffParameters | PANFalloffParameters

    def evaluate(self, state: AmbientState, kinetics: KineticsParams | None = None) -> Any:
        return evaluate_rate(self, state, kinetics)


@dataclasses.dataclass(frozen=True)
class Equilibrium:
    """Decomposition rate of an equilibrium pair, see :func:`eq_const`."""

    kind: ClassVar[str] = "equilibrium"

    params: EquilibriumCoefficients

    def evaluate(self, state: AmbientState, kinetics: KineticsParams | None = None) -> Any:
        return evaluate_rate(self, state, kinetics)


@dataclasses.dataclass(frozen=True)
class Branching:
    """Rate coefficient from one of the :attr:`BRANCHING_FAMILIES` correlations.

    Raises
    ------
    KeyError
        Raises if ``family`` is unknown.
    TypeError
        Raises if ``params`` is not the parameter struct of ``family``.
    """

    kind: ClassVar[str] = "branching"

    family: str
    params: Any = dataclasses.field(default_factory=NoParams)

    def __post_init__(self) -> None:
        try:
            params_type, _, _ = BRANCHING_FAMILIES[self.family]
        except KeyError:
            msg = (
                f"Unknown branching family '{self.family}'. "
                f"Available: {', '.join(BRANCHING_FAMILIES)}"
            )
            raise KeyError(msg) from None

        if not isinstance(self.params, params_type):
            msg = (
                f"Branching family '{self.family}' expects {params_type.__name__}, "
                f"found {type(self.params).__name__}"
            )
            raise TypeError(msg)

    def evaluate(self, state: AmbientState, kinetics: KineticsParams | None = None) -> Any:
        return evaluate_rate(self, state, kinetics)


@dataclasses.dataclass(frozen=True)
class Photolysis:
    """Photolysis rate constant of a Fast-JX reaction, optionally scaled.

    Uses ``state.j_values[species]`` when present, otherwise the instantaneous
    Fast-JX rate at the ambient position and time.
    """

    kind: ClassVar[str] = "photolysis"

    species: str
    scale: float = 1.0

    def evaluate(self, state: AmbientState, kinetics: KineticsParams | None = None) -> Any:
        return evaluate_rate(self, state, kinetics)


#: Any rate law variant
RateLaw = Union[Constant, Arrhenius, Falloff, Equilibrium, Branching, Photolysis]

# --------
# Dispatch
# --------


def _eval_constant(law: Constant, state: AmbientState, kinetics: KineticsParams) -> Any:
    return rate_laws.constant_k(law.value, state)


def _eval_arrhenius(law: Arrhenius, state: AmbientState, kinetics: KineticsParams) -> Any:
    c = law.coefficients
    return rate_laws.arrhenius(c.a0, c.b0, c.c0, state.T, T_ref=kinetics.T_ref)


def _eval_falloff(law: Falloff, state: AmbientState, kinetics: KineticsParams) -> Any:
    state.require("falloff", "num_density")
    p = law.params
    if isinstance(p, PANFalloffParameters):
        if p.form == "abab":
            return falloff.rate_PAN_abab(p.a0, p.b0, p.a1, p.b1, p.cf, state.T, state.num_density)
        return falloff.rate_PAN_acac(
            p.a0, p.b0, p.a1, p.b1, p.cf, state.T, state.num_density, T_ref=kinetics.T_ref
        )

    fv = kinetics.fv if p.fv is None else p.fv
    low, high = p.low, p.high
    return falloff.arr_3rdbody(
        low.a0, low.b0, low.c0, high.a0, high.b0, high.c0, fv, state.T, state.num_density
    )


def _eval_equilibrium(law: Equilibrium, state: AmbientState, kinetics: KineticsParams) -> Any:
    state.require("equilibrium", "num_density")
    p = law.params
    fv = kinetics.fv if p.fv is None else p.fv
    return equilibrium.eq_const(p.a0, p.c0, p.a1, p.b1, p.a2, p.b2, fv, state.T, state.num_density)


def _eval_branching(law: Branching, state: AmbientState, kinetics: KineticsParams) -> Any:
    _, required, evaluator = BRANCHING_FAMILIES[law.family]
    state.require(law.family, *required)
    return evaluator(law.params, state, kinetics)


def _eval_photolysis(law: Photolysis, state: AmbientState, kinetics: KineticsParams) -> Any:
    if state.j_values is not None and law.species in state.j_values:
        return law.scale * state.j_values[law.species]

    state.require(f"photolysis {law.species}", "latitude", "longitude", "unix_time")
    try:
        species = FASTJX_SPECIES[law.species]
    except KeyError:
        msg = f"No cross sections for photolysis reaction '{law.species}'"
        raise KeyError(msg) from None

    j = j_mean(
        species.cross_section,
        species.quantum_yield,
        state.T,
        state.latitude,
        state.longitude,
        state.unix_time,
    )
    return law.scale * j


_DISPATCH: dict[str, Callable[[Any, AmbientState, KineticsParams], Any]] = {
    Constant.kind: _eval_constant,
    Arrhenius.kind: _eval_arrhenius,
    Falloff.kind: _eval_falloff,
    Equilibrium.kind: _eval_equilibrium,
    Branching.kind: _eval_branching,
    Photolysis.kind: _eval_photolysis,
}

_DEFAULT_KINETICS = KineticsParams()


def evaluate_rate(
    law: RateLaw, state: AmbientState, kinetics: KineticsParams | None = None
) -> float | npt.NDArray[np.float64]:
    """Evaluate the rate coefficient of ``law`` at ``state``.

    Parameters
    ----------
    law : RateLaw
        Rate law variant
    state : AmbientState
        Ambient conditions
    kinetics : KineticsParams, optional
        Constants used by the rate laws. Defaults to ``KineticsParams()``.

    Returns
    -------
    float | npt.NDArray[np.float64]
        Rate coefficient

    Raises
    ------
    TypeError
        Raises if ``law`` is not a rate law variant.
    ValueError
        Raises if ``state`` is missing a field required by ``law``.
    DomainError
        Raises on nonphysical inputs.
    """
    try:
        evaluator = _DISPATCH[law.kind]
    except (AttributeError, KeyError):
        msg = f"Unknown rate law: {law!r}"
        raise TypeError(msg) from None

    return evaluator(law, state, kinetics or _DEFAULT_KINETICS)
