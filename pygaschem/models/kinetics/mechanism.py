"""Reaction registry and rate coefficient evaluation."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

import numpy as np
import numpy.typing as npt
import xarray as xr

from pygaschem.core.exceptions import DomainError, ReactionRateError
from pygaschem.core.models import Model, ModelParams
from pygaschem.models.kinetics.kinetics_params import KineticsParams
from pygaschem.models.kinetics.laws import AmbientState, Photolysis, RateLaw, evaluate_rate
from pygaschem.models.photolysis.photolysis import FastJX
from pygaschem.physics import units

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Reaction:
    """A reaction with its stoichiometry and rate law.

    Parameters
    ----------
    name : str
        Unique name of the reaction within its mechanism
    reactants : Mapping[str, float]
        Stoichiometric coefficients of the reactants, keyed by species
    products : Mapping[str, float]
        Stoichiometric coefficients of the products, keyed by species
    law : RateLaw
        Rate law variant
    """

    name: str
    reactants: Mapping[str, float]
    products: Mapping[str, float]
    law: RateLaw

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Reaction name must not be empty")
        if not self.reactants:
            msg = f"Reaction '{self.name}' has no reactants"
            raise ValueError(msg)
        for species, coef in {**self.reactants, **self.products}.items():
            if coef <= 0.0:
                msg = f"Reaction '{self.name}' has non-positive coefficient {coef} for {species}"
                raise ValueError(msg)

    def __str__(self) -> str:
        def fmt(side: Mapping[str, float]) -> str:
            return " + ".join(s if c == 1.0 else f"{c:g}{s}" for s, c in side.items())

        return f"{fmt(self.reactants)} -> {fmt(self.products)}"


@dataclasses.dataclass
class MechanismParams(ModelParams):
    """Default parameters for :class:`Mechanism`."""

    #: Constants used by the rate laws
    kinetics: KineticsParams = dataclasses.field(default_factory=KineticsParams)

    #: Photolysis model used for :class:`Photolysis` rate laws.
    #: If None, instantaneous Fast-JX rates are used.
    photolysis: FastJX | None = None


class Mechanism(Model):
    """A set of gas-phase reactions and their rate coefficients.

    The mechanism only evaluates rate coefficients. Assembling and integrating
    the species tendencies is left to the caller.

    Parameters
    ----------
    reactions : Iterable[Reaction]
        Reactions of the mechanism. Names must be unique.
    params : dict[str, Any], optional
        Override :class:`MechanismParams` with dictionary.
    **params_kwargs : Any
        Override :class:`MechanismParams` with keyword arguments.
    """

    name = "mechanism"
    long_name = "Gas-phase reaction mechanism"
    default_params = MechanismParams

    def __init__(
        self,
        reactions: Iterable[Reaction],
        params: dict[str, Any] | None = None,
        **params_kwargs: Any,
    ) -> None:
        super().__init__(params, **params_kwargs)
        self.reactions: dict[str, Reaction] = {}
        for reaction in reactions:
            self.add_reaction(reaction)
        logger.debug("Registered %s reactions", len(self.reactions))

    def __len__(self) -> int:
        return len(self.reactions)

    def __iter__(self) -> Iterator[Reaction]:
        return iter(self.reactions.values())

    def __contains__(self, name: object) -> bool:
        return name in self.reactions

    def __getitem__(self, name: str) -> Reaction:
        try:
            return self.reactions[name]
        except KeyError:
            msg = f"Unknown reaction '{name}'"
            raise KeyError(msg) from None

    @property
    def kinetics(self) -> KineticsParams:
        """Constants used by the rate laws."""
        return self.params["kinetics"]

    @property
    def species(self) -> list[str]:
        """Sorted names of all species appearing in the mechanism."""
        names: set[str] = set()
        for reaction in self:
            names.update(reaction.reactants)
            names.update(reaction.products)
        return sorted(names)

    def add_reaction(self, reaction: Reaction) -> None:
        """Register ``reaction``.

        Raises
        ------
        ValueError
            Raises if a reaction with the same name is already registered.
        """
        if reaction.name in self.reactions:
            msg = f"Duplicate reaction name '{reaction.name}'"
            raise ValueError(msg)
        self.reactions[reaction.name] = reaction

    # ----------
    # Evaluation
    # ----------

    def _with_photolysis(self, state: AmbientState) -> AmbientState:
        """Attach J-values from the photolysis model to ``state``."""
        model: FastJX | None = self.params["photolysis"]
        if model is None or state.j_values is not None:
            return state
        if state.latitude is None or state.longitude is None or state.unix_time is None:
            return state

        names = {r.law.species for r in self if isinstance(r.law, Photolysis)}
        j_values = {
            name: model.j_value(name, state.T, state.latitude, state.longitude, state.unix_time)
            for name in names
        }
        return dataclasses.replace(state, j_values=j_values)

    def _evaluate(self, reaction: Reaction, state: AmbientState) -> Any:
        try:
            return evaluate_rate(reaction.law, state, self.kinetics)
        except DomainError as e:
            raise ReactionRateError(reaction.name, e) from e

    def rate_coefficient(
        self, name: str, state: AmbientState
    ) -> float | npt.NDArray[np.float64]:
        """Evaluate the rate coefficient of reaction ``name``.

        Parameters
        ----------
        name : str
            Reaction name
        state : AmbientState
            Ambient conditions

        Returns
        -------
        float | npt.NDArray[np.float64]
            Rate coefficient

        Raises
        ------
        ReactionRateError
            Raises if the rate law rejects the ambient state.
        """
        reaction = self[name]
        return self._evaluate(reaction, self._with_photolysis(state))

    def rate_coefficients(self, state: AmbientState) -> dict[str, Any]:
        """Evaluate the rate coefficients of all reactions.

        Parameters
        ----------
        state : AmbientState
            Ambient conditions

        Returns
        -------
        dict[str, Any]
            Rate coefficients keyed by reaction name, in registration order

        Raises
        ------
        ReactionRateError
            Raises if a rate law rejects the ambient state.
        """
        state = self._with_photolysis(state)
        return {name: self._evaluate(reaction, state) for name, reaction in self.reactions.items()}

    def _ambient_state(self) -> tuple[AmbientState, xr.DataArray]:
        """Build an :class:`AmbientState` from :attr:`source` variables."""
        available = {
            "air_temperature": "T",
            "air_pressure": "pressure",
            "number_density": "num_density",
            "H2O": "H2O",
            "latitude": "latitude",
            "longitude": "longitude",
            "time": "unix_time",
        }
        keys = [k for k in available if k in self.source.variables]
        arrays = dict(zip(keys, xr.broadcast(*(self.source[k] for k in keys))))

        kwargs = {available[k]: da.values for k, da in arrays.items()}
        if "unix_time" in kwargs:
            kwargs["unix_time"] = units.datetime64_to_unix(kwargs["unix_time"])
        return AmbientState(**kwargs), arrays["air_temperature"]

    def eval(self, source: xr.Dataset | None = None, **params: Any) -> xr.Dataset:
        """Evaluate all rate coefficients over ``source``.

        Parameters
        ----------
        source : xr.Dataset
            Dataset with an ``air_temperature`` variable and, as required by the
            rate laws, ``air_pressure`` or ``number_density``, ``H2O``, ``latitude``,
            ``longitude`` and ``time``. Variables are broadcast against each other.
        **params : Any
            Overwrite model parameters before eval

        Returns
        -------
        xr.Dataset
            ``source`` with one ``k_<name>`` variable per reaction

        Raises
        ------
        ReactionRateError
            Raises if a rate law rejects the ambient state.
        """
        self.update_params(params)
        self.set_source(source)
        self.require_source_vars("air_temperature")

        state, template = self._ambient_state()
        for name, k in self.rate_coefficients(state).items():
            self.source[f"k_{name}"] = xr.DataArray(
                np.broadcast_to(k, template.shape).copy(),
                dims=template.dims,
                coords=template.coords,
                attrs={"long_name": f"Rate coefficient of {self.reactions[name]}"},
            )

        logger.debug("Evaluated %s rate coefficients", len(self.reactions))
        return self.source
