"""Physical model data structures."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from typing import Any

import numpy as np
import pandas as pd
import xarray as xr

logger = logging.getLogger(__name__)

# ------------
# Model Params
# ------------


@dataclass
class ModelParams:
    """Class for constructing model parameters.

    Implementing classes must still use the ``@dataclass`` operator.
    """

    #: Copy input ``source`` data on eval
    copy_source: bool = True

    def as_dict(self) -> dict[str, Any]:
        """Convert object to dictionary.

        We use this method instead of  `dataclasses.asdict`
        to use a shallow/unrecursive copy.
        This will return values as Any instead of dict.

        Returns
        -------
        dict[str, Any]
            Dictionary version of self.
        """
        return {(name := field.name): getattr(self, name) for field in fields(self)}


# ------
# Models
# ------


class Model(ABC):
    """Base class for kinetics and photolysis models.

    Implementing classes must implement the :meth:`eval` method.
    Evaluation inputs are :class:`xr.Dataset` instances holding the ambient state
    (``air_temperature``, ``air_pressure``, ``latitude``, ...) on arbitrary coordinates.
    """

    __slots__ = ("params", "source")

    #: Default model parameter dataclass
    default_params: type[ModelParams] = ModelParams

    #: Instantiated model parameters, in dictionary form
    params: dict[str, Any]

    #: Data evaluated in model
    source: xr.Dataset

    def __init__(
        self,
        params: ModelParams | dict[str, Any] | None = None,
        **params_kwargs: Any,
    ) -> None:
        # Load base params, override default and user params
        self._load_params(params, **params_kwargs)

    def __repr__(self) -> str:
        params = getattr(self, "params", {})
        return f"{type(self).__name__} model\n\t{self.long_name}\n\tParams: {params}\n"

    @property
    @abstractmethod
    def name(self) -> str:
        """Get model name for use as a data key in :class:`xr.Dataset` outputs."""

    @property
    @abstractmethod
    def long_name(self) -> str:
        """Get long name descriptor, annotated on :class:`xr.DataArray` outputs."""

    def _load_params(
        self, params: ModelParams | dict[str, Any] | None = None, **params_kwargs: Any
    ) -> None:
        """Load parameters to model :attr:`params`.

        Load order:

        1. If ``params`` is a :attr:`default_params` instance, use as is. Otherwise
           instantiate as :attr:`default_params`.
        2. ``params`` input dict
        3. ``params_kwargs`` override keys in params

        Parameters
        ----------
        params : dict[str, Any], optional
            Model parameter dictionary or :attr:`default_params` instance.
            Defaults to {}
        **params_kwargs : Any
            Override keys in ``params`` with keyword arguments.

        Raises
        ------
        KeyError
            Unknown parameter passed into model
        """
        if isinstance(params, self.default_params):
            base_params = params
            params = None
        elif isinstance(params, ModelParams):
            msg = f"Model parameters must be of type {self.default_params.__name__} or dict"
            raise TypeError(msg)
        else:
            base_params = self.default_params()

        self.params = base_params.as_dict()
        self.update_params(params, **params_kwargs)

    @abstractmethod
    def eval(self, source: Any = None, **params: Any) -> Any:
        """Abstract method to handle evaluation.

        Implementing classes should override call signature to overload ``source`` inputs
        and model outputs.

        Parameters
        ----------
        source : Any, optional
            Dataset defining coordinates and ambient state to evaluate model.
        **params : Any
            Overwrite model parameters before evaluation.

        Returns
        -------
        Any
            Return type depends on implementing model
        """

    # ---------
    # Utilities
    # ---------

    def set_source(self, source: xr.Dataset) -> None:
        """Attach original or copy of input ``source`` to :attr:`source`.

        Parameters
        ----------
        source : xr.Dataset
            Dataset holding the ambient state.

        Raises
        ------
        TypeError
            Raises if ``source`` is not a :class:`xr.Dataset`
        """
        if not isinstance(source, xr.Dataset):
            msg = f"Unknown source type: {type(source)}"
            raise TypeError(msg)

        if self.params["copy_source"]:
            source = source.copy()
        self.source = source

    def require_source_vars(self, *keys: str) -> None:
        """Ensure that :attr:`source` contains each of ``keys``.

        Raises
        ------
        KeyError
            Raises when a key is found in neither data variables nor coordinates.
        """
        missing = [key for key in keys if key not in self.source.variables]
        if missing:
            msg = f"Source is missing required variables: {', '.join(missing)}"
            raise KeyError(msg)

    def update_params(self, params: dict[str, Any] | None = None, **params_kwargs: Any) -> None:
        """Update model parameters on :attr:`params`.

        Parameters
        ----------
        params : dict[str, Any], optional
            Model parameters to update, as dictionary.
            Defaults to {}
        **params_kwargs : Any
            Override keys in ``params`` with keyword arguments.
        """
        update_param_dict(self.params, params or {})
        update_param_dict(self.params, params_kwargs)


def update_param_dict(param_dict: dict[str, Any], new_params: dict[str, Any]) -> None:
    """Update parameter dictionary in place.

    Parameters
    ----------
    param_dict : dict[str, Any]
        Active model parameter dictionary
    new_params : dict[str, Any]
        Model parameters to update, as a dictionary

    Raises
    ------
    KeyError
        Raises when ``new_params`` key is not found in ``param_dict``

    """
    for param, value in new_params.items():
        try:
            old_value = param_dict[param]
        except KeyError:
            msg = (
                f"Unknown parameter '{param}' passed into model. Possible "
                f"parameters include {', '.join(param_dict)}."
            )
            raise KeyError(msg) from None

        # Convenience: convert timedelta64-like params
        if isinstance(old_value, np.timedelta64) and not isinstance(value, np.timedelta64):
            value = pd.to_timedelta(value).to_numpy()

        param_dict[param] = value
