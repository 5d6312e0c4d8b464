"""Convienence types."""

from __future__ import annotations

from typing import Any, TypeVar, Union

import numpy as np
import xarray as xr

#: Array like (np.ndarray, xr.DataArray)
ArrayLike = TypeVar("ArrayLike", np.ndarray, xr.DataArray, Union[xr.DataArray, np.ndarray])

#: Array like input (np.ndarray, xr.DataArray, np.float64, float)
ArrayScalarLike = TypeVar(
    "ArrayScalarLike",
    np.ndarray,
    xr.DataArray,
    np.float64,
    float,
    Union[np.ndarray, float],
    Union[xr.DataArray, np.ndarray],
)


def as_scalar_if_0d(arr: Any) -> Any:
    """Unwrap a zero-dimensional numpy array into a python ``float``.

    Functions built from :func:`np.where` or :func:`np.clip` return 0-d arrays
    when fed python floats. This keeps "float in, float out" for the rate laws.

    Parameters
    ----------
    arr : Any
        Output of a numpy computation

    Returns
    -------
    Any
        ``arr.item()`` when ``arr`` is a 0-d :class:`np.ndarray`, otherwise ``arr``
    """
    if isinstance(arr, np.ndarray) and arr.ndim == 0:
        return arr.item()
    return arr
