"""Core data structures and methods."""

from pygaschem.core.exceptions import DomainError, ReactionRateError
from pygaschem.core.interpolation import (
    CrossSectionInterpolator,
    CrossSectionTable,
    create_fjx_interp,
)
from pygaschem.core.models import Model, ModelParams

__all__ = [
    "CrossSectionInterpolator",
    "CrossSectionTable",
    "DomainError",
    "Model",
    "ModelParams",
    "ReactionRateError",
    "create_fjx_interp",
]
