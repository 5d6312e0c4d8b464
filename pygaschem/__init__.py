"""
``pygaschem`` public API.

Copyright 2024 The pygaschem developers

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from __future__ import annotations

import logging
from importlib import metadata

import dask

from pygaschem.core.exceptions import DomainError, ReactionRateError
from pygaschem.core.interpolation import CrossSectionInterpolator, CrossSectionTable
from pygaschem.core.models import Model, ModelParams
from pygaschem.models.kinetics import (
    AmbientState,
    KineticsParams,
    Mechanism,
    MechanismParams,
    Reaction,
    superfast_mechanism,
)
from pygaschem.models.photolysis import FastJX, FastJXParams

__version__ = metadata.version("pygaschem")
__license__ = "Apache-2.0"

log = logging.getLogger(__name__)

# Source datasets may be chunked, silence dask slicing warnings on broadcast
dask.config.set({"array.slicing.split_large_chunks": False})


__all__ = [
    "AmbientState",
    "CrossSectionInterpolator",
    "CrossSectionTable",
    "DomainError",
    "FastJX",
    "FastJXParams",
    "KineticsParams",
    "Mechanism",
    "MechanismParams",
    "Model",
    "ModelParams",
    "Reaction",
    "ReactionRateError",
    "superfast_mechanism",
]
