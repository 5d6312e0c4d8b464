"""Photolysis rate constants."""

from pygaschem.models.photolysis.photolysis import (
    ACTINIC_FLUX,
    FASTJX_SPECIES,
    FastJX,
    FastJXParams,
    PhotolysisSpecies,
    calc_flux,
    j_mean,
)

__all__ = [
    "ACTINIC_FLUX",
    "FASTJX_SPECIES",
    "FastJX",
    "FastJXParams",
    "PhotolysisSpecies",
    "calc_flux",
    "j_mean",
]
