"""Physical, thermodynamic, and photochemical constants."""

from __future__ import annotations

# -------
# General
# -------

# NOTE: Use a decimal point for each float-valued constant. This is important for
# converting to numpy arrays.

#: Avogadro constant :math:`[mol^{-1}]`
N_A: float = 6.02214076e23

# -------------
# Thermodynamic
# -------------

#: Molecular mass of dry air :math:`[kg \ mol^{-1}]`
M_d: float = 28.9647e-3

#: Gas constant of dry air :math:`[J \ kg^{-1} \ K^{-1}]`
R_d: float = 287.05

# --------
# Kinetics
# --------

#: Reference temperature of the Arrhenius temperature exponent :math:`[K]`
T_ref_arrhenius: float = 300.0

#: Volume mixing ratio of O2 in dry air
o2_fraction: float = 0.2095

#: Default falloff broadening factor of the Troe expression.
#: See Atkinson et al. (1992), J. Phys. Chem. Ref. Data 21, p. 1145.
fv_default: float = 0.6

# ----------
# Photolysis
# ----------

#: Mean obliquity of the ecliptic :math:`[\deg]`
obliquity: float = 23.44

#: Eccentricity of Earth's orbit
eccentricity: float = 0.0167

#: Length of the tropical year :math:`[days]`
tropical_year: float = 365.24
