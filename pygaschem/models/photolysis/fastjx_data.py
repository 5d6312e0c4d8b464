"""Fast-JX wavelength bins, top of atmosphere actinic flux and cross sections.

Cross sections and quantum yields are taken from the GEOS-Chem ``FJX_spec.dat``
tables for the photolysis reactions of the SuperFast mechanism.

References
----------
- Neu, J. L., Prather, M. J., and Penner, J. E. (2007), Global atmospheric chemistry:
  Integrating over fractional cloud cover, J. Geophys. Res., 112, D11306,
  :doi:`10.1029/2006JD008007`
"""

from __future__ import annotations

import numpy as np

from pygaschem.core.interpolation import CrossSectionTable

#: Effective wavelength of the 18 Fast-JX bins covering 177 - 850 nm, [:math:`nm`]
WL = np.array(
    [187, 191, 193, 196, 202, 208, 211, 214, 261, 267, 277, 295, 303, 310, 316, 333, 380, 574],
    dtype=np.float64,
)
WL.flags.writeable = False

#: Maximum actinic flux in each wavelength bin, [:math:`photons \ cm^{-2} \ s^{-1}`]
ACTINIC_FLUX = np.array(
    [
        1.391e12, 1.627e12, 1.664e12, 9.278e11, 7.842e12, 4.680e12, 9.918e12, 1.219e13,
        6.364e14, 4.049e14, 3.150e14, 5.889e14, 7.678e14, 5.045e14, 8.902e14, 3.853e15,
        1.547e16, 2.131e17,
    ]
)  # fmt: skip
ACTINIC_FLUX.flags.writeable = False

# -----------------------------
# Cross sections, [cm^2]
# -----------------------------

#: O3 absorption, shared by all O3 photolysis channels
O3 = CrossSectionTable.from_temperature_rows(
    WL,
    [218.0, 258.0, 298.0],
    [
        np.array(
            [
                5.988, 4.859, 4.307, 3.654, 3.410, 4.849, 6.534, 9.320, 87.57,
                35.13, 15.08, 7.925, 2.456, 0.8904, 0.3661, 0.04539, 0.0006167, 0.01666,
            ]
        ) * 1e-19,
        np.array(
            [
                5.989, 4.862, 4.314, 3.666, 3.421, 4.845, 6.519, 9.299, 88.26,
                35.66, 15.47, 8.260, 2.617, 0.9739, 0.4139, 0.05515, 0.0006167, 0.01666,
            ]
        ) * 1e-19,
        np.array(
            [
                5.990, 4.866, 4.320, 3.678, 3.432, 4.840, 6.504, 9.278, 88.96,
                36.18, 15.86, 8.595, 2.778, 1.058, 0.4617, 0.06493, 0.0006167, 0.01666,
            ]
        ) * 1e-19,
    ],
)  # fmt: skip

# -----------------------------
# Quantum yields
# -----------------------------

#: Quantum yield of O(1D) from O3 photolysis, by wavelength bin and temperature
O1D_QUANTUM_YIELD = CrossSectionTable.from_temperature_rows(
    WL,
    [200.0, 260.0, 320.0],
    [
        [
            0.4842, 0.4922, 0.5071, 0.5228, 0.6040, 0.6803, 0.7190, 0.7549, 0.9000,
            0.8989, 0.8929, 0.9000, 0.8901, 0.4130, 0.08985, 0.06782, 0.0, 0.0,
        ],
        [
            0.4843, 0.4922, 0.5072, 0.5229, 0.6040, 0.6802, 0.7189, 0.7549, 0.9000,
            0.8989, 0.8929, 0.9000, 0.8916, 0.4656, 0.1417, 0.06995, 0.0, 0.0,
        ],
        [
            0.4843, 0.4922, 0.5072, 0.5229, 0.6040, 0.6805, 0.7189, 0.7550, 0.9000,
            0.8989, 0.8929, 0.9000, 0.8967, 0.5852, 0.2919, 0.07943, 0.0, 0.0,
        ],
    ],
)  # fmt: skip

#: H2O2 -> OH + OH
H2O2 = CrossSectionTable.from_temperature_rows(
    WL,
    [200.0, 300.0],
    [
        np.array(
            [
                2.325, 4.629, 5.394, 5.429, 4.447, 3.755, 3.457, 3.197, 0.5346,
                0.4855, 0.3423, 0.08407, 0.05029, 0.03308, 0.02221, 0.008598, 0.0001807, 0.0,
            ]
        ) * 1e-19,
        np.array(
            [
                2.325, 4.629, 5.394, 5.429, 4.447, 3.755, 3.457, 3.197, 0.5465,
                0.4966, 0.3524, 0.09354, 0.05763, 0.03911, 0.02718, 0.01138, 0.0002419, 0.0,
            ]
        ) * 1e-19,
    ],
)  # fmt: skip

#: CH2O -> H + HO2 + CO
CH2Oa = CrossSectionTable.from_temperature_rows(
    WL,
    [223.0, 298.0],
    [
        np.array(
            [
                0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.3143,
                1.021, 1.269, 2.323, 2.498, 1.133, 2.183, 0.4746, 0.0, 0.0,
            ]
        ) * 1e-20,
        np.array(
            [
                0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.3147,
                1.018, 1.266, 2.315, 2.497, 1.131, 2.189, 0.4751, 0.0, 0.0,
            ]
        ) * 1e-20,
    ],
)  # fmt: skip

#: CH2O -> CO + H2
CH2Ob = CrossSectionTable.from_temperature_rows(
    WL,
    [223.0, 298.0],
    [
        [
            0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 3.642e-21,
            5.787e-21, 5.316e-21, 8.181e-21, 7.917e-21, 4.011e-21, 1.081e-20, 1.082e-20, 2.088e-22,
            0.0,
        ],
        [
            0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 3.649e-21,
            5.768e-21, 5.305e-21, 8.154e-21, 7.914e-21, 4.002e-21, 1.085e-20, 1.085e-20, 2.081e-22,
            0.0,
        ],
    ],
)  # fmt: skip

#: CH3OOH -> OH + HO2 + CH2O, tabulated at 298 K only
CH3OOH = CrossSectionTable.from_temperature_rows(
    WL,
    [298.0],
    [
        np.array(
            [
                0.0, 0.0, 0.0, 0.0, 0.0, 3.120, 2.882, 2.250, 0.2716,
                0.2740, 0.2143, 0.05624, 0.03520, 0.02403, 0.01697, 0.007230, 0.0006973, 0.0,
            ]
        ) * 1e-19,
    ],
)  # fmt: skip

#: NO2 -> NO + O
NO2 = CrossSectionTable.from_temperature_rows(
    WL,
    [200.0, 294.0],
    [
        np.array(
            [
                0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.1835,
                0.4693, 0.7705, 1.078, 1.470, 1.832, 2.181, 3.138, 4.321, 0.001386,
            ]
        ) * 1e-19,
        np.array(
            [
                0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.2313,
                0.4694, 0.7553, 1.063, 1.477, 1.869, 2.295, 3.448, 4.643, 0.004345,
            ]
        ) * 1e-19,
    ],
)  # fmt: skip

#: Cross section tables keyed by photolysis reaction
CROSS_SECTIONS: dict[str, CrossSectionTable] = {
    "O31D": O3,
    "H2O2": H2O2,
    "CH2Oa": CH2Oa,
    "CH2Ob": CH2Ob,
    "CH3OOH": CH3OOH,
    "NO2": NO2,
}

#: Quantum yields keyed by photolysis reaction
QUANTUM_YIELDS: dict[str, float | CrossSectionTable] = {
    "O31D": O1D_QUANTUM_YIELD,
    "H2O2": 1.0,
    "CH2Oa": 1.0,
    "CH2Ob": 1.0,
    "CH3OOH": 1.0,
    "NO2": 1.0,
}
