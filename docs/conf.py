"""
Configuration file for the Sphinx documentation builder.

This file only contains a selection of the most common options. For a full
list see the documentation:
https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

from __future__ import annotations

import datetime

import pygaschem

# -- Project information -----------------------------------------------------

project = "pygaschem"
copyright = f"2024-{datetime.datetime.now().year}, The pygaschem developers"

author = "The pygaschem developers"
version = pygaschem.__version__
release = pygaschem.__version__

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx.ext.extlinks",
]

# Reference docstrings cite papers with :doi:`...`
extlinks = {"doi": ("https://doi.org/%s", "doi:%s")}

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

intersphinx_mapping = {
    "numpy": ("https://numpy.org/doc/stable/", None),
    "pandas": ("https://pandas.pydata.org/pandas-docs/dev/", None),
    "python": ("https://docs.python.org/3/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
    "xarray": ("https://docs.xarray.dev/en/stable/", None),
}

# Napoleon configuration - https://www.sphinx-doc.org/en/master/usage/extensions/napoleon.html
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_param = False
napoleon_use_rtype = False
napoleon_preprocess_types = True

# Note the ~ prefix removes the module name in presentation
napoleon_type_aliases = {
    # general terms
    "sequence": ":term:`sequence`",
    "iterable": ":term:`iterable`",
    "callable": ":py:func:`callable`",
    "mapping": ":term:`mapping`",
    # pygaschem
    "Model": "~pygaschem.Model",
    "ModelParams": "~pygaschem.ModelParams",
    "AmbientState": "~pygaschem.models.kinetics.AmbientState",
    "KineticsParams": "~pygaschem.models.kinetics.KineticsParams",
    "Mechanism": "~pygaschem.models.kinetics.Mechanism",
    "MechanismParams": "~pygaschem.models.kinetics.MechanismParams",
    "Reaction": "~pygaschem.models.kinetics.Reaction",
    "RateLaw": "~pygaschem.models.kinetics.RateLaw",
    "FastJX": "~pygaschem.models.photolysis.FastJX",
    "FastJXParams": "~pygaschem.models.photolysis.FastJXParams",
    "PhotolysisSpecies": "~pygaschem.models.photolysis.PhotolysisSpecies",
    "CrossSectionTable": "~pygaschem.core.interpolation.CrossSectionTable",
    "CrossSectionInterpolator": "~pygaschem.core.interpolation.CrossSectionInterpolator",
    # pygaschem.utils
    "ArrayScalarLike": "~pygaschem.utils.types.ArrayScalarLike",
    "ArrayLike": "~pygaschem.utils.types.ArrayLike",
    # numpy
    "np.ndarray": "numpy.ndarray",
    "np.datetime64": "numpy.datetime64",
    "np.timedelta64": "numpy.timedelta64",
    "npt.ArrayLike": "numpy.typing.ArrayLike",
    # xarray
    "xr.DataArray": "xarray.DataArray",
    "xr.Dataset": "xarray.Dataset",
}

autosummary_generate = True
autodoc_typehints = "none"

# autodoc options
autoclass_content = "class"  # only include docstring from Class (not __init__ method)
autodoc_inherit_docstrings = False
autodoc_default_options = {
    "members": None,  # means yes/true/on
    "undoc-members": None,
    "show-inheritance": None,
}

pygments_style = "default"
pygments_dark_style = "monokai"  # furo-specific

# -- Options for HTML output -------------------------------------------------

# https://github.com/pradyunsg/furo
html_theme = "furo"
html_title = f"{project} v{release}"
html_last_updated_fmt = ""
html_sourcelink_suffix = ""
