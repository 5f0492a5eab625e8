import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath("../../src"))

project = "PySATL EVD"
copyright = f"{datetime.now().year}, Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
author = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx_rtd_theme",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
    "sphinx.ext.autosummary",
]
autosummary_generate = True
templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Napoleon (NumPy style docstrings) --
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = True
napoleon_include_private_with_doc = False
napoleon_use_admonition_for_examples = True
napoleon_use_admonition_for_notes = True
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_preprocess_types = True

# -- Autodocumentation settings --
autodoc_default_options = {
    "member-order": "bysource",
    "undoc-members": True,
    "exclude-members": "__weakref__",
    "show-inheritance": True,
}

autodoc_typehints = "description"
autodoc_typehints_format = "short"

# -- Intersphinx --
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
}

# -- HTML --
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "sticky_navigation": True,
    "navigation_depth": 4,
}

# -- Compile --
copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True

# forward references
autodoc_type_aliases = {
    "ArrayLike": "pysatl_evd.types.ArrayLike",
    "NumericArray": "pysatl_evd.types.NumericArray",
    "UniformSource": "pysatl_evd.distributions.sampling.UniformSource",
    "ArraySample": "pysatl_evd.distributions.sampling.ArraySample",
    "ContinuousSupport": "pysatl_evd.distributions.support.ContinuousSupport",
    "ExtremeValueDistribution": "pysatl_evd.distributions.distribution.ExtremeValueDistribution",
    "ParametrizationConstraint": "pysatl_evd.families.parametrizations.ParametrizationConstraint",
}

nitpicky = False
