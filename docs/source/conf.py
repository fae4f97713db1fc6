# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

_this_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.abspath(os.path.join(_this_dir, "../..")))

import dyninterval  # noqa -- module import not at top of file.


project = dyninterval.__project__
copyright = dyninterval.__copyright__
author = dyninterval.__author__
release = dyninterval.__version__

extensions: list[str] = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

exclude_patterns: list[str] = []

html_theme = "sphinx_rtd_theme"
