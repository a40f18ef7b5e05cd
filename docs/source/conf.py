import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "Respipe"
copyright = "2026, Respipe contributors"
author = "Respipe contributors"
import respipe

release = respipe.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

# Intersphinx mapping for external references
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Re-exports from respipe/__init__ produce duplicate cross-references
suppress_warnings = [
    "ref.python",
]

# Autodoc configuration
autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "Respipe"
