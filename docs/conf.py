# Sphinx configuration for explodeview documentation

project = "explodeview"
copyright = "2026, mirmik"
author = "mirmik"

extensions = [
    "myst_parser",           # Markdown support
    "sphinx.ext.autodoc",    # Python autodoc
    "sphinx.ext.viewcode",   # Links to source code
]

# MyST settings
myst_enable_extensions = [
    "colon_fence",    # ::: for directives
    "fieldlist",      # :param: style
]

# Source files
source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

html_theme = "sphinx_book_theme"
html_title = "explodeview"

# Language
language = "ru"

autodoc_member_order = "bysource"
