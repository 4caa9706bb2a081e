# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# This will fail if numpy isn't installed, which it is for anyone with
# number-range installed.
from number_range import __version__

project = "number-range"
release = "v" + __version__
version = "v" + __version__
master_doc = 'index'

# https://www.sphinx-doc.org/en/master/usage/configuration.html#confval-html_show_copyright
html_show_copyright = False
# https://www.sphinx-doc.org/en/master/usage/configuration.html#confval-html_show_sphinx
html_show_sphinx = False

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
    "sphinx.ext.doctest"
]

intersphinx_mapping = {"python": ("https://docs.python.org/3", None),
                       "numpy": ("https://numpy.org/doc/stable/", None)}
# https://stackoverflow.com/a/37210251
autodoc_member_order = "bysource"

html_theme = "furo"

templates_path = ["_templates"]
exclude_patterns = []

# references that we want to use easily in any file
rst_prolog = """
.. |NumberRange| replace:: :class:`~number_range.parser.NumberRange`
.. |NumberRangeOptions| replace:: :class:`~number_range.options.NumberRangeOptions`
.. |Single| replace:: :class:`~number_range.parser.Single`
.. |Range| replace:: :class:`~number_range.parser.Range`
.. |parse| replace:: :func:`~number_range.parser.parse`
.. |compress| replace:: :func:`~number_range.compressor.compress`
.. |range_type| replace:: :func:`~number_range.argparser.range_type`
"""
