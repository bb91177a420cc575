"""Common literal values used across kss_pages.

These constants keep filenames and reserved references centralized so
templates, generators, and tests can import the same values without drifting.
Intended for internal use within the kss_pages package.

Examples
--------
>>> from kss_pages import _constants
>>> _constants.SECTION_FILENAME_TEMPLATE.format(slug="2-1")
'section-2-1.html'
>>> _constants.HOMEPAGE_FILENAME
'index.html'
"""

HOMEPAGE_REFERENCE = "styleGuide.homepage"
HOMEPAGE_FILENAME = "index.html"
SECTION_FILENAME_TEMPLATE = "section-{slug}.html"
TEMPLATE_NAME = "index.html"
ASSETS_DIRNAME = "kss-assets"
NOT_FOUND_SUFFIX = " NOT FOUND!"
NO_DOCUMENTATION_MESSAGE = "No KSS documentation discovered in source files."
