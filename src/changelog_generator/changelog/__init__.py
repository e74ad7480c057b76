"""
Changelog rendering and merging.

:mod:`changelog_generator.changelog.renderer` turns parsed commits into a
dated markdown section and :mod:`changelog_generator.changelog.merger`
inserts that section into the changelog file.
"""

from .merger import MergeResult, merge_section  # noqa: F401
from .renderer import render_section  # noqa: F401
