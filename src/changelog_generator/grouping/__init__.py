"""
Commit parsing and categorisation.

This package turns raw commit subjects into structured Conventional Commit
records. See :mod:`changelog_generator.grouping.commit_parser` and
:mod:`changelog_generator.grouping.commit_model` for details.
"""

from .commit_model import CATEGORY_ORDER, TYPE_MAP, ParsedCommit, category_key  # noqa: F401
from .commit_parser import parse_commit, parse_commits  # noqa: F401
