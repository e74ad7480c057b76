"""
Version control system (VCS) integration.

This package contains the Git client used to look up the latest release
tag and to list the commits made since that tag.
"""

from .git_client import GitClient, GitError, RawCommit  # noqa: F401
