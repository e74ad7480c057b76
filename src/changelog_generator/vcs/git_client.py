"""
Git client implementation for changelog_generator.

This module wraps the two read-only Git queries the changelog generator
needs: the most recent reachable tag and the commit log since that tag.
All subprocess calls go through :meth:`GitClient._run` so that unit tests
can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ASCII unit separator; cannot appear in a one-line subject or author name.
FIELD_SEPARATOR = "\x1f"
LOG_FORMAT = FIELD_SEPARATOR.join(["%h", "%s", "%an", "%ad"])


@dataclass(frozen=True)
class RawCommit:
    """A single line of ``git log`` output."""

    hash: str
    subject: str
    author: str
    date: str  # YYYY-MM-DD, as produced by --date=short


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for querying a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------
    @staticmethod
    def is_repo(path: Path) -> bool:
        """Return True if the given path is the root of a Git repository."""
        return (path / ".git").exists()

    @staticmethod
    def find_repo_root(start: Path) -> Optional[Path]:
        """Find the root of the Git repository starting from ``start``.

        Walk upwards until a ``.git`` entry is found or the filesystem
        root is reached.
        """
        current = start.resolve()
        while True:
            if GitClient.is_repo(current):
                return current
            if current.parent == current:
                return None
            current = current.parent

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root.

        Raises
        ------
        GitError
            If the command exits with a non-zero status when ``check`` is True,
            or if the ``git`` executable cannot be found.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except FileNotFoundError as e:
            logger.error("Git executable not found: %s", e)
            raise GitError(f"Git executable not found: {e}") from e

        if check and result.returncode != 0:
            logger.error(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # History queries
    # ------------------------------------------------------------------
    def latest_tag(self) -> Optional[str]:
        """Return the nearest tag reachable from HEAD.

        Returns
        -------
        Optional[str]
            The tag name, or ``None`` when the repository has no tags. A
            missing tag is not an error: the caller treats it as the first
            release and reads the whole history.
        """
        result = self._run(["describe", "--tags", "--abbrev=0"], check=False)
        tag = result.stdout.strip()
        if result.returncode != 0 or not tag:
            logger.debug("No tag found: %s", result.stderr.strip())
            return None
        return tag

    def commits_since(self, tag: Optional[str]) -> List[RawCommit]:
        """List the commits made after ``tag``, most recent first.

        Parameters
        ----------
        tag : Optional[str]
            The release tag to start from. When ``None`` every commit
            reachable from HEAD is returned.

        Returns
        -------
        List[RawCommit]
            One record per commit, in ``git log`` order.

        Raises
        ------
        GitError
            If the log cannot be read (not a repository, unknown range, ...).
        """
        revision_range = f"{tag}..HEAD" if tag else "HEAD"
        result = self._run(
            ["log", revision_range, f"--pretty=format:{LOG_FORMAT}", "--date=short"],
            check=True,
        )

        commits: List[RawCommit] = []
        for line in result.stdout.split("\n"):
            if not line.strip():
                continue
            fields = line.split(FIELD_SEPARATOR)
            if len(fields) != 4 or not fields[0]:
                logger.warning("Skipping unexpected git log line: %r", line)
                continue
            commit_hash, subject, author, date = fields
            commits.append(RawCommit(hash=commit_hash, subject=subject, author=author, date=date))
        return commits
